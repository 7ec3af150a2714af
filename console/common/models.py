"""Shared pydantic bases: UI view-models and backend DTOs."""

from __future__ import annotations

from typing import Any, Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """UI-facing model; serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BackendDTO(BaseModel):
    """Backend JSON shape; unknown keys ignored, numeric ids read as strings.

    Explicit ``null`` values are dropped before validation so field defaults apply.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class PageDTO(BackendDTO, Generic[T]):
    """Paged backend object: ``{"records": [...], "total", "size", "current"}``."""

    records: List[T] = []
    total: int = 0
    size: int = 0
    current: int = 1
