"""Department and role schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from console.common.models import BackendDTO, CamelModel


# ── Backend DTOs ────────────────────────────────────────────────────

class BackendDepartment(BackendDTO):
    """Row of ``/api/dept/list`` and the body of department writes."""

    id: str
    name: str
    parent_id: Optional[str] = None
    type: Optional[str] = None


class BackendRole(BackendDTO):
    id: str
    name: str
    description: Optional[str] = None


# ── View-models ─────────────────────────────────────────────────────

class Department(CamelModel):
    id: str
    name: str
    parent_id: Optional[str] = None
    manager_id: str = ""
    member_count: int = 0
    children: List["Department"] = []


class Role(CamelModel):
    id: str
    name: str
    description: Optional[str] = None


# ── Payloads ────────────────────────────────────────────────────────

class DepartmentCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)


class DepartmentUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
