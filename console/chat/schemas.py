"""AI chat schemas."""

from __future__ import annotations

from typing import List, Literal

from pydantic import Field

from console.common.models import CamelModel


class ChatMessage(CamelModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(CamelModel):
    message: str = Field(..., min_length=1)
    history: List[ChatMessage] = []


class ChatReply(CamelModel):
    role: Literal["assistant"] = "assistant"
    content: str
    model: str
