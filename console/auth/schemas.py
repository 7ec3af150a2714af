"""Auth Pydantic schemas — login, session state, permission checks."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from console.common.models import BackendDTO, CamelModel
from console.users.schemas import User


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class BackendLoginResult(BackendDTO):
    user_id: str
    token: str = Field(..., min_length=1)


class SessionResponse(CamelModel):
    """Current session as seen by the console."""

    authenticated: bool
    user_id: Optional[str] = None
    user: Optional[User] = None


class PermissionCheck(CamelModel):
    codes: List[str] = Field(..., min_length=1)


class PermissionResult(CamelModel):
    allowed: bool
    granted: List[str]
