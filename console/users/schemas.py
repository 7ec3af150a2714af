"""User schemas — backend DTOs, UI view-models, and request payloads.

Naming conventions:
  - Backend*           → backend JSON shapes (read)
  - *Create / *Update  → request bodies forwarded to the backend (write)
  - everything else    → UI-facing view-models
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import EmailStr, Field

from console.common.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, UserRole, UserStatus
from console.common.models import BackendDTO, CamelModel


# ═════════════════════════════════════════════════════════════════════
# Backend DTOs
# ═════════════════════════════════════════════════════════════════════


class BackendUser(BackendDTO):
    """Account record returned by ``/api/me`` and ``/api/users/add``."""

    id: str = ""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    display_name: Optional[str] = None
    email: str = ""
    tenant_id: Optional[str] = None
    picture_set: Optional[bool] = None


class BackendUserInfo(BackendDTO):
    """Directory row returned by ``/api/users/list`` and department members."""

    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    dept_id: Optional[str] = None
    role_id: Optional[str] = None
    dept_name: Optional[str] = None
    role_name: Optional[str] = None


# ═════════════════════════════════════════════════════════════════════
# View-models
# ═════════════════════════════════════════════════════════════════════


class User(CamelModel):
    """A user as the console shows it.

    ``department`` and ``role`` hold the backend ids (they are what the
    update endpoint expects); the display names travel alongside.
    """

    id: str
    name: str
    email: str = ""
    avatar: str
    department: str = ""
    role: str = UserRole.employee.value
    phone: str = ""
    status: UserStatus = UserStatus.active
    created_at: str = ""
    department_name: Optional[str] = None
    role_name: Optional[str] = None


class UsersPage(CamelModel):
    users: List[User]
    total: int
    page: int
    page_size: int


# ═════════════════════════════════════════════════════════════════════
# Queries / payloads
# ═════════════════════════════════════════════════════════════════════


class UserListQuery(CamelModel):
    """``search`` and ``status`` are applied locally; the backend filters by department only."""

    search: Optional[str] = None
    department: Optional[str] = None
    status: Optional[UserStatus] = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)


class UserCreate(CamelModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = ""
    email: EmailStr
    department: str
    role: str


class UserUpdate(CamelModel):
    """Moves a user between departments/roles; the backend needs the old pair too."""

    id: str
    old_dept: str
    old_role: str
    new_dept: str
    new_role: str
