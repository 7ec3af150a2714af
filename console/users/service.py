"""User service — directory listing, create/update/delete, current user."""

from __future__ import annotations

from typing import Iterable, List, Optional

from console.common.constants import UNKNOWN_AVATAR, UNKNOWN_USER_NAME, UserRole, UserStatus
from console.common.models import PageDTO
from console.common.transport import BackendClient
from console.users.schemas import (
    BackendUser,
    BackendUserInfo,
    User,
    UserCreate,
    UserListQuery,
    UsersPage,
    UserUpdate,
)


# ── Mapping ─────────────────────────────────────────────────────────


def _avatar(name: str) -> str:
    return name[:2].upper()


def map_user_info(dto: BackendUserInfo) -> User:
    """Directory row → User. The DTO carries no email, phone or status."""
    name = f"{dto.first_name or ''}{dto.last_name or ''}".strip() or UNKNOWN_USER_NAME
    return User(
        id=dto.id,
        name=name,
        avatar=_avatar(name),
        department=dto.dept_id or "",
        role=dto.role_id or UserRole.employee.value,
        department_name=dto.dept_name or "",
        role_name=dto.role_name or "",
    )


def map_account(dto: Optional[BackendUser]) -> User:
    """Account record → User; a missing record becomes the placeholder user."""
    if dto is None:
        return User(id="", name=UNKNOWN_USER_NAME, avatar=UNKNOWN_AVATAR)
    name = (
        dto.display_name
        or f"{dto.first_name or ''}{dto.last_name or ''}"
        or (dto.email.split("@")[0] if dto.email else "")
        or UNKNOWN_USER_NAME
    )
    return User(id=dto.id or "", name=name, email=dto.email or "", avatar=_avatar(name))


def filter_users(
    users: Iterable[User],
    search: Optional[str] = None,
    status: Optional[UserStatus] = None,
) -> List[User]:
    """Local filter: substring match on name/email/phone, exact status."""
    result = []
    for user in users:
        if search and not (
            search in user.name or search in user.email or search in user.phone
        ):
            continue
        if status is not None and user.status != status:
            continue
        result.append(user)
    return result


# ── Service ─────────────────────────────────────────────────────────


class UserService:
    """Async user-directory operations against the backend."""

    @staticmethod
    async def get_users(client: BackendClient, query: UserListQuery) -> UsersPage:
        data = await client.get(
            "/api/users/list",
            params={
                "department": query.department or None,
                "page": query.page,
                "limit": query.limit,
            },
        )
        page = PageDTO[BackendUserInfo].model_validate(data or {})
        users = filter_users(
            (map_user_info(r) for r in page.records),
            search=query.search,
            status=query.status,
        )
        return UsersPage(
            users=users,
            total=page.total,
            page=page.current,
            page_size=page.size,
        )

    @staticmethod
    async def create_user(client: BackendClient, payload: UserCreate) -> None:
        # The created record is not needed; callers refresh the list
        await client.post("/api/users/add", json=payload.model_dump(by_alias=True, mode="json"))

    @staticmethod
    async def update_user(client: BackendClient, payload: UserUpdate) -> None:
        await client.put("/api/users/update", json=payload.model_dump(by_alias=True))

    @staticmethod
    async def delete_user(client: BackendClient, user_id: str) -> None:
        await client.delete(f"/api/users/delete/{user_id}")

    @staticmethod
    async def get_current_user(client: BackendClient) -> User:
        data = await client.get("/api/me")
        dto = BackendUser.model_validate(data) if data else None
        return map_account(dto)
