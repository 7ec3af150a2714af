"""User management endpoints — directory list, add, move, delete."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from console.auth.dependencies import get_backend, require_permission
from console.common.constants import UserStatus
from console.common.pagination import PaginationParams
from console.common.transport import BackendClient
from console.users.schemas import User, UserCreate, UserListQuery, UsersPage, UserUpdate
from console.users.service import UserService

router = APIRouter(prefix="", tags=["users"])


@router.get("", response_model=UsersPage)
async def list_users(
    search: Optional[str] = Query(default=None, description="Substring of name, email or phone"),
    department: Optional[str] = Query(default=None, description="Department id"),
    status: Optional[UserStatus] = Query(default=None),
    pagination: PaginationParams = Depends(),
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_permission("user:view")),
):
    query = UserListQuery(
        search=search,
        department=department,
        status=status,
        page=pagination.page,
        limit=pagination.limit,
    )
    return await UserService.get_users(backend, query)


@router.post("", status_code=201)
async def create_user(
    body: UserCreate,
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_permission("user:add")),
):
    await UserService.create_user(backend, body)
    return {"message": "User created"}


@router.put("")
async def update_user(
    body: UserUpdate,
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_permission("user:edit")),
):
    """Move a user to another department and/or role."""
    await UserService.update_user(backend, body)
    return {"message": "User updated"}


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_permission("user:delete")),
):
    await UserService.delete_user(backend, user_id)
    return {"message": "User deleted"}
