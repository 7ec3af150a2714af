"""Notification endpoints — list, unread badges, mark read, delete."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from console.auth.dependencies import get_backend, require_user
from console.common.constants import NotificationType
from console.common.pagination import PaginationParams
from console.common.transport import BackendClient
from console.notifications.schemas import NotificationListQuery, NotificationsPage
from console.notifications.service import NotificationService
from console.users.schemas import User

router = APIRouter(prefix="", tags=["notifications"])


# ── GET / — list notifications ──────────────────────────────────────

@router.get("", response_model=NotificationsPage)
async def list_notifications(
    is_read: Optional[bool] = Query(default=None, alias="isRead", description="Filter by read status"),
    type: Optional[NotificationType] = Query(default=None, description="Filter by notification type"),
    pagination: PaginationParams = Depends(),
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    query = NotificationListQuery(
        type=type, is_read=is_read, page=pagination.page, limit=pagination.limit,
    )
    return await NotificationService.get_notifications(backend, query)


# ── GET /unread-count — badge counts per type ───────────────────────

@router.get("/unread-count")
async def unread_count(
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    return {"data": await NotificationService.get_unread_summary(backend)}


# ── PUT /read-all — bulk mark all as read ───────────────────────────

@router.put("/read-all")
async def mark_all_read(
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    await NotificationService.mark_all_as_read(backend)
    return {"message": "All notifications marked as read"}


# ── PUT /{notification_id}/read — mark single as read ───────────────

@router.put("/{notification_id}/read")
async def mark_read(
    notification_id: str,
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    notification = await NotificationService.mark_as_read(backend, notification_id)
    return {"message": "Notification marked as read", "data": notification}


# ── DELETE /{notification_id} ───────────────────────────────────────

@router.delete("/{notification_id}")
async def delete_notification(
    notification_id: str,
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    await NotificationService.delete_notification(backend, notification_id)
    return {"message": "Notification deleted"}
