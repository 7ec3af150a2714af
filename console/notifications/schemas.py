"""Notification Pydantic schemas for request / response validation."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import Field

from console.common.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, NotificationType
from console.common.models import BackendDTO, CamelModel


class BackendNotification(BackendDTO):
    id: str
    title: str = ""
    content: str = ""
    type: str = NotificationType.system.value
    is_read: bool = False
    link: Optional[str] = None
    user_id: Optional[str] = None
    created_at: str = ""


class BackendNotificationsPage(BackendDTO):
    """Notifications use their own page shape rather than ``records``."""

    notifications: List[BackendNotification] = []
    total: int = 0
    unread_count: int = 0


class Notification(CamelModel):
    """Single notification in API responses."""

    id: str
    title: str
    content: str
    type: NotificationType
    is_read: bool
    created_at: str
    link: Optional[str] = None


class NotificationsPage(CamelModel):
    """Paginated list of notifications with the unread count."""

    notifications: List[Notification]
    total: int
    unread_count: int


class UnreadSummary(CamelModel):
    """Unread badge: backend total plus per-type counts."""

    count: int
    by_type: Dict[str, int]


class NotificationListQuery(CamelModel):
    type: Optional[NotificationType] = None
    is_read: Optional[bool] = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
