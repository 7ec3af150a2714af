"""Notification service — list, mark read, bulk mark, delete."""

from __future__ import annotations

from typing import Dict, Iterable, List

from console.common.constants import MAX_PAGE_SIZE, NotificationType
from console.common.transport import BackendClient
from console.notifications.schemas import (
    BackendNotification,
    BackendNotificationsPage,
    Notification,
    NotificationListQuery,
    NotificationsPage,
    UnreadSummary,
)


def map_notification(dto: BackendNotification) -> Notification:
    try:
        kind = NotificationType(dto.type)
    except ValueError:
        kind = NotificationType.system
    return Notification(
        id=dto.id,
        title=dto.title,
        content=dto.content,
        type=kind,
        is_read=dto.is_read,
        link=dto.link or None,
        created_at=dto.created_at,
    )


def unread_by_type(notifications: Iterable[Notification]) -> Dict[str, int]:
    """Unread badge counts per notification type (every type present, zero included)."""
    counts = {t.value: 0 for t in NotificationType}
    for n in notifications:
        if not n.is_read:
            counts[n.type.value] += 1
    return counts


class NotificationService:
    """Async notification operations."""

    @staticmethod
    async def get_notifications(client: BackendClient, query: NotificationListQuery) -> NotificationsPage:
        params = {
            "type": query.type.value if query.type else None,
            "isRead": query.is_read,
            "page": query.page,
            "limit": query.limit,
        }
        data = await client.get("/api/notifications", params=params)
        page = BackendNotificationsPage.model_validate(data or {})
        return NotificationsPage(
            notifications=[map_notification(n) for n in page.notifications],
            total=page.total,
            unread_count=page.unread_count,
        )

    @staticmethod
    async def get_unread_summary(client: BackendClient, page_size: int = MAX_PAGE_SIZE) -> UnreadSummary:
        """Page through every unread notification so per-type counts match the total."""
        first = await NotificationService.get_notifications(
            client, NotificationListQuery(is_read=False, page=1, limit=page_size),
        )
        unread = list(first.notifications)
        page = 1
        while first.notifications and len(unread) < first.total:
            page += 1
            nxt = await NotificationService.get_notifications(
                client, NotificationListQuery(is_read=False, page=page, limit=page_size),
            )
            if not nxt.notifications:
                break
            unread.extend(nxt.notifications)
        return UnreadSummary(count=first.unread_count, by_type=unread_by_type(unread))

    @staticmethod
    async def get_recent(client: BackendClient, limit: int) -> List[Notification]:
        data = await client.get("/api/dashboard/recent-notifications", params={"limit": limit})
        return [map_notification(BackendNotification.model_validate(n)) for n in data or []]

    @staticmethod
    async def mark_as_read(client: BackendClient, notification_id: str) -> Notification:
        data = await client.put(f"/api/notifications/{notification_id}/read")
        return map_notification(BackendNotification.model_validate(data))

    @staticmethod
    async def mark_all_as_read(client: BackendClient) -> None:
        await client.put("/api/notifications/read-all")

    @staticmethod
    async def delete_notification(client: BackendClient, notification_id: str) -> None:
        await client.delete(f"/api/notifications/{notification_id}")
