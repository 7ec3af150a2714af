"""Dashboard service — KPI stats and the recent/today widgets."""

from __future__ import annotations

import asyncio
from typing import List, Optional

from console.common.constants import DEFAULT_RECENT_NOTIFICATIONS, DEFAULT_RECENT_WORKFLOWS
from console.common.transport import BackendClient
from console.dashboard.schemas import (
    BackendDashboardStats,
    BackendDashboardTask,
    DashboardOverview,
    DashboardStats,
    DashboardTask,
)
from console.meetings.schemas import Meeting
from console.meetings.service import MeetingService
from console.notifications.schemas import Notification
from console.notifications.service import NotificationService


def map_dashboard_task(dto: BackendDashboardTask) -> DashboardTask:
    return DashboardTask.model_validate(dto.model_dump())


class DashboardService:
    """Read-only dashboard widgets."""

    @staticmethod
    async def get_stats(client: BackendClient) -> DashboardStats:
        data = await client.get("/api/dashboard/stats")
        dto = BackendDashboardStats.model_validate(data or {})
        return DashboardStats(**dto.model_dump())

    @staticmethod
    async def get_recent_workflows(
        client: BackendClient,
        limit: int = DEFAULT_RECENT_WORKFLOWS,
    ) -> List[DashboardTask]:
        data = await client.get("/api/dashboard/recent-workflows", params={"limit": limit})
        return [map_dashboard_task(BackendDashboardTask.model_validate(t)) for t in data or []]

    @staticmethod
    async def get_today_meetings(client: BackendClient, day: Optional[str] = None) -> List[Meeting]:
        return await MeetingService.get_today_meetings(client, day)

    @staticmethod
    async def get_recent_notifications(
        client: BackendClient,
        limit: int = DEFAULT_RECENT_NOTIFICATIONS,
    ) -> List[Notification]:
        return await NotificationService.get_recent(client, limit)

    @staticmethod
    async def get_overview(client: BackendClient, day: Optional[str] = None) -> DashboardOverview:
        """Fetch all four widgets concurrently; any failure fails the whole page."""
        stats, workflows, meetings, notifications = await asyncio.gather(
            DashboardService.get_stats(client),
            DashboardService.get_recent_workflows(client),
            DashboardService.get_today_meetings(client, day),
            DashboardService.get_recent_notifications(client),
        )
        if not stats.today_meetings:
            stats = stats.model_copy(update={"today_meetings": len(meetings)})
        return DashboardOverview(
            stats=stats,
            recent_workflows=workflows,
            today_meetings=meetings,
            recent_notifications=notifications,
        )
