"""Dashboard response schemas."""

from __future__ import annotations

from typing import List, Optional

from console.common.models import BackendDTO, CamelModel
from console.meetings.schemas import Meeting
from console.notifications.schemas import Notification


class DashboardStats(CamelModel):
    pending_approvals: int = 0
    unread_notifications: int = 0
    today_meetings: int = 0
    total_employees: int = 0
    monthly_workflows: int = 0
    approval_rate: float = 0


class BackendDashboardStats(BackendDTO):
    pending_approvals: int = 0
    unread_notifications: int = 0
    today_meetings: int = 0
    total_employees: int = 0
    monthly_workflows: int = 0
    approval_rate: float = 0


class BackendDashboardTask(BackendDTO):
    id: str
    name: str = ""
    description: Optional[str] = None
    assignee: Optional[str] = None
    owner: Optional[str] = None
    create_time: Optional[str] = None
    due_date: Optional[str] = None


class DashboardTask(CamelModel):
    """Summary of a task for the "recent workflows" widget (no status)."""

    id: str
    name: str
    description: Optional[str] = None
    assignee: Optional[str] = None
    owner: Optional[str] = None
    create_time: Optional[str] = None
    due_date: Optional[str] = None


class DashboardOverview(CamelModel):
    """Everything the dashboard page renders, fetched in one fan-out."""

    stats: DashboardStats
    recent_workflows: List[DashboardTask]
    today_meetings: List[Meeting]
    recent_notifications: List[Notification]
