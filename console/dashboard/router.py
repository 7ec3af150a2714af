"""Dashboard router — read-only endpoints for the dashboard widgets.

All endpoints require a logged-in session.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from console.auth.dependencies import get_backend, require_user
from console.common.constants import DEFAULT_RECENT_NOTIFICATIONS, DEFAULT_RECENT_WORKFLOWS
from console.common.transport import BackendClient
from console.dashboard.schemas import DashboardOverview, DashboardStats, DashboardTask
from console.dashboard.service import DashboardService
from console.meetings.schemas import Meeting
from console.notifications.schemas import Notification
from console.users.schemas import User

router = APIRouter()


# ── GET / — every widget at once ────────────────────────────────────

@router.get("", response_model=DashboardOverview)
async def dashboard_overview(
    date: Optional[str] = Query(None, description="YYYY-MM-DD, defaults to today"),
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    """Stats, recent workflows, today's meetings and recent notifications."""
    return await DashboardService.get_overview(backend, date)


# ── GET /stats ──────────────────────────────────────────────────────

@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats(
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    return await DashboardService.get_stats(backend)


# ── GET /recent-workflows ───────────────────────────────────────────

@router.get("/recent-workflows", response_model=List[DashboardTask])
async def recent_workflows(
    limit: int = Query(DEFAULT_RECENT_WORKFLOWS, ge=1, le=50),
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    return await DashboardService.get_recent_workflows(backend, limit)


# ── GET /today-meetings ─────────────────────────────────────────────

@router.get("/today-meetings", response_model=List[Meeting])
async def today_meetings(
    date: Optional[str] = Query(None, description="YYYY-MM-DD, defaults to today"),
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    return await DashboardService.get_today_meetings(backend, date)


# ── GET /recent-notifications ───────────────────────────────────────

@router.get("/recent-notifications", response_model=List[Notification])
async def recent_notifications(
    limit: int = Query(DEFAULT_RECENT_NOTIFICATIONS, ge=1, le=50),
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    return await DashboardService.get_recent_notifications(backend, limit)
