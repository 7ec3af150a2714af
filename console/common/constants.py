"""Enums and constants for the OA console — matching the UI-facing value sets."""

from __future__ import annotations

import enum
import re


# ── Users / Roles ───────────────────────────────────────────────────

class UserRole(str, enum.Enum):
    admin = "admin"
    manager = "manager"
    employee = "employee"


class UserStatus(str, enum.Enum):
    active = "active"
    inactive = "inactive"


# ── Workflows ───────────────────────────────────────────────────────

class WorkflowType(str, enum.Enum):
    leave = "leave"
    expense = "expense"
    procurement = "procurement"
    travel = "travel"


class WorkflowStatus(str, enum.Enum):
    pending = "pending"
    processing = "processing"
    approved = "approved"
    rejected = "rejected"


class ApproverStatus(str, enum.Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


# ── Meetings ────────────────────────────────────────────────────────

class MeetingStatus(str, enum.Enum):
    upcoming = "upcoming"
    ongoing = "ongoing"
    completed = "completed"
    cancelled = "cancelled"


# ── Notifications ───────────────────────────────────────────────────

class NotificationType(str, enum.Enum):
    system = "system"
    workflow = "workflow"
    meeting = "meeting"
    announcement = "announcement"


# ── Backend envelope ────────────────────────────────────────────────

# Some backend endpoints report success as code=0, others as code=1
SUCCESS_CODES = frozenset({0, 1})

# Local storage keys holding the session
TOKEN_KEY = "token"
USER_ID_KEY = "userId"
SESSION_KEYS = (TOKEN_KEY, USER_ID_KEY)

# Console endpoint that exchanges credentials for a session
LOGIN_ENDPOINT = "/api/v1/auth/login"

# ── Mapping helpers ─────────────────────────────────────────────────

EQUIPMENT_SEPARATORS = re.compile(r"[、,，]")
ATTENDEE_SEPARATORS = re.compile(r"[;,，、]")

UNKNOWN_USER_NAME = "Unknown user"
UNKNOWN_AVATAR = "??"
DEFAULT_WORKFLOW_TITLE = "Workflow"

# ── Misc constants ──────────────────────────────────────────────────

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 50
DEFAULT_RECENT_WORKFLOWS = 5
DEFAULT_RECENT_NOTIFICATIONS = 3
