"""Meeting-room booking schemas."""

from __future__ import annotations

import datetime as dt
from typing import List, Optional

from pydantic import Field, field_validator, model_validator

from console.common.constants import MeetingStatus
from console.common.models import BackendDTO, CamelModel

_TIME_PATTERN = r"^\d{2}:\d{2}(:\d{2})?$"


# ── Backend DTOs ────────────────────────────────────────────────────

class BackendMeetingRoom(BackendDTO):
    id: str
    name: str
    capacity: int = 0
    equipment: Optional[str] = None
    location: str = ""
    description: Optional[str] = None


class BackendMeeting(BackendDTO):
    id: str
    title: str = ""
    room_id: str = ""
    organizer_id: str = ""
    attendees: Optional[str] = None
    date: str = ""
    start_time: str = ""
    end_time: str = ""
    description: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None


# ── View-models ─────────────────────────────────────────────────────

class MeetingRoom(CamelModel):
    id: str
    name: str
    capacity: int
    equipment: List[str] = []
    location: str = ""


class Meeting(CamelModel):
    id: str
    title: str
    room_id: str
    room_name: str = ""
    organizer: str = ""
    organizer_id: str = ""
    attendees: List[str] = []
    date: str
    start_time: str
    end_time: str
    description: str = ""
    status: MeetingStatus = MeetingStatus.upcoming


class Availability(CamelModel):
    room_id: str
    date: str
    start_time: str
    end_time: str
    available: bool


# ── Queries / payloads ──────────────────────────────────────────────

class MeetingListQuery(CamelModel):
    date: Optional[str] = None
    room_id: Optional[str] = None


class MeetingSlot(CamelModel):
    room_id: str = Field(..., pattern=r"^\d+$")
    date: dt.date
    start_time: str = Field(..., pattern=_TIME_PATTERN)
    end_time: str = Field(..., pattern=_TIME_PATTERN)

    @model_validator(mode="after")
    def _end_after_start(self) -> "MeetingSlot":
        if self.end_time <= self.start_time:
            raise ValueError("endTime must be after startTime")
        return self


class MeetingCreate(MeetingSlot):
    title: str = Field(..., min_length=1)
    attendees: List[str] = []
    description: str = ""

    @field_validator("attendees", mode="before")
    @classmethod
    def _split_attendees(cls, v):
        # The booking form sends a comma-separated string
        if isinstance(v, str):
            return [a.strip() for a in v.split(",") if a.strip()]
        return v
