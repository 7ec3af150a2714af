"""Meeting service — rooms, bookings, availability.

Meeting lists are always fetched together with the room list (fan-out, then
fan-in) so each meeting can carry its room's name.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional

from console.common.constants import (
    ATTENDEE_SEPARATORS,
    EQUIPMENT_SEPARATORS,
    MeetingStatus,
)
from console.common.exceptions import AppException, AuthenticationRequired
from console.common.transport import BackendClient
from console.meetings.schemas import (
    Availability,
    BackendMeeting,
    BackendMeetingRoom,
    Meeting,
    MeetingCreate,
    MeetingListQuery,
    MeetingRoom,
    MeetingSlot,
)
from console.users.schemas import User

logger = logging.getLogger(__name__)

_KNOWN_STATUSES = {s.value for s in MeetingStatus}


# ── Mapping ─────────────────────────────────────────────────────────


def split_equipment(value: Optional[str]) -> List[str]:
    """``"Projector、Whiteboard"`` → ``["Projector", "Whiteboard"]``."""
    if not value:
        return []
    return [part.strip() for part in EQUIPMENT_SEPARATORS.split(value) if part.strip()]


def split_attendees(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [part.strip() for part in ATTENDEE_SEPARATORS.split(value) if part.strip()]


def _parse_moment(day: str, clock: str) -> Optional[datetime]:
    for fmt in ("%Y-%m-%d %H:%M:%S", "%Y-%m-%d %H:%M"):
        try:
            return datetime.strptime(f"{day} {clock}", fmt)
        except ValueError:
            continue
    return None


def derive_meeting_status(dto: BackendMeeting, now: Optional[datetime] = None) -> MeetingStatus:
    """Use the backend status when it is a known value, else infer it from the clock.

    Before the start → upcoming, between start and end → ongoing, after the
    end → completed. Dates that cannot be parsed count as upcoming.
    """
    if dto.status in _KNOWN_STATUSES:
        return MeetingStatus(dto.status)

    start = _parse_moment(dto.date, dto.start_time)
    end = _parse_moment(dto.date, dto.end_time)
    if start is None or end is None:
        return MeetingStatus.upcoming

    now = now or datetime.now()
    if now < start:
        return MeetingStatus.upcoming
    if now < end:
        return MeetingStatus.ongoing
    return MeetingStatus.completed


def map_room(dto: BackendMeetingRoom) -> MeetingRoom:
    return MeetingRoom(
        id=dto.id,
        name=dto.name,
        capacity=dto.capacity,
        equipment=split_equipment(dto.equipment),
        location=dto.location,
    )


def map_meeting(
    dto: BackendMeeting,
    rooms: Optional[Dict[str, MeetingRoom]] = None,
    now: Optional[datetime] = None,
) -> Meeting:
    room = (rooms or {}).get(dto.room_id)
    return Meeting(
        id=dto.id,
        title=dto.title,
        room_id=dto.room_id,
        room_name=room.name if room else "",
        # Only the organizer id is available; the name needs a user lookup
        organizer="",
        organizer_id=dto.organizer_id,
        attendees=split_attendees(dto.attendees),
        date=dto.date,
        start_time=dto.start_time,
        end_time=dto.end_time,
        description=dto.description or "",
        status=derive_meeting_status(dto, now),
    )


def meetings_in_slot(meetings: Iterable[Meeting], room_id: str, day: str) -> List[Meeting]:
    """Bookings of one room on one day, as shown in the booking grid."""
    return [m for m in meetings if m.room_id == room_id and m.date == day]


def meetings_for_user(meetings: Iterable[Meeting], user: User, day: str) -> List[Meeting]:
    """Meetings on *day* the user organizes or attends (attendees are names)."""
    return [
        m for m in meetings
        if m.date == day and (m.organizer_id == user.id or user.name in m.attendees)
    ]


# ── Service ─────────────────────────────────────────────────────────


class MeetingService:
    """Async meeting-room operations."""

    @staticmethod
    async def get_meeting_rooms(client: BackendClient) -> List[MeetingRoom]:
        data = await client.get("/api/meeting-rooms")
        return [map_room(BackendMeetingRoom.model_validate(r)) for r in data or []]

    @staticmethod
    async def _with_rooms(client: BackendClient, meetings_call) -> List[Meeting]:
        rooms, data = await asyncio.gather(
            MeetingService.get_meeting_rooms(client),
            meetings_call,
        )
        room_map = {r.id: r for r in rooms}
        return [map_meeting(BackendMeeting.model_validate(m), room_map) for m in data or []]

    @staticmethod
    async def get_meetings(client: BackendClient, query: MeetingListQuery) -> List[Meeting]:
        return await MeetingService._with_rooms(
            client,
            client.get("/api/meetings", params={"date": query.date, "roomId": query.room_id}),
        )

    @staticmethod
    async def get_today_meetings(client: BackendClient, day: Optional[str] = None) -> List[Meeting]:
        day = day or date.today().isoformat()
        return await MeetingService._with_rooms(
            client,
            client.get("/api/dashboard/today-meetings", params={"date": day}),
        )

    @staticmethod
    async def create_meeting(client: BackendClient, payload: MeetingCreate) -> Meeting:
        body = payload.model_dump(by_alias=True, mode="json")
        body["roomId"] = int(payload.room_id)
        data = await client.post("/api/meetings", json=body)
        meeting = BackendMeeting.model_validate(data)
        # The booking exists now; a failed room lookup only costs the room name
        try:
            rooms = await MeetingService.get_meeting_rooms(client)
        except AuthenticationRequired:
            raise
        except AppException as e:
            logger.warning("Meeting %s booked but room lookup failed: %s", meeting.id, e.detail)
            rooms = []
        return map_meeting(meeting, {r.id: r for r in rooms})

    @staticmethod
    async def delete_meeting(client: BackendClient, meeting_id: str) -> None:
        await client.delete(f"/api/meetings/{meeting_id}")

    @staticmethod
    async def check_availability(client: BackendClient, slot: MeetingSlot) -> Availability:
        params = slot.model_dump(by_alias=True, mode="json")
        data = await client.get("/api/meetings/check-availability", params=params)
        return Availability(
            room_id=slot.room_id,
            date=params["date"],
            start_time=slot.start_time,
            end_time=slot.end_time,
            available=bool((data or {}).get("available")),
        )
