"""Meeting booking endpoints — rooms, bookings, availability."""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from console.auth.dependencies import get_backend, require_user
from console.common.transport import BackendClient
from console.meetings.schemas import (
    Availability,
    Meeting,
    MeetingCreate,
    MeetingListQuery,
    MeetingRoom,
    MeetingSlot,
)
from console.meetings.service import MeetingService, meetings_for_user, meetings_in_slot
from console.users.schemas import User

router = APIRouter(prefix="", tags=["meetings"])


@router.get("/rooms", response_model=List[MeetingRoom])
async def list_rooms(
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    return await MeetingService.get_meeting_rooms(backend)


@router.get("", response_model=List[Meeting])
async def list_meetings(
    date: Optional[str] = Query(default=None, description="YYYY-MM-DD"),
    room_id: Optional[str] = Query(default=None, alias="roomId"),
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    meetings = await MeetingService.get_meetings(backend, MeetingListQuery(date=date, room_id=room_id))
    if date and room_id:
        return meetings_in_slot(meetings, room_id, date)
    return meetings


@router.get("/today", response_model=List[Meeting])
async def today_meetings(
    date: Optional[str] = Query(default=None, description="YYYY-MM-DD, defaults to today"),
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    return await MeetingService.get_today_meetings(backend, date)


@router.get("/mine", response_model=List[Meeting])
async def my_meetings(
    date: Optional[str] = Query(default=None, description="YYYY-MM-DD, defaults to today"),
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    """Meetings on the day that the current user organizes or attends."""
    day = date or _today()
    meetings = await MeetingService.get_meetings(backend, MeetingListQuery(date=day))
    return meetings_for_user(meetings, user, day)


def _slot(
    room_id: str = Query(..., alias="roomId"),
    day: str = Query(..., alias="date", description="YYYY-MM-DD"),
    start_time: str = Query(..., alias="startTime", description="HH:MM"),
    end_time: str = Query(..., alias="endTime", description="HH:MM"),
) -> MeetingSlot:
    try:
        return MeetingSlot(room_id=room_id, date=day, start_time=start_time, end_time=end_time)
    except ValidationError as e:
        raise RequestValidationError(e.errors()) from e


@router.get("/check-availability", response_model=Availability)
async def check_availability(
    slot: MeetingSlot = Depends(_slot),
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    return await MeetingService.check_availability(backend, slot)


@router.post("", status_code=201)
async def book_meeting(
    body: MeetingCreate,
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    meeting = await MeetingService.create_meeting(backend, body)
    return {"message": "Meeting booked", "data": meeting}


@router.delete("/{meeting_id}")
async def cancel_meeting(
    meeting_id: str,
    backend: BackendClient = Depends(get_backend),
    user: User = Depends(require_user),
):
    await MeetingService.delete_meeting(backend, meeting_id)
    return {"message": "Meeting cancelled"}


def _today() -> str:
    return date.today().isoformat()
