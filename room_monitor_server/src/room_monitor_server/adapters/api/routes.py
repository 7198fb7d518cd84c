# room_monitor/adapters/api/routes.py

from datetime import date, datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from room_monitor_core.config.environments import get_settings
from room_monitor_core.domain.rooms import room_ids
from room_monitor_core.domain.schemas import RoomStatusOut, SensorReadingOut

from room_monitor_server.simulation import current_status, readings_for_day

router = APIRouter()


def get_rooms() -> List[str]:
    settings = get_settings()
    return room_ids(settings.ROOM_PREFIX, settings.ROOM_COUNT)


def get_now() -> datetime:
    return datetime.now()


@router.get("/ping")
def ping():
    return {"status": "ok"}


@router.get("/api/readings/{room}/{day}", response_model=list[SensorReadingOut])
def room_readings(
    room: str,
    day: date,
    rooms: List[str] = Depends(get_rooms),
    now: datetime = Depends(get_now),
):
    if room not in rooms:
        raise HTTPException(status_code=404, detail=f"Unknown room {room!r}")
    return [SensorReadingOut.from_domain(r) for r in readings_for_day(room, day, now)]


@router.get("/api/current-status", response_model=list[RoomStatusOut])
def room_status(
    rooms: List[str] = Depends(get_rooms),
    now: datetime = Depends(get_now),
):
    return [RoomStatusOut.from_domain(s) for s in current_status(rooms, now)]
