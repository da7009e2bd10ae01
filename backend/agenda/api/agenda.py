from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel
from datetime import date, datetime
from typing import List, Optional, Union

from ..domain.dates import day_start
from ..services.agenda_service import AgendaService
from .dependencies import get_agenda_service

router = APIRouter(tags=["agenda"])


class ColorOut(BaseModel):
    foreground: Optional[str] = None
    background: Optional[str] = None


class CalendarOut(BaseModel):
    id: str
    title: Optional[str] = None
    timezone: Optional[str] = None
    color: ColorOut
    hidden: bool


class TimeRangeOut(BaseModel):
    start: datetime
    end: datetime


class AppointmentOut(BaseModel):
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    color: Optional[str] = None
    time: TimeRangeOut


class BusyTimeOut(BaseModel):
    start: date
    days: List[float]


@router.get("/calendars", response_model=List[CalendarOut])
async def list_calendars(service: AgendaService = Depends(get_agenda_service)):
    calendars = await service.get_calendars()
    return [
        CalendarOut(
            id=c.id,
            title=c.title,
            timezone=c.timezone,
            color=ColorOut(foreground=c.color.foreground, background=c.color.background),
            hidden=c.hidden,
        )
        for c in calendars
    ]


@router.get("/appointments", response_model=List[AppointmentOut])
async def list_appointments(
    start: Optional[datetime] = Query(default=None),
    end: Optional[datetime] = Query(default=None),
    service: AgendaService = Depends(get_agenda_service),
):
    appointments = await service.get_appointments(start, end)
    return [
        AppointmentOut(
            id=a.id,
            title=a.title,
            description=a.description,
            location=a.location,
            color=a.color,
            time=TimeRangeOut(start=a.time.start, end=a.time.end),
        )
        for a in appointments
    ]


@router.get("/busy-time", response_model=BusyTimeOut)
async def busy_time(
    start: Optional[Union[datetime, date]] = Query(default=None),
    service: AgendaService = Depends(get_agenda_service),
):
    """Busy hours per day for the week starting at ``start`` (default today)."""
    days = await service.get_busy_time(start)
    return BusyTimeOut(start=day_start(start).date(), days=days)
