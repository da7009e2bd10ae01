"""Map raw Google Calendar records into Calendar / Appointment values."""
from __future__ import annotations
from datetime import date, datetime, time
from typing import Any, Dict, Iterable, List, Optional

from ..domain.dates import to_local
from ..domain.models import Appointment, Calendar, CalendarColor, TimeRange

# Google's event palette is keyed "1".."11"; events without a colorId use the first entry.
DEFAULT_COLOR_ID = "1"


def parse_event_boundary(boundary: Dict[str, Any]) -> datetime:
    """Resolve an event ``start``/``end`` object, preferring ``dateTime`` over ``date``."""
    value = boundary.get("dateTime")
    if value:
        return to_local(datetime.fromisoformat(value.replace("Z", "+00:00")))
    return datetime.combine(date.fromisoformat(boundary["date"]), time.min)


def map_calendar(raw: Dict[str, Any]) -> Calendar:
    return Calendar(
        id=raw["id"],
        title=raw.get("summary"),
        timezone=raw.get("timeZone"),
        color=CalendarColor(
            foreground=raw.get("foregroundColor"),
            background=raw.get("backgroundColor"),
        ),
        hidden=not raw.get("selected", False),
    )


def map_calendars(raw_list: Iterable[Dict[str, Any]]) -> List[Calendar]:
    return [map_calendar(raw) for raw in raw_list]


def resolve_color(color_id: Optional[str], color_table: Dict[str, Dict[str, Any]]) -> Optional[str]:
    entry = color_table.get(str(color_id or DEFAULT_COLOR_ID))
    if not entry:
        return None
    return entry.get("background")


def map_appointment(raw: Dict[str, Any], color_table: Dict[str, Dict[str, Any]]) -> Appointment:
    return Appointment(
        id=raw["id"],
        title=raw.get("summary"),
        description=raw.get("description"),
        location=raw.get("location"),
        color=resolve_color(raw.get("colorId"), color_table),
        time=TimeRange(
            start=parse_event_boundary(raw["start"]),
            end=parse_event_boundary(raw["end"]),
        ),
    )


def map_appointments(
    raw_events: Iterable[Dict[str, Any]],
    color_table: Dict[str, Dict[str, Any]],
) -> List[Appointment]:
    return [map_appointment(raw, color_table) for raw in raw_events]
