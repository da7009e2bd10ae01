"""Plain data shapes produced from calendar provider records."""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class CalendarColor:
    foreground: Optional[str] = None
    background: Optional[str] = None


@dataclass(frozen=True)
class Calendar:
    id: str
    title: Optional[str]
    timezone: Optional[str]
    color: CalendarColor
    hidden: bool


@dataclass(frozen=True)
class TimeRange:
    start: datetime
    end: datetime

    @property
    def minutes_of_day(self) -> int:
        """Difference between the time-of-day components, ignoring the date."""
        start_minutes = self.start.hour * 60 + self.start.minute
        end_minutes = self.end.hour * 60 + self.end.minute
        return end_minutes - start_minutes


@dataclass(frozen=True)
class Appointment:
    id: str
    title: Optional[str]
    description: Optional[str]
    location: Optional[str]
    color: Optional[str]
    time: TimeRange
