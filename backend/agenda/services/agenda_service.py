"""Calendar, appointment and busy-time queries over a calendar provider."""
from __future__ import annotations
import logging
from datetime import date, datetime
from typing import List, Optional, Union

from ..domain.dates import add_days, day_end, day_start, to_local
from ..domain.models import Appointment, Calendar
from ..errors import InvalidRangeError
from ..ports.calendar_provider import CalendarProvider
from .mapper import map_appointments, map_calendars

logger = logging.getLogger(__name__)

DEFAULT_CALENDAR_ID = "primary"
BUSY_TIME_DAYS = 7


class AgendaService:
    def __init__(self, provider: CalendarProvider, calendar_id: Optional[str] = None):
        self.provider = provider
        self.calendar_id = calendar_id or DEFAULT_CALENDAR_ID

    async def get_calendars(self) -> List[Calendar]:
        raw = await self.provider.list_calendars(show_hidden=True)
        return map_calendars(raw)

    async def get_appointments(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[Appointment]:
        """Appointments on the configured calendar between ``start`` and ``end``.

        Defaults to today (local midnight to 23:59:59). Raises
        ``InvalidRangeError`` without contacting the provider when
        ``start`` is not before ``end``.
        """
        start = to_local(start) if start is not None else day_start()
        end = to_local(end) if end is not None else day_end()
        if start >= end:
            raise InvalidRangeError()

        colors = await self.provider.list_colors()
        events = await self.provider.list_events(
            calendar_id=self.calendar_id,
            time_min=start,
            time_max=end,
            single_events=True,
            order_by="startTime",
            show_deleted=False,
        )
        logger.debug("fetched %d events from %s between %s and %s", len(events), self.calendar_id, start, end)
        return map_appointments(events, colors)

    async def get_busy_time(self, start: Optional[Union[date, datetime]] = None) -> List[float]:
        """Busy hours per day for the 7 days starting at ``start`` (default today).

        Each appointment contributes the difference of its end and start
        time-of-day in hours, rounded to two decimals. Appointments crossing
        midnight therefore contribute a negative amount.
        """
        base = day_start(start)
        totals: List[float] = []
        for day_n in range(BUSY_TIME_DAYS):
            start_date = add_days(base, day_n)
            end_date = add_days(base, day_n + 1)
            total = 0.0
            for appointment in await self.get_appointments(start_date, end_date):
                total += round(appointment.time.minutes_of_day / 60, 2)
            totals.append(total)
        logger.debug("busy time from %s: %s", base.date(), totals)
        return totals
