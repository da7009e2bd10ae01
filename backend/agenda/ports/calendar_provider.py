from __future__ import annotations
from datetime import datetime
from typing import Protocol, Dict, Any, List


class CalendarProvider(Protocol):
    """Abstracts external calendar operations for testability."""

    async def list_calendars(self, show_hidden: bool = True) -> List[Dict[str, Any]]:
        """Return raw calendar list entries."""
        ...

    async def list_colors(self) -> Dict[str, Dict[str, Any]]:
        """Return the event colour palette keyed by colour id."""
        ...

    async def list_events(
        self,
        calendar_id: str,
        time_min: datetime,
        time_max: datetime,
        single_events: bool = True,
        order_by: str = "startTime",
        show_deleted: bool = False,
    ) -> List[Dict[str, Any]]:
        """Return raw event records between ``time_min`` and ``time_max``."""
        ...
