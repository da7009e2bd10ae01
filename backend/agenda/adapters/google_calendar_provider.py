from __future__ import annotations
import asyncio
import logging
from datetime import datetime
from typing import Dict, Any, List, Optional, Sequence

from google.auth.exceptions import GoogleAuthError
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from prometheus_client import Counter

from ..errors import ProviderFailure
from ..ports.calendar_provider import CalendarProvider

logger = logging.getLogger(__name__)

PROVIDER_CALLS = Counter(
    "agenda_provider_calls_total", "Calendar provider calls", ["operation", "outcome"]
)


def to_rfc3339(value: datetime) -> str:
    """Serialize for timeMin/timeMax; naive values are taken as local time."""
    if value.tzinfo is None:
        value = value.astimezone()
    return value.isoformat()


def load_credentials(token_file: str, scopes: Optional[Sequence[str]] = None) -> Credentials:
    """Load an already-authorized user token (no consent flow here)."""
    return Credentials.from_authorized_user_file(token_file, list(scopes) if scopes else None)


class GoogleCalendarProvider(CalendarProvider):
    """Google Calendar v3 gateway.

    The discovery client is blocking, so each request is executed in a
    worker thread and awaited.
    """

    def __init__(self, credentials: Credentials):
        self._service = build('calendar', 'v3', credentials=credentials, cache_discovery=False)

    async def _execute(self, operation: str, request) -> Dict[str, Any]:
        try:
            result = await asyncio.to_thread(request.execute)
        except HttpError as e:
            PROVIDER_CALLS.labels(operation=operation, outcome="error").inc()
            logger.warning("Google Calendar %s failed: %s", operation, e)
            raise ProviderFailure(f"Google API error: {e}") from e
        except GoogleAuthError as e:
            PROVIDER_CALLS.labels(operation=operation, outcome="error").inc()
            logger.warning("Google Calendar %s failed to authorize: %s", operation, e)
            raise ProviderFailure(f"Google authorization error: {e}", code="PROVIDER_AUTH_ERROR") from e
        PROVIDER_CALLS.labels(operation=operation, outcome="ok").inc()
        return result or {}

    async def list_calendars(self, show_hidden: bool = True) -> List[Dict[str, Any]]:
        req = self._service.calendarList().list(showHidden=show_hidden)
        res = await self._execute("calendar_list", req)
        return res.get('items', [])

    async def list_colors(self) -> Dict[str, Dict[str, Any]]:
        res = await self._execute("colors", self._service.colors().get())
        return res.get('event', {})

    async def list_events(
        self,
        calendar_id: str,
        time_min: datetime,
        time_max: datetime,
        single_events: bool = True,
        order_by: str = "startTime",
        show_deleted: bool = False,
    ) -> List[Dict[str, Any]]:
        req = self._service.events().list(
            calendarId=calendar_id,
            timeMin=to_rfc3339(time_min),
            timeMax=to_rfc3339(time_max),
            singleEvents=single_events,
            orderBy=order_by,
            showDeleted=show_deleted,
        )
        res = await self._execute("events", req)
        return res.get('items', [])
