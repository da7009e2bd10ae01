from __future__ import annotations
from functools import lru_cache
from typing import Tuple

from fastapi import Depends
from google.oauth2.credentials import Credentials

from ..adapters.google_calendar_provider import GoogleCalendarProvider, load_credentials
from ..config import Settings, get_settings
from ..errors import ProviderNotConfigured
from ..ports.calendar_provider import CalendarProvider
from ..services.agenda_service import AgendaService


@lru_cache(maxsize=4)
def _cached_credentials(token_file: str, scopes: Tuple[str, ...]) -> Credentials:
    return load_credentials(token_file, scopes)


def get_calendar_provider(settings: Settings = Depends(get_settings)) -> CalendarProvider:
    """A fresh provider per request; the discovery client's HTTP transport is not thread-safe."""
    if not settings.google_token_file:
        raise ProviderNotConfigured()
    creds = _cached_credentials(settings.google_token_file, tuple(settings.google_scopes))
    return GoogleCalendarProvider(creds)


def get_agenda_service(
    provider: CalendarProvider = Depends(get_calendar_provider),
    settings: Settings = Depends(get_settings),
) -> AgendaService:
    return AgendaService(provider, calendar_id=settings.calendar_id)
