"""Runtime configuration read from the environment.

Set ``APP_LOAD_DOTENV=1`` to also read a local ``.env`` file (existing
environment variables win).
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional

TRUTHY = {"1", "true", "TRUE", "yes", "on"}

DEFAULT_SCOPES = ["https://www.googleapis.com/auth/calendar.readonly"]


def _split(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


def load_dotenv_if_enabled() -> None:
    if os.getenv("APP_LOAD_DOTENV") in TRUTHY:  # pragma: no cover
        from dotenv import load_dotenv
        load_dotenv(override=False)


@dataclass
class Settings:
    calendar_id: str = "primary"
    google_token_file: Optional[str] = None
    google_scopes: List[str] = field(default_factory=lambda: list(DEFAULT_SCOPES))
    log_level: str = "INFO"
    cors_allow_origins: List[str] = field(default_factory=lambda: ["http://localhost:3000"])

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            calendar_id=os.getenv("AGENDA_CALENDAR_ID") or "primary",
            google_token_file=os.getenv("GOOGLE_TOKEN_FILE") or None,
            google_scopes=_split(os.getenv("GOOGLE_CALENDAR_SCOPES")) or list(DEFAULT_SCOPES),
            log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
            cors_allow_origins=_split(os.getenv("CORS_ALLOW_ORIGINS")) or ["http://localhost:3000"],
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv_if_enabled()
    return Settings.from_env()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
