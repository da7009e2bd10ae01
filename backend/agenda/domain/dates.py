"""Local day boundaries used for calendar queries.

All values are naive datetimes in local time; naive arithmetic keeps
"next day" a calendar-day step rather than an elapsed 24h step.
"""
from __future__ import annotations
from datetime import date, datetime, time, timedelta
from typing import Optional, Union

DateLike = Union[date, datetime]

ONE_DAY = timedelta(days=1)
ONE_SECOND = timedelta(seconds=1)


def to_local(value: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def _as_date(value: Optional[DateLike]) -> date:
    if value is None:
        return datetime.now().date()
    if isinstance(value, datetime):
        return to_local(value).date()
    return value


def day_start(value: Optional[DateLike] = None) -> datetime:
    """Local midnight of ``value``'s date, e.g. jan 1, 2019, 00:00:00.000."""
    return datetime.combine(_as_date(value), time.min)


def day_end(value: Optional[DateLike] = None) -> datetime:
    """One second before the next local midnight, e.g. jan 1, 2019, 23:59:59.000."""
    return day_start(value) + ONE_DAY - ONE_SECOND


def add_days(value: datetime, days: int) -> datetime:
    return day_start(_as_date(value) + timedelta(days=days))
