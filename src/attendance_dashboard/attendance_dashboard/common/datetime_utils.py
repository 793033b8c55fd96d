from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta, timezone
from typing import Iterator

from ..core.constants import ISO_DATE_FORMAT, MONTH_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def format_iso_date(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def parse_month(value: str) -> date:
    """Parse YYYY-MM string into the first day of that month."""
    return datetime.strptime(value, MONTH_FORMAT).date().replace(day=1)


def format_month(value: date) -> str:
    return value.strftime(MONTH_FORMAT)


def month_bounds(any_day: date) -> tuple[date, date]:
    """Inclusive first and last calendar day of the month containing any_day."""
    last = calendar.monthrange(any_day.year, any_day.month)[1]
    return any_day.replace(day=1), any_day.replace(day=last)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Every calendar date from start to end, both inclusive."""
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)


def today_utc() -> date:
    """Current UTC calendar date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc).date()
