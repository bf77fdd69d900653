from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterator


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date.

    Store values sometimes come back as full ISO timestamps; only the date part is used.
    """
    return datetime.strptime(value.strip()[:10], "%Y-%m-%d").date()


def parse_hhmm(value: str) -> time:
    return datetime.strptime(value.strip(), "%H:%M").time()


def now_local() -> datetime:
    """Current server wall-clock time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Every calendar date in [start, end], ascending. Empty when start > end."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Server-local [00:00:00, 23:59:59.999999] window for a calendar day."""
    return datetime.combine(day, time.min), datetime.combine(day, time.max)


def hours_between(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds() / 3600
