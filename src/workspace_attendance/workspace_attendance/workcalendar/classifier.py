"""Working-day / holiday classification.

Default rule: Sunday is a holiday, Monday to Saturday are working days. A
workspace override for a date replaces the default unconditionally.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping, Optional

from ..common.datetime_utils import iter_dates
from ..core.enums import DayType
from .model import SpecialDay

SUNDAY = 6


def default_day_type(day: date) -> DayType:
    return DayType.HOLIDAY if day.weekday() == SUNDAY else DayType.WORKING


def classify(day: date, overrides: Optional[Mapping[date, SpecialDay]] = None) -> DayType:
    override = overrides.get(day) if overrides else None
    if override is not None:
        return override.type
    return default_day_type(day)


class WorkCalendar:
    """Override map for one workspace, built once per query range."""

    def __init__(self, special_days: Iterable[SpecialDay] = ()):
        self._overrides: dict[date, SpecialDay] = {sd.date: sd for sd in special_days}

    @property
    def overrides(self) -> Mapping[date, SpecialDay]:
        return self._overrides

    def day_type(self, day: date) -> DayType:
        return classify(day, self._overrides)

    def is_working(self, day: date) -> bool:
        return self.day_type(day) == DayType.WORKING

    def count_working_days(self, start: date, end: date) -> int:
        return sum(1 for d in iter_dates(start, end) if self.is_working(d))
