from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time

from ..core.constants import HALF_DAY_HOURS, LATE_CUTOFF
from .strategies.base import AttendanceStrategy
from .strategies.half_day_strategy import HalfDayStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    late_cutoff: time = LATE_CUTOFF
    half_day_hours: float = HALF_DAY_HOURS

    def for_checkin(self, *, now: datetime) -> AttendanceStrategy:
        # 09:30:00 sharp is still on time; anything after the cutoff minute is late.
        if now.time().replace(second=0, microsecond=0) > self.late_cutoff:
            return LateStrategy()
        return NormalStrategy()

    def for_checkout(self, *, total_hours: float) -> AttendanceStrategy:
        if total_hours < self.half_day_hours:
            return HalfDayStrategy()
        return NormalStrategy()
