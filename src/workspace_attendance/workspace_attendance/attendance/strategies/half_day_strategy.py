from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class HalfDayStrategy(AttendanceStrategy):
    """Short day on checkout: half-day replaces whatever check-in decided, late included."""

    def decide_checkin(self, *, now: datetime) -> StatusDecision:
        """Not used: the factory only picks this strategy at check-out."""
        return StatusDecision(status=AttendanceStatus.PRESENT)

    def decide_checkout(self, *, total_hours: float, current: AttendanceStatus) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.HALF_DAY)
