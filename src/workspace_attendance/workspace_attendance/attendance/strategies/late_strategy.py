from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Late check-in."""

    def decide_checkin(self, *, now: datetime) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.LATE)

    def decide_checkout(self, *, total_hours: float, current: AttendanceStatus) -> StatusDecision:
        """Not used: the factory only picks this strategy at check-in."""
        return StatusDecision(status=current)
