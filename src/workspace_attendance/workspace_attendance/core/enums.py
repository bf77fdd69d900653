from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Workspace member role used for access checks."""

    ADMIN = "ADMIN"
    MEMBER = "MEMBER"


class AttendanceStatus(str, Enum):
    """Attendance status as stored (absent only ever appears on synthetic rows)."""

    PRESENT = "present"
    LATE = "late"
    HALF_DAY = "half-day"
    ABSENT = "absent"


ATTENDED_STATUSES = frozenset({AttendanceStatus.PRESENT, AttendanceStatus.LATE, AttendanceStatus.HALF_DAY})


class DayType(str, Enum):
    HOLIDAY = "holiday"
    WORKING = "working"

    def toggled(self) -> "DayType":
        return DayType.WORKING if self is DayType.HOLIDAY else DayType.HOLIDAY


class WorkItemStatus(str, Enum):
    BACKLOG = "BACKLOG"
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    IN_REVIEW = "IN_REVIEW"
    DONE = "DONE"
