from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.geo import GeoPoint
from ..core.constants import SYNTHETIC_ID_PREFIX
from ..core.enums import AttendanceStatus


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass(frozen=True)
class AttendanceRecord:
    """One employee-day of attendance.

    Persisted rows are created by check-in and completed by check-out. Rows with
    status ABSENT are synthesised for reporting and never stored.
    """

    record_id: str
    workspace_id: str
    user_id: str
    work_date: date
    check_in_time: Optional[datetime]
    check_in_location: Optional[GeoPoint]
    status: AttendanceStatus
    check_out_time: Optional[datetime] = None
    check_out_location: Optional[GeoPoint] = None
    total_hours: Optional[float] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_synthetic(self) -> bool:
        return self.record_id.startswith(SYNTHETIC_ID_PREFIX)

    @property
    def is_checked_out(self) -> bool:
        return self.check_out_time is not None

    @classmethod
    def synthetic_absence(cls, *, workspace_id: str, user_id: str, work_date: date) -> "AttendanceRecord":
        return cls(
            record_id=f"{SYNTHETIC_ID_PREFIX}{work_date.isoformat()}",
            workspace_id=workspace_id,
            user_id=user_id,
            work_date=work_date,
            check_in_time=None,
            check_in_location=GeoPoint.origin(),
            status=AttendanceStatus.ABSENT,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "workspaceId": self.workspace_id,
            "userId": self.user_id,
            "date": self.work_date.isoformat(),
            "checkInTime": _iso(self.check_in_time) or "",
            "checkInLocation": self.check_in_location.to_dict() if self.check_in_location else None,
            "checkOutTime": _iso(self.check_out_time),
            "checkOutLocation": self.check_out_location.to_dict() if self.check_out_location else None,
            "totalHours": self.total_hours,
            "status": self.status.value,
            "notes": self.notes,
            "synthetic": self.is_synthetic,
        }
