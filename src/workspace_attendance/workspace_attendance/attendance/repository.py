from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..common.geo import GeoPoint
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def find_records(self, *, workspace_id: str, user_id: str, work_date: date) -> Sequence[AttendanceRecord]:
        """All physical rows for one logical day (normally zero or one)."""

        raise NotImplementedError

    def list_records(
        self,
        *,
        workspace_id: str,
        user_id: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create_record(
        self,
        *,
        workspace_id: str,
        user_id: str,
        work_date: date,
        check_in_time: datetime,
        check_in_location: GeoPoint,
        status: AttendanceStatus,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        raise NotImplementedError

    def update_checkout(
        self,
        *,
        record_id: str,
        check_out_time: datetime,
        check_out_location: GeoPoint,
        total_hours: float,
        status: AttendanceStatus,
        notes: Optional[str] = None,
    ) -> Optional[AttendanceRecord]:
        """Complete a record that is still open.

        Returns None when the row is gone or was checked out concurrently.
        """

        raise NotImplementedError
