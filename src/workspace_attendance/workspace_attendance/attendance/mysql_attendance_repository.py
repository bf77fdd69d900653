from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.geo import GeoPoint
from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, new_id
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = """
    record_id, workspace_id, user_id, work_date,
    check_in_time, check_in_latitude, check_in_longitude, check_in_address,
    check_out_time, check_out_latitude, check_out_longitude, check_out_address,
    total_hours, status, notes, created_at, updated_at
"""


def _location(r: dict, prefix: str) -> Optional[GeoPoint]:
    lat = r.get(f"{prefix}_latitude")
    lon = r.get(f"{prefix}_longitude")
    if lat is None or lon is None:
        return None
    return GeoPoint(latitude=float(lat), longitude=float(lon), address=r.get(f"{prefix}_address"))


def _to_record(r: dict) -> AttendanceRecord:
    total_hours = r.get("total_hours")
    return AttendanceRecord(
        record_id=str(r["record_id"]),
        workspace_id=str(r["workspace_id"]),
        user_id=str(r["user_id"]),
        work_date=r["work_date"],
        check_in_time=r["check_in_time"],
        check_in_location=_location(r, "check_in"),
        check_out_time=r.get("check_out_time"),
        check_out_location=_location(r, "check_out"),
        total_hours=float(total_hours) if total_hours is not None else None,
        status=AttendanceStatus(r["status"]),
        notes=r.get("notes"),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get_by_id(self, cur, record_id: str) -> Optional[AttendanceRecord]:
        cur.execute(f"SELECT {_COLUMNS} FROM attendance_records WHERE record_id=%s", (record_id,))
        r = fetchone(cur)
        return _to_record(r) if r else None

    def find_records(self, *, workspace_id: str, user_id: str, work_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE workspace_id=%s AND user_id=%s AND work_date=%s
                """,
                (workspace_id, user_id, work_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_records(
        self,
        *,
        workspace_id: str,
        user_id: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["workspace_id=%s"]
        params: list[object] = [workspace_id]

        if user_id is not None:
            clauses.append("user_id=%s")
            params.append(user_id)
        if start is not None:
            clauses.append("work_date >= %s")
            params.append(start)
        if end is not None:
            clauses.append("work_date <= %s")
            params.append(end)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE {where}
                ORDER BY work_date DESC, user_id ASC
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]

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
        record_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(
                    record_id, workspace_id, user_id, work_date,
                    check_in_time, check_in_latitude, check_in_longitude, check_in_address,
                    status, notes
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    record_id,
                    workspace_id,
                    user_id,
                    work_date,
                    check_in_time,
                    check_in_location.latitude,
                    check_in_location.longitude,
                    check_in_location.address,
                    status.value,
                    notes,
                ),
            )
            return self._get_by_id(cur, record_id)

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
        with db_cursor(self._conn_factory) as (_, cur):
            # check_out_time IS NULL guards against a concurrent second check-out.
            cur.execute(
                """
                UPDATE attendance_records
                SET check_out_time=%s, check_out_latitude=%s, check_out_longitude=%s, check_out_address=%s,
                    total_hours=%s, status=%s, notes=%s
                WHERE record_id=%s AND check_out_time IS NULL
                """,
                (
                    check_out_time,
                    check_out_location.latitude,
                    check_out_location.longitude,
                    check_out_location.address,
                    total_hours,
                    status.value,
                    notes,
                    record_id,
                ),
            )
            if cur.rowcount == 0:
                return None
            return self._get_by_id(cur, record_id)
