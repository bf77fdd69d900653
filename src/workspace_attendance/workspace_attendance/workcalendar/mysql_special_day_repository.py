from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import DayType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, new_id
from .model import SpecialDay
from .repository import SpecialDayRepository


def _to_special_day(r: dict) -> SpecialDay:
    return SpecialDay(
        special_day_id=str(r["special_day_id"]),
        workspace_id=str(r["workspace_id"]),
        date=r["day"],
        type=DayType(r["type"]),
        description=r.get("description"),
    )


class MySQLSpecialDayRepository(SpecialDayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_date(self, *, workspace_id: str, day: date) -> Optional[SpecialDay]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT special_day_id, workspace_id, day, type, description
                FROM special_days
                WHERE workspace_id=%s AND day=%s
                """,
                (workspace_id, day),
            )
            r = fetchone(cur)
            return _to_special_day(r) if r else None

    def list_range(
        self,
        *,
        workspace_id: str,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[SpecialDay]:
        clauses = ["workspace_id=%s"]
        params: list[object] = [workspace_id]
        if start is not None:
            clauses.append("day >= %s")
            params.append(start)
        if end is not None:
            clauses.append("day <= %s")
            params.append(end)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT special_day_id, workspace_id, day, type, description
                FROM special_days
                WHERE {where}
                ORDER BY day ASC
                """,
                tuple(params),
            )
            return [_to_special_day(r) for r in fetchall(cur)]

    def create(self, *, workspace_id: str, day: date, day_type: DayType, description: Optional[str]) -> SpecialDay:
        special_day_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO special_days(special_day_id, workspace_id, day, type, description)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (special_day_id, workspace_id, day, day_type.value, description),
            )
        return SpecialDay(
            special_day_id=special_day_id,
            workspace_id=workspace_id,
            date=day,
            type=day_type,
            description=description,
        )

    def update_type(self, *, special_day_id: str, day_type: DayType, description: Optional[str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE special_days SET type=%s, description=%s WHERE special_day_id=%s",
                (day_type.value, description, special_day_id),
            )
            return cur.rowcount > 0

    def delete(self, *, workspace_id: str, special_day_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM special_days WHERE special_day_id=%s AND workspace_id=%s",
                (special_day_id, workspace_id),
            )
            return cur.rowcount > 0
