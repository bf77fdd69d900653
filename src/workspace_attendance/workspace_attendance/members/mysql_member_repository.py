from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Member
from .repository import MemberRepository


def _to_member(r: dict) -> Member:
    return Member(
        member_id=str(r["member_id"]),
        workspace_id=str(r["workspace_id"]),
        user_id=str(r["user_id"]),
        name=r.get("name") or "",
        role=Role(r["role"]),
        joined_at=r["joined_at"],
    )


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_user(self, *, workspace_id: str, user_id: str) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT member_id, workspace_id, user_id, name, role, joined_at
                FROM members
                WHERE workspace_id=%s AND user_id=%s
                """,
                (workspace_id, user_id),
            )
            r = fetchone(cur)
            return _to_member(r) if r else None

    def list_for_workspace(self, *, workspace_id: str) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT member_id, workspace_id, user_id, name, role, joined_at
                FROM members
                WHERE workspace_id=%s
                ORDER BY name ASC
                """,
                (workspace_id,),
            )
            return [_to_member(r) for r in fetchall(cur)]
