from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..core.enums import WorkItemStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, load_id_list
from .model import WorkItem, WorkItemComment
from .repository import WorkItemRepository


class MySQLWorkItemRepository(WorkItemRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_in_progress_items(self, *, workspace_id: str, member_id: str) -> Sequence[WorkItem]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT task_id, workspace_id, name, status, assignee_ids
                FROM tasks
                WHERE workspace_id=%s AND status=%s AND JSON_CONTAINS(assignee_ids, JSON_QUOTE(%s))
                ORDER BY name ASC
                """,
                (workspace_id, WorkItemStatus.IN_PROGRESS.value, member_id),
            )
            return [
                WorkItem(
                    item_id=str(r["task_id"]),
                    workspace_id=str(r["workspace_id"]),
                    name=r["name"],
                    status=WorkItemStatus(r["status"]),
                    assignee_ids=load_id_list(r.get("assignee_ids")),
                )
                for r in fetchall(cur)
            ]

    def list_comments_by_author(self, *, user_id: str, start: datetime, end: datetime) -> Sequence[WorkItemComment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT comment_id, task_id, author_id, content, created_at
                FROM task_comments
                WHERE author_id=%s AND created_at BETWEEN %s AND %s
                ORDER BY created_at ASC
                """,
                (user_id, start, end),
            )
            return [
                WorkItemComment(
                    comment_id=str(r["comment_id"]),
                    item_id=str(r["task_id"]),
                    author_id=str(r["author_id"]),
                    content=r["content"] or "",
                    created_at=r["created_at"],
                )
                for r in fetchall(cur)
            ]
