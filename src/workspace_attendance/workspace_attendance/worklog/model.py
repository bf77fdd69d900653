from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ..core.enums import WorkItemStatus


@dataclass(frozen=True)
class WorkItem:
    """Task snapshot owned by the task tracker; read-only here."""

    item_id: str
    workspace_id: str
    name: str
    status: WorkItemStatus
    assignee_ids: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class WorkItemComment:
    comment_id: str
    item_id: str
    author_id: str
    content: str
    created_at: datetime
