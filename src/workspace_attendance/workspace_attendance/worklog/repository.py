from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import WorkItem, WorkItemComment


class WorkItemRepository(Protocol):
    def list_in_progress_items(self, *, workspace_id: str, member_id: str) -> Sequence[WorkItem]:
        """In-progress items of the workspace assigned to the member."""

        raise NotImplementedError

    def list_comments_by_author(self, *, user_id: str, start: datetime, end: datetime) -> Sequence[WorkItemComment]:
        """Comments written by the user with created_at in [start, end], oldest first."""

        raise NotImplementedError
