"""Checkout gate: same-day progress must be documented before leaving.

Every in-progress work item assigned to the member needs at least one comment
written by the user during the current server day. The gate only ever blocks
check-out, never check-in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Sequence

from ..common.datetime_utils import day_bounds
from .model import WorkItem, WorkItemComment
from .repository import WorkItemRepository

logger = logging.getLogger(__name__)


def find_uncommented_items(items: Iterable[WorkItem], comments: Iterable[WorkItemComment]) -> list[WorkItem]:
    commented = {c.item_id for c in comments}
    return [item for item in items if item.item_id not in commented]


@dataclass(frozen=True)
class WorkDaySnapshot:
    items: Sequence[WorkItem]
    comments: Sequence[WorkItemComment]


class CheckoutGate:
    def __init__(self, work_items: WorkItemRepository):
        self._work_items = work_items

    def snapshot(self, *, workspace_id: str, member_id: str, user_id: str, day: date) -> WorkDaySnapshot:
        """In-progress items plus the user's comments for the day.

        Store failures propagate: a gate that cannot read its inputs must not pass.
        """

        start, end = day_bounds(day)
        items = self._work_items.list_in_progress_items(workspace_id=workspace_id, member_id=member_id)
        comments = self._work_items.list_comments_by_author(user_id=user_id, start=start, end=end)
        item_ids = {item.item_id for item in items}
        return WorkDaySnapshot(items=items, comments=[c for c in comments if c.item_id in item_ids])

    def pending_items(self, *, workspace_id: str, member_id: str, user_id: str, day: date) -> list[WorkItem]:
        snap = self.snapshot(workspace_id=workspace_id, member_id=member_id, user_id=user_id, day=day)
        pending = find_uncommented_items(snap.items, snap.comments)
        if pending:
            logger.info("User %s has %d uncommented in-progress item(s) on %s", user_id, len(pending), day)
        return pending

    def uncommented_items(self, *, workspace_id: str, member_id: str, user_id: str, day: date) -> list[str]:
        """Identifiers of blocking items; an empty list lets check-out proceed."""

        pending = self.pending_items(workspace_id=workspace_id, member_id=member_id, user_id=user_id, day=day)
        return [item.item_id for item in pending]
