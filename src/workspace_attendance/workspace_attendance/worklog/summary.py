from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from ..core.constants import SUMMARY_HEADER
from .model import WorkItem, WorkItemComment


def group_comments_by_item(comments: Iterable[WorkItemComment]) -> dict[str, list[WorkItemComment]]:
    grouped: dict[str, list[WorkItemComment]] = {}
    for comment in comments:
        grouped.setdefault(comment.item_id, []).append(comment)
    return grouped


def _format_comment(comment: WorkItemComment) -> list[str]:
    lines = [line.strip() for line in comment.content.strip().split("\n") if line.strip()]
    return [f"  {'-' if i == 0 else ' '} {line}" for i, line in enumerate(lines)]


def compose(items: Sequence[WorkItem], comments_by_item: Mapping[str, Sequence[WorkItemComment]]) -> str:
    """Plain-text seed for the check-out note; empty when nothing was commented today."""

    worked_on = [item for item in items if comments_by_item.get(item.item_id)]
    if not worked_on:
        return ""

    parts = [SUMMARY_HEADER]
    for item in worked_on:
        parts.append(f"\n• {item.name}")
        for comment in comments_by_item[item.item_id]:
            parts.extend(_format_comment(comment))
    return "\n".join(parts)
