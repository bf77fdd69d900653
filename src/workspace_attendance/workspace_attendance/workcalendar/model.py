from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import DayType


@dataclass(frozen=True)
class SpecialDay:
    """Per-workspace calendar override: at most one per (workspace_id, date)."""

    special_day_id: str
    workspace_id: str
    date: date
    type: DayType
    description: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.special_day_id,
            "workspaceId": self.workspace_id,
            "date": self.date.isoformat(),
            "type": self.type.value,
            "description": self.description,
        }
