from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import DayType
from .model import SpecialDay


class SpecialDayRepository(Protocol):
    def get_for_date(self, *, workspace_id: str, day: date) -> Optional[SpecialDay]:
        raise NotImplementedError

    def list_range(
        self,
        *,
        workspace_id: str,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[SpecialDay]:
        """Overrides for the workspace, optionally bounded (inclusive), ordered by date."""

        raise NotImplementedError

    def create(self, *, workspace_id: str, day: date, day_type: DayType, description: Optional[str]) -> SpecialDay:
        """Raises DuplicateEntry when the workspace already has an override for ``day``."""
        raise NotImplementedError

    def update_type(self, *, special_day_id: str, day_type: DayType, description: Optional[str]) -> bool:
        raise NotImplementedError

    def delete(self, *, workspace_id: str, special_day_id: str) -> bool:
        raise NotImplementedError
