from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..core.constants import DEFAULT_HOLIDAY_DESCRIPTION, DEFAULT_WORKING_DESCRIPTION
from ..core.enums import DayType, Role
from ..core.exceptions import DuplicateEntry, Unauthorized, ValidationError
from .classifier import WorkCalendar, classify
from .model import SpecialDay
from .repository import SpecialDayRepository

logger = logging.getLogger(__name__)


class CalendarService:
    def __init__(self, special_days: SpecialDayRepository):
        self._special_days = special_days

    def classify(self, *, workspace_id: str, day: date) -> DayType:
        override = self._special_days.get_for_date(workspace_id=workspace_id, day=day)
        return classify(day, {day: override} if override else None)

    def load_calendar(self, *, workspace_id: str, start: date, end: date) -> WorkCalendar:
        return WorkCalendar(self._special_days.list_range(workspace_id=workspace_id, start=start, end=end))

    def list_special_days(
        self,
        *,
        workspace_id: str,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[SpecialDay]:
        if start and end and end < start:
            raise ValidationError("End date must be on or after start date")
        return self._special_days.list_range(workspace_id=workspace_id, start=start, end=end)

    def create_or_toggle(
        self,
        *,
        current_role: Role,
        workspace_id: str,
        day: date,
        day_type: DayType,
        description: Optional[str] = None,
    ) -> SpecialDay:
        """Create an override, or flip the type of the one already set for that date."""

        if current_role != Role.ADMIN:
            raise Unauthorized("Only admins can manage the work calendar")

        existing = self._special_days.get_for_date(workspace_id=workspace_id, day=day)
        if existing is None:
            try:
                created = self._special_days.create(
                    workspace_id=workspace_id,
                    day=day,
                    day_type=day_type,
                    description=self._description(day_type, description),
                )
            except DuplicateEntry:
                # Another admin created it between our read and write.
                existing = self._special_days.get_for_date(workspace_id=workspace_id, day=day)
                if existing is None:
                    raise
                logger.info("Override for %s in workspace %s was created concurrently; toggling", day, workspace_id)
            else:
                logger.info("Marked %s as %s for workspace %s", day, day_type.value, workspace_id)
                return created

        return self._toggle(existing)

    def _toggle(self, existing: SpecialDay) -> SpecialDay:
        new_type = existing.type.toggled()
        new_description = self._description(new_type, None)
        if not self._special_days.update_type(
            special_day_id=existing.special_day_id,
            day_type=new_type,
            description=new_description,
        ):
            raise ValidationError("Failed to update special day")
        logger.info(
            "Toggled %s for workspace %s: %s -> %s",
            existing.date,
            existing.workspace_id,
            existing.type.value,
            new_type.value,
        )
        return SpecialDay(
            special_day_id=existing.special_day_id,
            workspace_id=existing.workspace_id,
            date=existing.date,
            type=new_type,
            description=new_description,
        )

    def delete(self, *, current_role: Role, workspace_id: str, special_day_id: str) -> None:
        if current_role != Role.ADMIN:
            raise Unauthorized("Only admins can manage the work calendar")

        if not self._special_days.delete(workspace_id=workspace_id, special_day_id=special_day_id):
            raise ValidationError("Special day not found")

    @staticmethod
    def _description(day_type: DayType, description: Optional[str]) -> str:
        description = (description or "").strip()
        if description:
            return description
        return DEFAULT_HOLIDAY_DESCRIPTION if day_type == DayType.HOLIDAY else DEFAULT_WORKING_DESCRIPTION
