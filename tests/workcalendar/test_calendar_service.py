from datetime import date

import pytest

from workspace_attendance.core.enums import DayType, Role
from workspace_attendance.core.exceptions import Unauthorized, ValidationError
from workspace_attendance.workcalendar.model import SpecialDay
from workspace_attendance.workcalendar.service import CalendarService

from fakes import WORKSPACE, InMemorySpecialDays

SUNDAY = date(2025, 1, 12)


def test_create_override_uses_default_description():
    svc = CalendarService(InMemorySpecialDays())

    sd = svc.create_or_toggle(current_role=Role.ADMIN, workspace_id=WORKSPACE, day=SUNDAY, day_type=DayType.WORKING)

    assert sd.type == DayType.WORKING
    assert sd.description == "Working day"
    assert svc.classify(workspace_id=WORKSPACE, day=SUNDAY) == DayType.WORKING


def test_second_call_toggles_existing_type():
    repo = InMemorySpecialDays()
    svc = CalendarService(repo)
    svc.create_or_toggle(
        current_role=Role.ADMIN,
        workspace_id=WORKSPACE,
        day=date(2025, 1, 1),
        day_type=DayType.HOLIDAY,
        description="New Year",
    )

    # The requested type is ignored once an override exists.
    sd = svc.create_or_toggle(
        current_role=Role.ADMIN,
        workspace_id=WORKSPACE,
        day=date(2025, 1, 1),
        day_type=DayType.HOLIDAY,
    )

    assert sd.type == DayType.WORKING
    assert sd.description == "Working day"
    assert len(repo.days) == 1


def test_double_toggle_restores_original_type():
    svc = CalendarService(InMemorySpecialDays())
    original = svc.create_or_toggle(current_role=Role.ADMIN, workspace_id=WORKSPACE, day=SUNDAY, day_type=DayType.WORKING)

    svc.create_or_toggle(current_role=Role.ADMIN, workspace_id=WORKSPACE, day=SUNDAY, day_type=DayType.WORKING)
    again = svc.create_or_toggle(current_role=Role.ADMIN, workspace_id=WORKSPACE, day=SUNDAY, day_type=DayType.WORKING)

    assert again.type == original.type


def test_members_cannot_manage_calendar():
    repo = InMemorySpecialDays()
    svc = CalendarService(repo)

    with pytest.raises(Unauthorized):
        svc.create_or_toggle(current_role=Role.MEMBER, workspace_id=WORKSPACE, day=SUNDAY, day_type=DayType.WORKING)
    assert repo.days == {}


def test_delete_restores_default_rule():
    svc = CalendarService(InMemorySpecialDays())
    sd = svc.create_or_toggle(current_role=Role.ADMIN, workspace_id=WORKSPACE, day=SUNDAY, day_type=DayType.WORKING)

    svc.delete(current_role=Role.ADMIN, workspace_id=WORKSPACE, special_day_id=sd.special_day_id)

    assert svc.classify(workspace_id=WORKSPACE, day=SUNDAY) == DayType.HOLIDAY


def test_delete_unknown_override():
    svc = CalendarService(InMemorySpecialDays())

    with pytest.raises(ValidationError):
        svc.delete(current_role=Role.ADMIN, workspace_id=WORKSPACE, special_day_id="missing")


def test_overrides_are_scoped_to_workspace():
    svc = CalendarService(InMemorySpecialDays())
    svc.create_or_toggle(current_role=Role.ADMIN, workspace_id="other", day=SUNDAY, day_type=DayType.WORKING)

    assert svc.classify(workspace_id=WORKSPACE, day=SUNDAY) == DayType.HOLIDAY


def test_list_special_days_rejects_inverted_range():
    svc = CalendarService(InMemorySpecialDays())

    with pytest.raises(ValidationError):
        svc.list_special_days(workspace_id=WORKSPACE, start=date(2025, 2, 1), end=date(2025, 1, 1))


class _ConcurrentAdminSpecialDays(InMemorySpecialDays):
    """Another admin stores an override right after our first lookup."""

    def __init__(self, other: SpecialDay):
        super().__init__()
        self._other = other
        self._first_lookup = True

    def get_for_date(self, *, workspace_id: str, day: date):
        if self._first_lookup:
            self._first_lookup = False
            self.days[self._other.special_day_id] = self._other
            return None
        return super().get_for_date(workspace_id=workspace_id, day=day)


def test_concurrent_create_becomes_toggle():
    other = SpecialDay(special_day_id="sd-other", workspace_id=WORKSPACE, date=SUNDAY, type=DayType.WORKING)
    repo = _ConcurrentAdminSpecialDays(other)
    svc = CalendarService(repo)

    sd = svc.create_or_toggle(current_role=Role.ADMIN, workspace_id=WORKSPACE, day=SUNDAY, day_type=DayType.WORKING)

    assert sd.special_day_id == "sd-other"
    assert sd.type == DayType.HOLIDAY
    assert list(repo.days) == ["sd-other"]
