from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from .attendance.factory import AttendanceStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import HALF_DAY_HOURS, LATE_CUTOFF, NOTES_MAX_LENGTH, NOTES_MIN_LENGTH
from .database.connection import DBConfig, DatabaseConnection
from .members.mysql_member_repository import MySQLMemberRepository
from .members.repository import MemberRepository
from .workcalendar.mysql_special_day_repository import MySQLSpecialDayRepository
from .workcalendar.repository import SpecialDayRepository
from .workcalendar.service import CalendarService
from .worklog.gate import CheckoutGate
from .worklog.mysql_work_item_repository import MySQLWorkItemRepository
from .worklog.repository import WorkItemRepository


@dataclass(frozen=True)
class AttendanceRules:
    late_cutoff: time = LATE_CUTOFF
    half_day_hours: float = HALF_DAY_HOURS
    notes_min_length: int = NOTES_MIN_LENGTH
    notes_max_length: int = NOTES_MAX_LENGTH


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository
    special_days_repo: SpecialDayRepository
    work_items_repo: WorkItemRepository
    members_repo: MemberRepository

    calendar_service: CalendarService
    checkout_gate: CheckoutGate
    attendance_service: AttendanceService


def build_services(
    *,
    attendance_repo: AttendanceRepository,
    special_days_repo: SpecialDayRepository,
    work_items_repo: WorkItemRepository,
    members_repo: MemberRepository,
    rules: AttendanceRules | None = None,
) -> Container:
    """Wire services over any repository implementations (MySQL in production, fakes in tests)."""

    rules = rules or AttendanceRules()
    calendar_service = CalendarService(special_days_repo)
    checkout_gate = CheckoutGate(work_items_repo)
    attendance_service = AttendanceService(
        attendance_repo,
        members_repo,
        calendar_service,
        checkout_gate,
        strategy_factory=AttendanceStrategyFactory(late_cutoff=rules.late_cutoff, half_day_hours=rules.half_day_hours),
        notes_min_length=rules.notes_min_length,
        notes_max_length=rules.notes_max_length,
    )

    return Container(
        attendance_repo=attendance_repo,
        special_days_repo=special_days_repo,
        work_items_repo=work_items_repo,
        members_repo=members_repo,
        calendar_service=calendar_service,
        checkout_gate=checkout_gate,
        attendance_service=attendance_service,
    )


def build_container(*, db_config: dict, rules: AttendanceRules | None = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        attendance_repo=MySQLAttendanceRepository(conn),
        special_days_repo=MySQLSpecialDayRepository(conn),
        work_items_repo=MySQLWorkItemRepository(conn),
        members_repo=MySQLMemberRepository(conn),
        rules=rules,
    )
