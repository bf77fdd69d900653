from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional

from ..core.enums import ATTENDED_STATUSES, AttendanceStatus
from ..workcalendar.classifier import WorkCalendar
from .dedupe import dedupe
from .model import AttendanceRecord


@dataclass(frozen=True)
class AttendanceStats:
    total_working_days: int
    present: int
    late: int
    half_day: int
    absent: int
    average_hours: float
    current_streak: int

    def to_dict(self) -> dict:
        return {
            "totalWorkingDays": self.total_working_days,
            "present": self.present,
            "late": self.late,
            "halfDay": self.half_day,
            "absent": self.absent,
            "averageHours": self.average_hours,
            "currentStreak": self.current_streak,
        }


@dataclass(frozen=True)
class TeamAttendanceStats:
    total_members: int
    present: int
    late: int
    half_day: int
    absent: int
    checked_in: int

    def to_dict(self) -> dict:
        return {
            "totalMembers": self.total_members,
            "present": self.present,
            "late": self.late,
            "halfDay": self.half_day,
            "absent": self.absent,
            "checkedIn": self.checked_in,
        }


def aggregate(
    *,
    join_date: date,
    as_of: date,
    records: Iterable[AttendanceRecord],
    calendar: WorkCalendar,
    today: Optional[date] = None,
) -> AttendanceStats:
    """Summary counters for one member over [join_date, as_of].

    Records outside that window are ignored. When ``as_of`` is today (the
    default when ``today`` is not given) the day is still in progress: it
    counts as a working day only once it has an attended record, and a
    missing record on it does not break the streak. A past ``as_of`` is a
    finished day and counts like any other.
    """

    in_progress = today is None or as_of >= today
    canonical = [
        r for r in dedupe(records) if not r.is_synthetic and join_date <= r.work_date <= as_of
    ]
    by_date = {r.work_date: r for r in canonical}

    if in_progress:
        total_working_days = calendar.count_working_days(join_date, as_of - timedelta(days=1))
        if join_date <= as_of and calendar.is_working(as_of) and _attended(by_date.get(as_of)):
            total_working_days += 1
    else:
        total_working_days = calendar.count_working_days(join_date, as_of)

    present = sum(1 for r in canonical if r.status == AttendanceStatus.PRESENT)
    late = sum(1 for r in canonical if r.status == AttendanceStatus.LATE)
    half_day = sum(1 for r in canonical if r.status == AttendanceStatus.HALF_DAY)
    absent = max(0, total_working_days - (present + late + half_day))

    completed_hours = [r.total_hours for r in canonical if r.total_hours is not None and r.total_hours > 0]
    average_hours = sum(completed_hours) / len(completed_hours) if completed_hours else 0.0

    return AttendanceStats(
        total_working_days=total_working_days,
        present=present,
        late=late,
        half_day=half_day,
        absent=absent,
        average_hours=average_hours,
        current_streak=current_streak(
            join_date=join_date,
            as_of=as_of,
            by_date=by_date,
            calendar=calendar,
            as_of_in_progress=in_progress,
        ),
    )


def current_streak(
    *,
    join_date: date,
    as_of: date,
    by_date: dict[date, AttendanceRecord],
    calendar: WorkCalendar,
    as_of_in_progress: bool = True,
) -> int:
    streak = 0
    day = as_of
    while day >= join_date:
        if _attended(by_date.get(day)):
            streak += 1
        elif calendar.is_working(day) and not (day == as_of and as_of_in_progress):
            break
        day -= timedelta(days=1)
    return streak


def team_today_stats(*, member_user_ids: Iterable[str], todays_records: Iterable[AttendanceRecord]) -> TeamAttendanceStats:
    """Workspace headcount for one day; records of non-members are ignored."""

    members = set(member_user_ids)
    by_user: dict[str, list[AttendanceRecord]] = {}
    for r in todays_records:
        if r.user_id in members and not r.is_synthetic:
            by_user.setdefault(r.user_id, []).append(r)

    statuses = [dedupe(rows)[0].status for rows in by_user.values()]
    return TeamAttendanceStats(
        total_members=len(members),
        present=statuses.count(AttendanceStatus.PRESENT),
        late=statuses.count(AttendanceStatus.LATE),
        half_day=statuses.count(AttendanceStatus.HALF_DAY),
        absent=len(members) - len(statuses),
        checked_in=len(statuses),
    )


def _attended(record) -> bool:
    return record is not None and record.status in ATTENDED_STATUSES

