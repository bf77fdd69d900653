from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import iter_dates, today_local
from ..workcalendar.classifier import WorkCalendar
from .dedupe import index_by_date
from .model import AttendanceRecord


def fill_gaps(
    *,
    workspace_id: str,
    user_id: str,
    start: date,
    end: date,
    records: Iterable[AttendanceRecord],
    calendar: WorkCalendar,
    today: Optional[date] = None,
) -> list[AttendanceRecord]:
    """Turn a sparse attendance log into a per-day ledger for [start, end], newest first.

    Past working days without a record become synthetic absences. Holidays,
    today and future dates produce nothing unless a real record exists, so a
    day that has not finished is never marked absent.
    """

    today = today or today_local()
    by_date = index_by_date(records)

    out: list[AttendanceRecord] = []
    for day in iter_dates(start, end):
        record = by_date.get(day)
        if record is not None:
            out.append(record)
        elif day < today and calendar.is_working(day):
            out.append(AttendanceRecord.synthetic_absence(workspace_id=workspace_id, user_id=user_id, work_date=day))

    out.sort(key=lambda r: r.work_date, reverse=True)
    return out
