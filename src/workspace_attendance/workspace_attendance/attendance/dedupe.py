"""Collapse duplicate physical rows for one logical attendance day.

Racing check-ins can leave two rows for the same (workspace, user, date). The
losing row is only left out of reads and aggregation; nothing is deleted.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable

from .model import AttendanceRecord


def prefer(a: AttendanceRecord, b: AttendanceRecord) -> AttendanceRecord:
    """Pick the canonical record of two rows sharing a date.

    A completed check-out beats an open record; otherwise the later updated_at
    wins. A full tie keeps ``a``.
    """

    if a.is_checked_out != b.is_checked_out:
        return a if a.is_checked_out else b

    a_updated = a.updated_at or datetime.min
    b_updated = b.updated_at or datetime.min
    return b if b_updated > a_updated else a


def dedupe(records: Iterable[AttendanceRecord]) -> list[AttendanceRecord]:
    """One record per work_date, ascending by date."""

    by_date: dict[date, AttendanceRecord] = {}
    for record in records:
        current = by_date.get(record.work_date)
        by_date[record.work_date] = record if current is None else prefer(current, record)
    return [by_date[d] for d in sorted(by_date)]


def index_by_date(records: Iterable[AttendanceRecord]) -> dict[date, AttendanceRecord]:
    return {r.work_date: r for r in dedupe(records)}
