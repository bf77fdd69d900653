from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import hours_between, now_local
from ..common.geo import GeoPoint
from ..common.validators import normalize_text, require_length_between
from ..core.constants import NOTES_MAX_LENGTH, NOTES_MIN_LENGTH
from ..core.enums import AttendanceStatus
from ..core.exceptions import (
    AlreadyCheckedIn,
    AlreadyCheckedOut,
    DomainError,
    NoCheckInFound,
    PendingTaskComments,
    StoreUnavailable,
    Unauthorized,
    ValidationError,
)
from ..members.access import ensure_can_view
from ..members.model import Member
from ..members.repository import MemberRepository
from ..workcalendar.service import CalendarService
from ..worklog.gate import CheckoutGate
from ..worklog.model import WorkItem
from ..worklog.summary import compose, group_comments_by_item
from .dedupe import dedupe
from .factory import AttendanceStrategyFactory
from .gaps import fill_gaps
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .stats import AttendanceStats, TeamAttendanceStats, aggregate, team_today_stats

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        members: MemberRepository,
        calendar: CalendarService,
        gate: CheckoutGate,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        notes_min_length: int = NOTES_MIN_LENGTH,
        notes_max_length: int = NOTES_MAX_LENGTH,
    ):
        self._attendance = attendance
        self._members = members
        self._calendar = calendar
        self._gate = gate
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._notes_min_length = int(notes_min_length)
        self._notes_max_length = int(notes_max_length)

    def require_member(self, *, workspace_id: str, user_id: str) -> Member:
        member = self._members.get_for_user(workspace_id=workspace_id, user_id=user_id)
        if not member:
            raise Unauthorized("You are not a member of this workspace")
        return member

    def _target_member(self, *, workspace_id: str, current: Member, user_id: Optional[str]) -> Member:
        target_user_id = user_id or current.user_id
        ensure_can_view(current_user_id=current.user_id, current_role=current.role, target_user_id=target_user_id)
        if target_user_id == current.user_id:
            return current

        target = self._members.get_for_user(workspace_id=workspace_id, user_id=target_user_id)
        if not target:
            raise ValidationError("User is not a member of this workspace")
        return target

    def _today_record(self, *, workspace_id: str, user_id: str, today: date) -> Optional[AttendanceRecord]:
        rows = self._attendance.find_records(workspace_id=workspace_id, user_id=user_id, work_date=today)
        if len(rows) > 1:
            logger.warning("Found %d records for user %s on %s; using the canonical one", len(rows), user_id, today)
        deduped = dedupe(rows)
        return deduped[0] if deduped else None

    def check_in(
        self,
        *,
        workspace_id: str,
        user_id: str,
        location: GeoPoint,
        notes: Optional[str] = None,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        now = now or now_local()
        today = now.date()

        location.validate()
        self.require_member(workspace_id=workspace_id, user_id=user_id)

        if self._attendance.find_records(workspace_id=workspace_id, user_id=user_id, work_date=today):
            raise AlreadyCheckedIn()

        strategy = self._factory.for_checkin(now=now)
        decision = strategy.decide_checkin(now=now)

        record = self._attendance.create_record(
            workspace_id=workspace_id,
            user_id=user_id,
            work_date=today,
            check_in_time=now,
            check_in_location=location,
            status=decision.status,
            notes=normalize_text(notes) or None,
        )
        logger.info("User %s checked in to %s at %s (%s)", user_id, workspace_id, now, decision.status.value)
        return record

    def check_out(
        self,
        *,
        workspace_id: str,
        user_id: str,
        location: GeoPoint,
        notes: Optional[str] = None,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        now = now or now_local()
        today = now.date()

        location.validate()
        member = self.require_member(workspace_id=workspace_id, user_id=user_id)

        record = self._today_record(workspace_id=workspace_id, user_id=user_id, today=today)
        if not record:
            raise NoCheckInFound()
        if record.is_checked_out:
            raise AlreadyCheckedOut()

        blocking = self._uncommented_items(member=member, day=today)
        if blocking:
            raise PendingTaskComments(blocking)

        notes = normalize_text(notes)
        if notes:
            require_length_between(notes, "Notes", self._notes_min_length, self._notes_max_length)

        if now <= record.check_in_time:
            raise ValidationError("Check-out time must be after check-in time")

        total_hours = hours_between(record.check_in_time, now)
        strategy = self._factory.for_checkout(total_hours=total_hours)
        decision = strategy.decide_checkout(total_hours=total_hours, current=record.status)

        updated = self._attendance.update_checkout(
            record_id=record.record_id,
            check_out_time=now,
            check_out_location=location,
            total_hours=total_hours,
            status=decision.status,
            notes=notes or record.notes,
        )
        if updated is None:
            raise AlreadyCheckedOut()

        logger.info("User %s checked out of %s after %.2fh (%s)", user_id, workspace_id, total_hours, decision.status.value)
        return updated

    def _uncommented_items(self, *, member: Member, day: date) -> list[str]:
        try:
            return self._gate.uncommented_items(
                workspace_id=member.workspace_id,
                member_id=member.member_id,
                user_id=member.user_id,
                day=day,
            )
        except DomainError:
            raise
        except Exception as e:
            logger.error("Checkout gate could not read work items: %s", e)
            raise StoreUnavailable("Work items are unavailable; try checking out again") from e

    def get_today_record(
        self,
        *,
        current_user_id: str,
        workspace_id: str,
        user_id: Optional[str] = None,
        now: datetime | None = None,
    ) -> Optional[AttendanceRecord]:
        now = now or now_local()
        current = self.require_member(workspace_id=workspace_id, user_id=current_user_id)
        target = self._target_member(workspace_id=workspace_id, current=current, user_id=user_id)
        return self._today_record(workspace_id=workspace_id, user_id=target.user_id, today=now.date())

    def list_records(
        self,
        *,
        current_user_id: str,
        workspace_id: str,
        user_id: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
        status: Optional[AttendanceStatus] = None,
        fill_absences: bool = True,
        today: Optional[date] = None,
    ) -> list[AttendanceRecord]:
        if start and end and end < start:
            raise ValidationError("End date must be on or after start date")

        current = self.require_member(workspace_id=workspace_id, user_id=current_user_id)
        target = self._target_member(workspace_id=workspace_id, current=current, user_id=user_id)
        today = today or now_local().date()

        rows = self._attendance.list_records(workspace_id=workspace_id, user_id=target.user_id, start=start, end=end)

        if start and end and fill_absences:
            # Days before the member joined are never absences.
            gap_start = max(start, target.joined_at)
            calendar = self._calendar.load_calendar(workspace_id=workspace_id, start=start, end=end)
            records = fill_gaps(
                workspace_id=workspace_id,
                user_id=target.user_id,
                start=gap_start,
                end=end,
                records=rows,
                calendar=calendar,
                today=today,
            )
            records.extend(r for r in dedupe(rows) if r.work_date < gap_start)
            records.sort(key=lambda r: r.work_date, reverse=True)
        else:
            records = sorted(dedupe(rows), key=lambda r: r.work_date, reverse=True)

        if status is not None:
            records = [r for r in records if r.status == status]
        return records

    def get_stats(
        self,
        *,
        current_user_id: str,
        workspace_id: str,
        user_id: Optional[str] = None,
        as_of: Optional[date] = None,
        today: Optional[date] = None,
    ) -> AttendanceStats:
        current = self.require_member(workspace_id=workspace_id, user_id=current_user_id)
        target = self._target_member(workspace_id=workspace_id, current=current, user_id=user_id)
        today = today or now_local().date()
        # Unfinished days are never counted against the member.
        as_of = min(as_of or today, today)

        records = self._attendance.list_records(
            workspace_id=workspace_id,
            user_id=target.user_id,
            start=target.joined_at,
            end=as_of,
        )
        calendar = self._calendar.load_calendar(workspace_id=workspace_id, start=target.joined_at, end=as_of)
        return aggregate(join_date=target.joined_at, as_of=as_of, records=records, calendar=calendar, today=today)

    def get_team_today_stats(self, *, current_user_id: str, workspace_id: str, today: Optional[date] = None) -> TeamAttendanceStats:
        self.require_member(workspace_id=workspace_id, user_id=current_user_id)
        today = today or now_local().date()

        members = self._members.list_for_workspace(workspace_id=workspace_id)
        records = self._attendance.list_records(workspace_id=workspace_id, start=today, end=today)
        return team_today_stats(member_user_ids=[m.user_id for m in members], todays_records=records)

    def pending_tasks(self, *, workspace_id: str, user_id: str, now: datetime | None = None) -> Sequence[WorkItem]:
        now = now or now_local()
        member = self.require_member(workspace_id=workspace_id, user_id=user_id)
        return self._gate.pending_items(
            workspace_id=workspace_id,
            member_id=member.member_id,
            user_id=user_id,
            day=now.date(),
        )

    def generate_summary(self, *, workspace_id: str, user_id: str, now: datetime | None = None) -> str:
        """Editable seed for the check-out note. Advisory only: failures yield ''."""

        now = now or now_local()
        try:
            member = self.require_member(workspace_id=workspace_id, user_id=user_id)
            snap = self._gate.snapshot(
                workspace_id=workspace_id,
                member_id=member.member_id,
                user_id=user_id,
                day=now.date(),
            )
            return compose(snap.items, group_comments_by_item(snap.comments))
        except Exception:
            logger.exception("Could not generate daily summary for user %s", user_id)
            return ""
