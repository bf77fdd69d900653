from datetime import datetime, time

from workspace_attendance.attendance.factory import AttendanceStrategyFactory
from workspace_attendance.attendance.strategies.half_day_strategy import HalfDayStrategy
from workspace_attendance.attendance.strategies.late_strategy import LateStrategy
from workspace_attendance.attendance.strategies.normal_strategy import NormalStrategy
from workspace_attendance.core.enums import AttendanceStatus


def test_factory_checkin_on_time_at_cutoff():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(now=datetime(2025, 1, 2, 9, 30, 59))

    assert isinstance(strategy, NormalStrategy)


def test_factory_checkin_late_after_cutoff():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(now=datetime(2025, 1, 2, 9, 31, 0))

    assert isinstance(strategy, LateStrategy)
    assert strategy.decide_checkin(now=datetime(2025, 1, 2, 9, 31)).status == AttendanceStatus.LATE


def test_factory_respects_configured_cutoff():
    factory = AttendanceStrategyFactory(late_cutoff=time(8, 0))

    assert isinstance(factory.for_checkin(now=datetime(2025, 1, 2, 8, 15)), LateStrategy)


def test_factory_checkout_short_day_is_half_day():
    strategy = AttendanceStrategyFactory().for_checkout(total_hours=3.99)

    assert isinstance(strategy, HalfDayStrategy)
    assert strategy.decide_checkout(total_hours=3.99, current=AttendanceStatus.LATE).status == AttendanceStatus.HALF_DAY


def test_factory_checkout_full_day_keeps_checkin_status():
    strategy = AttendanceStrategyFactory().for_checkout(total_hours=4.0)

    assert isinstance(strategy, NormalStrategy)
    assert strategy.decide_checkout(total_hours=4.0, current=AttendanceStatus.LATE).status == AttendanceStatus.LATE
