from datetime import date

from workspace_attendance.attendance.stats import team_today_stats
from workspace_attendance.core.enums import AttendanceStatus, Role

from fakes import WORKSPACE, build_world, member, record

TODAY = date(2025, 1, 6)


def test_team_today_counts_each_member_once():
    stats = team_today_stats(
        member_user_ids=["a", "b", "c", "d"],
        todays_records=[
            record(TODAY, user_id="a"),
            record(TODAY, user_id="b", status=AttendanceStatus.LATE, hours=None, record_id="b-open"),
            record(TODAY, user_id="b", status=AttendanceStatus.LATE, hours=9, record_id="b-done"),
            record(TODAY, user_id="c", status=AttendanceStatus.HALF_DAY, hours=2),
            record(TODAY, user_id="stranger"),
        ],
    )

    assert stats.total_members == 4
    assert (stats.present, stats.late, stats.half_day) == (1, 1, 1)
    assert stats.checked_in == 3
    assert stats.absent == 1


def test_team_today_stats_through_service():
    world = build_world(
        member("u-1", role=Role.ADMIN),
        member("u-2"),
        records=[record(TODAY, user_id="u-2", hours=None)],
    )

    stats = world.service.get_team_today_stats(current_user_id="u-1", workspace_id=WORKSPACE, today=TODAY)

    assert stats.to_dict() == {
        "totalMembers": 2,
        "present": 1,
        "late": 0,
        "halfDay": 0,
        "absent": 1,
        "checkedIn": 1,
    }
