from __future__ import annotations

from datetime import date

import pytest

from workspace_attendance.core.enums import Role, WorkItemStatus
from workspace_attendance.main import create_app
from workspace_attendance.worklog.model import WorkItem

from fakes import WORKSPACE, InMemoryWorkItems, build_world, member, record


@pytest.fixture()
def world():
    items = InMemoryWorkItems(
        items=[
            WorkItem(
                item_id="t-1",
                workspace_id=WORKSPACE,
                name="Landing page",
                status=WorkItemStatus.IN_PROGRESS,
                assignee_ids=("m-u-1",),
            )
        ]
    )
    return build_world(
        member("u-1"),
        member("boss", role=Role.ADMIN),
        records=[record(date(2025, 1, 2)), record(date(2025, 1, 3))],
        work_items=items,
    )


@pytest.fixture()
def client(world):
    app = create_app(world.container, settings_module="config.testing")
    return app.test_client()


def _login(client, user_id: str = "u-1"):
    with client.session_transaction() as sess:
        sess["user_id"] = user_id


CHECK_IN = {"workspaceId": WORKSPACE, "checkInLatitude": 10.77, "checkInLongitude": 106.7, "notes": "office"}


def test_requires_login(client):
    resp = client.get(f"/api/attendance/today?workspaceId={WORKSPACE}")

    assert resp.status_code == 401


def test_workspace_id_is_required(client):
    _login(client)

    resp = client.get("/api/attendance/today")

    assert resp.status_code == 400
    assert resp.get_json()["code"] == "validation_error"


def test_check_in_then_duplicate(client):
    _login(client)

    first = client.post("/api/attendance/check-in", json=CHECK_IN)
    second = client.post("/api/attendance/check-in", json=CHECK_IN)

    assert first.status_code == 201
    assert first.get_json()["checkInLocation"]["latitude"] == 10.77
    assert second.status_code == 400
    assert second.get_json()["code"] == "already_checked_in"


def test_invalid_coordinates_are_rejected(client):
    _login(client)

    resp = client.post("/api/attendance/check-in", json={**CHECK_IN, "checkInLatitude": 120})

    assert resp.status_code == 400
    assert resp.get_json()["code"] == "invalid_coordinates"


def test_check_out_blocked_by_pending_task(client):
    _login(client)
    client.post("/api/attendance/check-in", json=CHECK_IN)

    resp = client.put(
        "/api/attendance/check-out",
        json={"workspaceId": WORKSPACE, "checkOutLatitude": 10.77, "checkOutLongitude": 106.7},
    )

    assert resp.status_code == 409
    body = resp.get_json()
    assert body["code"] == "pending_task_comments"
    assert body["items"] == ["t-1"]


def test_check_out_without_check_in(client):
    _login(client)

    resp = client.put(
        "/api/attendance/check-out",
        json={"workspaceId": WORKSPACE, "checkOutLatitude": 10.77, "checkOutLongitude": 106.7},
    )

    assert resp.status_code == 400
    assert resp.get_json()["code"] == "no_check_in_found"


def test_pending_tasks_endpoint(client):
    _login(client)

    resp = client.get(f"/api/attendance/pending-tasks?workspaceId={WORKSPACE}")

    assert resp.get_json() == {"uncommentedTasks": [{"id": "t-1", "name": "Landing page"}]}


def test_generate_summary_without_comments_is_empty(client):
    _login(client)

    resp = client.get(f"/api/attendance/generate-summary?workspaceId={WORKSPACE}")

    assert resp.status_code == 200
    assert resp.get_json() == {"summary": ""}


def test_list_records_with_gap_filling(client):
    _login(client)

    resp = client.get(f"/api/attendance?workspaceId={WORKSPACE}&startDate=2025-01-02&endDate=2025-01-04")

    body = resp.get_json()
    assert [(r["date"], r["status"], r["synthetic"]) for r in body] == [
        ("2025-01-04", "absent", True),
        ("2025-01-03", "present", False),
        ("2025-01-02", "present", False),
    ]


def test_list_records_rejects_bad_status(client):
    _login(client)

    resp = client.get(f"/api/attendance?workspaceId={WORKSPACE}&status=sleeping")

    assert resp.status_code == 400


def test_stats_endpoint(client):
    _login(client)

    resp = client.get(f"/api/attendance/stats?workspaceId={WORKSPACE}&asOf=2025-01-06")

    # Monday Jan 6 2025 is a finished day, so it counts as missed.
    body = resp.get_json()
    assert body["totalWorkingDays"] == 5
    assert body["present"] == 2
    assert body["absent"] == 3
    assert body["currentStreak"] == 0


def test_member_cannot_view_other_users(client):
    _login(client)

    resp = client.get(f"/api/attendance/stats?workspaceId={WORKSPACE}&userId=boss")

    assert resp.status_code == 403


def test_non_member_is_forbidden(client):
    _login(client, "stranger")

    resp = client.get(f"/api/attendance/today?workspaceId={WORKSPACE}")

    assert resp.status_code == 403


def test_special_day_toggle_requires_admin(client):
    _login(client)

    resp = client.post(
        "/api/attendance/special-days",
        json={"workspaceId": WORKSPACE, "date": "2025-01-12", "type": "working"},
    )

    assert resp.status_code == 403


def test_admin_manages_special_days(client, world):
    _login(client, "boss")

    created = client.post(
        "/api/attendance/special-days",
        json={"workspaceId": WORKSPACE, "date": "2025-01-12", "type": "working"},
    ).get_json()
    classified = client.get(f"/api/attendance/calendar/classify?workspaceId={WORKSPACE}&date=2025-01-12").get_json()
    listed = client.get(f"/api/attendance/special-days?workspaceId={WORKSPACE}").get_json()
    deleted = client.delete(f"/api/attendance/special-days/{created['id']}?workspaceId={WORKSPACE}")

    assert created["type"] == "working"
    assert classified == {"date": "2025-01-12", "type": "working"}
    assert listed["total"] == 1
    assert deleted.status_code == 200
    assert world.special_days.days == {}


def test_special_day_rejects_bad_type(client):
    _login(client, "boss")

    resp = client.post(
        "/api/attendance/special-days",
        json={"workspaceId": WORKSPACE, "date": "2025-01-12", "type": "weekend"},
    )

    assert resp.status_code == 400


def test_store_failure_maps_to_503(client, world):
    _login(client)
    client.post("/api/attendance/check-in", json=CHECK_IN)
    world.work_items.fail_with = ConnectionError("down")

    resp = client.put(
        "/api/attendance/check-out",
        json={"workspaceId": WORKSPACE, "checkOutLatitude": 10.77, "checkOutLongitude": 106.7},
    )

    assert resp.status_code == 503


def test_unknown_route_keeps_404(client):
    resp = client.get("/api/nope")

    assert resp.status_code == 404
