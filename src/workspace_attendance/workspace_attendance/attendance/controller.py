from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.geo import GeoPoint
from ..common.http import current_user_id, date_arg, login_required, request_payload, workspace_id_arg
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..container import Container


def _location(payload: dict, prefix: str) -> GeoPoint:
    return GeoPoint(
        latitude=payload.get(f"{prefix}Latitude"),
        longitude=payload.get(f"{prefix}Longitude"),
        address=payload.get(f"{prefix}Address") or None,
    )


def _status_arg():
    value = request.args.get("status")
    if not value or value == "all":
        return None
    try:
        return AttendanceStatus(value)
    except ValueError as e:
        raise ValidationError("Unknown status filter") from e


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance/check-in", methods=["POST"], endpoint="attendance_check_in")
    @login_required
    def check_in():
        payload = request_payload()
        record = service.check_in(
            workspace_id=workspace_id_arg(),
            user_id=current_user_id(),
            location=_location(payload, "checkIn"),
            notes=payload.get("notes"),
        )
        return jsonify(record.to_dict()), 201

    @app.route("/api/attendance/check-out", methods=["PUT"], endpoint="attendance_check_out")
    @login_required
    def check_out():
        payload = request_payload()
        record = service.check_out(
            workspace_id=workspace_id_arg(),
            user_id=current_user_id(),
            location=_location(payload, "checkOut"),
            notes=payload.get("notes"),
        )
        return jsonify(record.to_dict())

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    @login_required
    def today():
        record = service.get_today_record(
            current_user_id=current_user_id(),
            workspace_id=workspace_id_arg(),
            user_id=request.args.get("userId") or None,
        )
        return jsonify(record.to_dict() if record else None)

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    @login_required
    def list_records():
        records = service.list_records(
            current_user_id=current_user_id(),
            workspace_id=workspace_id_arg(),
            user_id=request.args.get("userId") or None,
            start=date_arg("startDate"),
            end=date_arg("endDate"),
            status=_status_arg(),
        )
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/attendance/stats", methods=["GET"], endpoint="attendance_stats")
    @login_required
    def stats():
        result = service.get_stats(
            current_user_id=current_user_id(),
            workspace_id=workspace_id_arg(),
            user_id=request.args.get("userId") or None,
            as_of=date_arg("asOf"),
        )
        return jsonify(result.to_dict())

    @app.route("/api/attendance/today/stats", methods=["GET"], endpoint="attendance_today_stats")
    @login_required
    def today_stats():
        result = service.get_team_today_stats(current_user_id=current_user_id(), workspace_id=workspace_id_arg())
        return jsonify(result.to_dict())

    @app.route("/api/attendance/pending-tasks", methods=["GET"], endpoint="attendance_pending_tasks")
    @login_required
    def pending_tasks():
        items = service.pending_tasks(workspace_id=workspace_id_arg(), user_id=current_user_id())
        return jsonify({"uncommentedTasks": [{"id": i.item_id, "name": i.name} for i in items]})

    @app.route("/api/attendance/generate-summary", methods=["GET"], endpoint="attendance_generate_summary")
    @login_required
    def generate_summary():
        summary = service.generate_summary(workspace_id=workspace_id_arg(), user_id=current_user_id())
        return jsonify({"summary": summary})
