from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_date
from ..common.http import current_user_id, date_arg, login_required, request_payload, workspace_id_arg
from ..core.enums import DayType, Role
from ..core.exceptions import Unauthorized, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.calendar_service

    def _current_role(workspace_id: str) -> Role:
        member = container.members_repo.get_for_user(workspace_id=workspace_id, user_id=current_user_id())
        if not member:
            raise Unauthorized("You are not a member of this workspace")
        return member.role

    @app.route("/api/attendance/special-days", methods=["GET"], endpoint="special_days_list")
    @login_required
    def special_days_list():
        workspace_id = workspace_id_arg()
        _current_role(workspace_id)
        days = service.list_special_days(workspace_id=workspace_id, start=date_arg("startDate"), end=date_arg("endDate"))
        return jsonify({"documents": [d.to_dict() for d in days], "total": len(days)})

    @app.route("/api/attendance/special-days", methods=["POST"], endpoint="special_days_create")
    @login_required
    def special_days_create():
        payload = request_payload()
        workspace_id = workspace_id_arg()
        try:
            day = parse_iso_date(str(payload.get("date") or ""))
            day_type = DayType(payload.get("type"))
        except ValueError as e:
            raise ValidationError("date must be YYYY-MM-DD and type one of holiday/working") from e

        special_day = service.create_or_toggle(
            current_role=_current_role(workspace_id),
            workspace_id=workspace_id,
            day=day,
            day_type=day_type,
            description=payload.get("description"),
        )
        return jsonify(special_day.to_dict())

    @app.route("/api/attendance/special-days/<special_day_id>", methods=["DELETE"], endpoint="special_days_delete")
    @login_required
    def special_days_delete(special_day_id: str):
        workspace_id = workspace_id_arg()
        service.delete(current_role=_current_role(workspace_id), workspace_id=workspace_id, special_day_id=special_day_id)
        return jsonify({"success": True})

    @app.route("/api/attendance/calendar/classify", methods=["GET"], endpoint="calendar_classify")
    @login_required
    def calendar_classify():
        workspace_id = workspace_id_arg()
        _current_role(workspace_id)
        day = date_arg("date")
        if day is None:
            raise ValidationError("date is required")
        return jsonify({"date": day.isoformat(), "type": service.classify(workspace_id=workspace_id, day=day).value})
