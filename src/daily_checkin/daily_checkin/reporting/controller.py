from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.web import admin_required, current_owner_id, handle_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/users", methods=["GET"], endpoint="members_with_status")
    @admin_required
    @handle_errors
    def members_with_status():
        date_s = request.args.get("date")
        day = parse_iso_date(date_s) if date_s else None

        rows = container.report_service.list_members_with_status(current_owner_id(), day)
        return jsonify({"success": True, "data": [r.to_dict() for r in rows]})

    @app.route("/api/attendance/month", methods=["GET"], endpoint="attendance_by_month")
    @admin_required
    @handle_errors
    def attendance_by_month():
        grouped = container.report_service.get_attendance_by_month(
            current_owner_id(),
            request.args.get("year"),
            request.args.get("month"),
        )
        return jsonify(
            {
                "success": True,
                "data": {day: [r.to_dict() for r in records] for day, records in grouped.items()},
            }
        )

