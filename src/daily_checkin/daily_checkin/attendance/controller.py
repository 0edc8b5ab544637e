from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import handle_errors, request_payload
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    @handle_errors
    def mark_attendance():
        """Open kiosk endpoint: anyone holding a valid code may check in."""

        data = request_payload(request)
        # Older kiosks still post the field as userCode.
        code = data.get("code", data.get("userCode"))

        result = container.marking_service.mark_attendance(code)
        return jsonify({"success": True, "message": result.message}), 200
