from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.web import handle_errors, request_payload
from ..container import Container
from .service import SessionAdmin


def register(app: Flask, container: Container) -> None:
    def _start_session(s_admin: SessionAdmin) -> None:
        session.clear()
        session["admin_id"] = s_admin.admin_id
        session["username"] = s_admin.username
        session["company_name"] = s_admin.company_name

    @app.route("/api/admin/register", methods=["POST"], endpoint="admin_register")
    @handle_errors
    def admin_register():
        data = request_payload(request)
        s_admin = container.auth_service.register(
            username=data.get("username", ""),
            email=data.get("email", ""),
            password=data.get("password", ""),
            company_name=data.get("companyName", ""),
        )
        _start_session(s_admin)
        return (
            jsonify(
                {
                    "success": True,
                    "data": {"companyName": s_admin.company_name},
                    "message": f"Company {s_admin.company_name} registered successfully",
                }
            ),
            201,
        )

    @app.route("/api/admin/login", methods=["POST"], endpoint="admin_login")
    @handle_errors
    def admin_login():
        data = request_payload(request)
        s_admin = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))
        _start_session(s_admin)
        return jsonify({"success": True, "data": {"companyName": s_admin.company_name}})

    @app.route("/api/admin/logout", methods=["POST"], endpoint="admin_logout")
    def admin_logout():
        session.clear()
        return jsonify({"success": True, "message": "Logged out"})
