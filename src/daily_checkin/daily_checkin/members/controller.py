from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import admin_required, current_owner_id, handle_errors, request_payload
from ..container import Container
from .model import Member


def _member_json(m: Member) -> dict:
    return {"id": m.member_id, "name": m.name, "code": m.code}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/users", methods=["POST"], endpoint="create_member")
    @admin_required
    @handle_errors
    def create_member():
        data = request_payload(request)
        member = container.member_service.create_member(
            owner_id=current_owner_id(),
            name=data.get("name", ""),
            code=data.get("code", data.get("userCode", "")),
        )
        return jsonify({"success": True, "data": _member_json(member)}), 201

    @app.route("/api/admin/users", methods=["GET"], endpoint="list_members")
    @admin_required
    @handle_errors
    def list_members():
        members = container.member_service.list_members(current_owner_id())
        return jsonify({"success": True, "data": [_member_json(m) for m in members]})

    @app.route("/api/admin/users/<int:member_id>", methods=["PUT"], endpoint="update_member")
    @admin_required
    @handle_errors
    def update_member(member_id: int):
        data = request_payload(request)
        member = container.member_service.update_member(
            owner_id=current_owner_id(),
            member_id=member_id,
            name=data.get("name"),
            code=data.get("code", data.get("userCode")),
        )
        return jsonify({"success": True, "data": _member_json(member)})

    @app.route("/api/admin/users/<int:member_id>", methods=["DELETE"], endpoint="delete_member")
    @admin_required
    @handle_errors
    def delete_member(member_id: int):
        container.member_service.delete_member(owner_id=current_owner_id(), member_id=member_id)
        return jsonify({"success": True, "message": "User and associated attendance records deleted"})

    @app.route("/api/user/validate", methods=["POST"], endpoint="validate_code")
    @handle_errors
    def validate_code():
        data = request_payload(request)
        owner = container.member_service.validate_code(data.get("code", data.get("userCode")))
        return jsonify({"success": True, "data": {"name": owner.name, "admin": owner.owner_id}})
