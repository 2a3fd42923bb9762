from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..core.enums import ViewerRole
from ..core.exceptions import ValidationError


def current_role() -> ViewerRole:
    return ViewerRole(session.get("role", ViewerRole.EMPLOYEE.value))


def current_name() -> str:
    return session.get("name") or current_role().value


def payload() -> dict:
    """JSON object body, falling back to form fields."""
    data = request.get_json(silent=True)
    if data is None:
        return request.form.to_dict()
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def register(app: Flask, container=None) -> None:
    @app.route("/role", methods=["GET"], endpoint="get_role")
    def get_role():
        return jsonify({"role": current_role().value, "name": session.get("name")})

    @app.route("/role", methods=["POST"], endpoint="switch_role")
    def switch_role():
        data = payload()
        try:
            role = ViewerRole(data.get("role", ""))
        except ValueError:
            raise ValidationError(f"Unknown role {data.get('role')!r}")

        session["role"] = role.value
        if data.get("name"):
            session["name"] = str(data["name"]).strip()
        return jsonify({"role": role.value, "name": session.get("name")})
