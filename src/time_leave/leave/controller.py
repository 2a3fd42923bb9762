from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..session.controller import current_name, current_role, payload
from .service import to_row


def _as_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "on", "yes"}
    return bool(value)


def register(app: Flask, container: Container) -> None:
    svc = container.leave_service

    @app.route("/leave/<employee_id>", methods=["GET"], endpoint="leave_hub")
    def leave_hub(employee_id: str):
        return jsonify(svc.overview(employee_id))

    @app.route("/leave/<employee_id>", methods=["POST"], endpoint="request_leave")
    def request_leave(employee_id: str):
        data = payload()
        req = svc.submit(
            employee_id=employee_id,
            leave_type=data.get("type", "Annual"),
            start=data.get("start"),
            end=data.get("end"),
            cashout=_as_bool(data.get("cashout", False)),
        )
        return jsonify(to_row(req)), 201

    @app.route("/leave/requests/<request_id>/approve", methods=["POST"], endpoint="approve_leave")
    def approve_leave(request_id: str):
        req = svc.approve(current_role=current_role(), approver=current_name(), request_id=request_id)
        return jsonify(to_row(req))

    @app.route("/leave/requests/<request_id>/reject", methods=["POST"], endpoint="reject_leave")
    def reject_leave(request_id: str):
        req = svc.reject(current_role=current_role(), approver=current_name(), request_id=request_id)
        return jsonify(to_row(req))
