from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from .model import AttendanceRecord


def _record_json(container: Container, record: AttendanceRecord) -> dict:
    employee = container.employee_service.get(record.employee_id)
    clock = container.evaluator.local_clock
    return {
        "id": record.attendance_id,
        "employee_id": record.employee_id,
        "date": record.work_date.isoformat(),
        "check_in": clock(record.check_in_time, employee.timezone),
        "check_out": clock(record.check_out_time, employee.timezone) if record.check_out_time else None,
        "status": record.status.value,
        "late": record.late,
        "break_minutes": record.break_minutes,
        "note": record.note,
    }


def register(app: Flask, container: Container) -> None:
    svc = container.attendance_service

    @app.route("/attendance/<employee_id>", methods=["GET"], endpoint="clock_status")
    def clock_status(employee_id: str):
        return jsonify(svc.status(employee_id))

    @app.route("/attendance/<employee_id>/check-in", methods=["POST"], endpoint="check_in")
    def check_in(employee_id: str):
        return jsonify(_record_json(container, svc.check_in(employee_id))), 201

    @app.route("/attendance/<employee_id>/check-out", methods=["POST"], endpoint="check_out")
    def check_out(employee_id: str):
        return jsonify(_record_json(container, svc.check_out(employee_id)))

    @app.route("/attendance/<employee_id>/break", methods=["POST"], endpoint="take_break")
    def take_break(employee_id: str):
        return jsonify(_record_json(container, svc.take_break(employee_id)))

    @app.route("/attendance/<employee_id>/history", methods=["GET"], endpoint="attendance_history")
    def attendance_history(employee_id: str):
        return jsonify(svc.get_history_ui(employee_id))
