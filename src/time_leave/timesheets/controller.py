from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..session.controller import current_role
from .model import WeeklyTimesheet


def _row(ts: WeeklyTimesheet) -> dict:
    return {"id": ts.timesheet_id, "employee": ts.employee, "period": ts.period, "hours": ts.hours, "status": ts.status.value}


def register(app: Flask, container: Container) -> None:
    svc = container.timesheet_service

    @app.route("/admin/timesheets", methods=["GET"], endpoint="list_timesheets")
    def list_timesheets():
        return jsonify([_row(ts) for ts in svc.list_timesheets(current_role=current_role())])

    @app.route("/admin/timesheets/<timesheet_id>/approve", methods=["POST"], endpoint="approve_timesheet")
    def approve_timesheet(timesheet_id: str):
        return jsonify(_row(svc.approve(current_role=current_role(), timesheet_id=timesheet_id)))

    @app.route("/admin/timesheets/<timesheet_id>/reject", methods=["POST"], endpoint="reject_timesheet")
    def reject_timesheet(timesheet_id: str):
        return jsonify(_row(svc.reject(current_role=current_role(), timesheet_id=timesheet_id)))
