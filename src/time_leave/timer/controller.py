from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import format_hms
from ..container import Container
from ..session.controller import payload


def register(app: Flask, container: Container) -> None:
    svc = container.timer_service

    @app.route("/timer/<employee_id>", methods=["GET"], endpoint="timer_status")
    def timer_status(employee_id: str):
        data = svc.status(employee_id)
        data["today"] = svc.task_hours(employee_id)
        return jsonify(data)

    @app.route("/timer/<employee_id>/start", methods=["POST"], endpoint="timer_start")
    def timer_start(employee_id: str):
        data = payload()
        timer = svc.start(employee_id, project_code=data.get("project", ""), task=data.get("task", "Design"))
        return jsonify({"project": timer.project_code, "task": timer.task, "started_at": timer.started_at.isoformat()})

    @app.route("/timer/<employee_id>/stop", methods=["POST"], endpoint="timer_stop")
    def timer_stop(employee_id: str):
        entry = svc.stop(employee_id)
        return jsonify({"project": entry.project_code, "task": entry.task, "elapsed": format_hms(entry.elapsed_seconds)})
