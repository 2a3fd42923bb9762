from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..session.controller import current_role


def register(app: Flask, container: Container) -> None:
    @app.route("/admin/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        return jsonify(container.employee_service.list_admin_view(current_role=current_role()))
