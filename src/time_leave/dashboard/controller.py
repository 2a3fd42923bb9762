from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..session.controller import current_role


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard/team", methods=["GET"], endpoint="team_dashboard")
    def team_dashboard():
        return jsonify(container.dashboard_service.summary(current_role=current_role()))
