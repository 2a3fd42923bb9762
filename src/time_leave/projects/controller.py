from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify

from ..container import Container
from ..session.controller import current_role, payload


def register(app: Flask, container: Container) -> None:
    svc = container.project_service

    @app.route("/admin/projects", methods=["GET"], endpoint="list_projects")
    def list_projects():
        return jsonify([asdict(p) for p in svc.list_projects()])

    @app.route("/admin/projects", methods=["POST"], endpoint="add_project")
    def add_project():
        data = payload()
        project = svc.add(
            current_role=current_role(),
            code=data.get("code", ""),
            name=data.get("name", ""),
            client=data.get("client", ""),
        )
        return jsonify(asdict(project)), 201
