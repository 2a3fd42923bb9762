from __future__ import annotations

import importlib
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .attendance.controller import register as register_attendance
from .config import get_settings_module
from .container import build_container
from .core.exceptions import AuthorizationError, DomainError, NotFoundError
from .dashboard.controller import register as register_dashboard
from .employees.controller import register as register_employees
from .leave.controller import register as register_leave
from .projects.controller import register as register_projects
from .session.controller import register as register_session
from .timer.controller import register as register_timer
from .timesheets.controller import register as register_timesheets

SETTING_KEYS = (
    "SECRET_KEY",
    "DEBUG",
    "TESTING",
    "DEFAULT_GRACE_MINUTES",
    "DEFAULT_LEAVE_BALANCE",
    "BREAK_INCREMENT_MINUTES",
    "PUBLIC_HOLIDAYS",
    "SEED_DEMO_DATA",
)


def _error_status(error: DomainError) -> int:
    if isinstance(error, AuthorizationError):
        return 403
    if isinstance(error, NotFoundError):
        return 404
    return 400


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    for key in SETTING_KEYS:
        if hasattr(settings, key):
            app.config[key] = getattr(settings, key)
    app.config.update(overrides or {})
    app.secret_key = app.config["SECRET_KEY"]

    container = build_container(config=app.config)
    app.extensions["time_leave"] = container

    if app.config.get("DEBUG"):
        app.logger.info(
            "[time-leave] settings=%s employees=%d seed=%s",
            settings_module,
            len(container.employees_repo.list_all()),
            bool(app.config.get("SEED_DEMO_DATA")),
        )

    @app.errorhandler(DomainError)
    def handle_domain_error(error: DomainError):
        return jsonify({"error": str(error), "kind": type(error).__name__}), _error_status(error)

    register_session(app, container)
    register_attendance(app, container)
    register_timer(app, container)
    register_leave(app, container)
    register_dashboard(app, container)
    register_projects(app, container)
    register_employees(app, container)
    register_timesheets(app, container)

    return app
