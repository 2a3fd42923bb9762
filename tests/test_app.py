from __future__ import annotations

import pytest

from time_leave.main import create_app


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app({"SEED_DEMO_DATA": True, "PUBLIC_HOLIDAYS": ""})
    return app.test_client()


def _as(client, role: str, name: str = "Nick"):
    resp = client.post("/role", json={"role": role, "name": name})
    assert resp.status_code == 200


def test_leave_hub_shows_balance_and_history(client):
    resp = client.get("/leave/E1001")

    assert resp.status_code == 200
    data = resp.get_json()
    assert data["balance"] == 12
    assert [r["id"] for r in data["requests"]] == ["L-002", "L-001"]


def test_submit_leave_flow(client):
    resp = client.post("/leave/E1001", json={"type": "Annual", "start": "2025-09-01", "end": "2025-09-05"})

    assert resp.status_code == 201
    assert resp.get_json()["id"] == "L-003"
    assert resp.get_json()["days"] == 5
    assert resp.get_json()["status"] == "Submitted"


def test_submit_leave_errors_are_reported(client):
    missing = client.post("/leave/E1001", json={"type": "Annual", "start": "", "end": "2025-09-05"})
    too_long = client.post("/leave/E1001", json={"type": "Annual", "start": "2025-09-01", "end": "2025-09-20"})

    assert missing.status_code == 400
    assert missing.get_json()["kind"] == "MissingDateRange"
    assert too_long.status_code == 400
    assert too_long.get_json()["kind"] == "InsufficientBalance"
    assert len(client.get("/leave/E1001").get_json()["requests"]) == 2


def test_cashout_form_flag_allows_long_leave(client):
    resp = client.post("/leave/E1001", data={"type": "Annual", "start": "2025-09-01", "end": "2025-09-20", "cashout": "on"})

    assert resp.status_code == 201
    assert resp.get_json()["days"] == 20


def test_only_managers_decide_leave(client):
    rid = client.post("/leave/E1001", json={"type": "Sick", "start": "2025-09-01", "end": "2025-09-01"}).get_json()["id"]

    assert client.post(f"/leave/requests/{rid}/approve").status_code == 403

    _as(client, "Manager")
    resp = client.post(f"/leave/requests/{rid}/approve")
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "Approved"
    assert client.post(f"/leave/requests/{rid}/reject").status_code == 400


def test_clock_in_endpoints(client):
    first = client.post("/attendance/E1002/check-in")
    second = client.post("/attendance/E1002/check-in")

    assert first.status_code == 201
    assert first.get_json()["status"] in {"ON_TIME", "LATE"}
    assert second.status_code == 400
    assert client.get("/attendance/E1002").get_json()["checked_in"] is True
    assert client.post("/attendance/E1002/break").get_json()["break_minutes"] == 15


def test_unknown_employee_is_404(client):
    assert client.get("/attendance/E0000").status_code == 404


def test_team_dashboard_requires_manager(client):
    assert client.get("/dashboard/team").status_code == 403

    _as(client, "Manager")
    data = client.get("/dashboard/team").get_json()
    assert data["open_leave_requests"] == 0
    assert {r["employee_id"] for r in data["attendance_today"]} == {"E1001", "E1002", "E1003"}


def test_admin_panels(client):
    assert client.get("/admin/employees").status_code == 403

    _as(client, "Admin", "Ops")
    assert len(client.get("/admin/employees").get_json()) == 3
    assert client.post("/admin/projects", json={"code": "01-SYD-01-0050", "name": "Deck", "client": "SSP"}).status_code == 201
    assert client.post("/admin/projects", json={"code": ""}).status_code == 400
    assert client.get("/admin/projects").get_json()[0]["code"] == "01-SYD-01-0050"
    assert client.post("/admin/timesheets/TS-1007/approve").get_json()["status"] == "Approved"
    assert [t["status"] for t in client.get("/admin/timesheets").get_json()] == ["Approved", "Pending"]


def test_work_timer_endpoints(client):
    start = client.post("/timer/E1001/start", json={"project": "01-MEL-01-0007", "task": "CAD"})

    assert start.status_code == 200
    assert client.get("/timer/E1001").get_json()["running"] is True
    assert client.post("/timer/E1001/stop").get_json()["project"] == "01-MEL-01-0007"
    assert client.post("/timer/E1001/stop").status_code == 400


def test_unknown_role_is_rejected(client):
    assert client.post("/role", json={"role": "Owner"}).status_code == 400


@pytest.mark.parametrize("body", [[], [1, 2], "text"])
def test_non_object_json_body_is_rejected(client, body):
    resp = client.post("/leave/E1001", json=body)

    assert resp.status_code == 400
    assert resp.get_json()["kind"] == "ValidationError"


def test_check_in_response_uses_employee_timezone(client):
    resp = client.post("/attendance/E1003/check-in")

    assert resp.status_code == 201
    assert resp.get_json()["employee_id"] == "E1003"
    assert len(resp.get_json()["check_in"]) == 8
