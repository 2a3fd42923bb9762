from datetime import datetime, timedelta, timezone

import pytest

from time_leave.core.exceptions import NotFoundError, ValidationError
from time_leave.projects.memory_repository import InMemoryProjectRepository
from time_leave.projects.model import Project
from time_leave.timer.service import WorkTimerService

START = datetime(2025, 8, 4, 0, 0, tzinfo=timezone.utc)


def _service():
    projects = InMemoryProjectRepository([Project("P-1", "Walls", "RWS", 10)])
    return WorkTimerService(projects), projects


def test_stop_books_elapsed_time_against_project():
    svc, projects = _service()
    svc.start("E1", project_code="P-1", task="CAD", now=START)

    entry = svc.stop("E1", now=START + timedelta(minutes=90))

    assert entry.elapsed_seconds == 5400
    assert projects.get("P-1").hours == 11.5
    assert svc.task_hours("E1") == [{"label": "CAD", "value": 1.5}]


def test_starting_twice_keeps_first_timer():
    svc, _ = _service()
    first = svc.start("E1", project_code="P-1", task="Design", now=START)

    second = svc.start("E1", project_code="P-1", task="RFI", now=START + timedelta(minutes=5))

    assert second is first


def test_status_formats_elapsed_time():
    svc, _ = _service()
    assert svc.status("E1", now=START) == {"running": False, "elapsed": "00:00:00", "label": "Idle"}

    svc.start("E1", project_code="P-1", task="Review", now=START)
    status = svc.status("E1", now=START + timedelta(hours=1, minutes=1, seconds=5))

    assert status == {"running": True, "elapsed": "01:01:05", "label": "P-1 • Review"}


def test_stop_without_running_timer_fails():
    svc, _ = _service()

    with pytest.raises(ValidationError):
        svc.stop("E1", now=START)


def test_start_validates_task_and_project():
    svc, _ = _service()

    with pytest.raises(ValidationError):
        svc.start("E1", project_code="P-1", task="Gaming", now=START)
    with pytest.raises(NotFoundError):
        svc.start("E1", project_code="P-404", task="CAD", now=START)
