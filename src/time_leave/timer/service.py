from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import ensure_aware, format_hms, now_utc
from ..core.constants import TASK_TYPES
from ..core.exceptions import NotFoundError, ValidationError
from ..projects.repository import ProjectRepository
from .model import ActiveTimer, TimeEntry

logger = logging.getLogger(__name__)


class WorkTimerService:
    """Per-employee project timer.

    One timer runs per employee at a time; stopping it books the elapsed hours
    against the project.
    """

    def __init__(self, projects: ProjectRepository):
        self._projects = projects
        self._active: dict[str, ActiveTimer] = {}
        self._entries: list[TimeEntry] = []

    def start(self, employee_id: str, *, project_code: str, task: str, now: Optional[datetime] = None) -> ActiveTimer:
        running = self._active.get(employee_id)
        if running:
            return running

        if task not in TASK_TYPES:
            raise ValidationError(f"Unknown task type {task!r}")
        if not self._projects.get(project_code):
            raise NotFoundError(f"Project {project_code} does not exist")

        timer = ActiveTimer(
            employee_id=employee_id,
            project_code=project_code,
            task=task,
            started_at=ensure_aware(now or now_utc()),
        )
        self._active[employee_id] = timer
        return timer

    def stop(self, employee_id: str, *, now: Optional[datetime] = None) -> TimeEntry:
        timer = self._active.pop(employee_id, None)
        if not timer:
            raise ValidationError("No timer is running")

        entry = TimeEntry(
            employee_id=employee_id,
            project_code=timer.project_code,
            task=timer.task,
            started_at=timer.started_at,
            stopped_at=ensure_aware(now or now_utc()),
        )
        self._entries.append(entry)
        self._projects.add_hours(entry.project_code, entry.hours)
        logger.info("timer stopped employee=%s project=%s seconds=%d", employee_id, entry.project_code, entry.elapsed_seconds)
        return entry

    def elapsed_seconds(self, employee_id: str, *, now: Optional[datetime] = None) -> int:
        timer = self._active.get(employee_id)
        if not timer:
            return 0
        return max(int((ensure_aware(now or now_utc()) - timer.started_at).total_seconds()), 0)

    def status(self, employee_id: str, *, now: Optional[datetime] = None) -> dict:
        timer = self._active.get(employee_id)
        return {
            "running": timer is not None,
            "elapsed": format_hms(self.elapsed_seconds(employee_id, now=now)),
            "label": f"{timer.project_code} • {timer.task}" if timer else "Idle",
        }

    def task_hours(self, employee_id: str) -> list[dict]:
        totals: dict[str, float] = {}
        for e in self._entries:
            if e.employee_id == employee_id:
                totals[e.task] = totals.get(e.task, 0.0) + e.hours
        return [{"label": k, "value": round(v, 2)} for k, v in totals.items()]
