from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ActiveTimer:
    employee_id: str
    project_code: str
    task: str
    started_at: datetime


@dataclass(frozen=True)
class TimeEntry:
    employee_id: str
    project_code: str
    task: str
    started_at: datetime
    stopped_at: datetime

    @property
    def elapsed_seconds(self) -> int:
        return max(int((self.stopped_at - self.started_at).total_seconds()), 0)

    @property
    def hours(self) -> float:
        return self.elapsed_seconds / 3600
