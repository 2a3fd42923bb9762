from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional, Sequence

from ..core.enums import TimesheetStatus
from .model import WeeklyTimesheet
from .repository import TimesheetRepository


class InMemoryTimesheetRepository(TimesheetRepository):
    def __init__(self, timesheets: Iterable[WeeklyTimesheet] = ()):
        self._by_id = {t.timesheet_id: t for t in timesheets}

    def get(self, timesheet_id: str) -> Optional[WeeklyTimesheet]:
        return self._by_id.get(timesheet_id)

    def list_all(self) -> Sequence[WeeklyTimesheet]:
        return list(self._by_id.values())

    def set_status(self, timesheet_id: str, status: TimesheetStatus) -> Optional[WeeklyTimesheet]:
        ts = self._by_id.get(timesheet_id)
        if not ts:
            return None
        ts = replace(ts, status=status)
        self._by_id[timesheet_id] = ts
        return ts
