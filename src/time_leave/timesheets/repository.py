from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import TimesheetStatus
from .model import WeeklyTimesheet


class TimesheetRepository(Protocol):
    def get(self, timesheet_id: str) -> Optional[WeeklyTimesheet]:
        raise NotImplementedError

    def list_all(self) -> Sequence[WeeklyTimesheet]:
        raise NotImplementedError

    def set_status(self, timesheet_id: str, status: TimesheetStatus) -> Optional[WeeklyTimesheet]:
        raise NotImplementedError
