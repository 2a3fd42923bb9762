from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import TimesheetStatus


@dataclass(frozen=True)
class WeeklyTimesheet:
    timesheet_id: str
    employee: str
    period: str
    hours: float
    status: TimesheetStatus = TimesheetStatus.PENDING
