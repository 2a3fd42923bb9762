from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceCheck:
    """Lateness of one instant against an employee's shift start + grace."""

    employee_id: str
    instant: datetime
    local_minutes: int
    threshold_minutes: int
    late: bool
    local_clock: str


@dataclass(frozen=True)
class AttendanceRecord:
    """One employee's clock-in/out for a local work date."""

    attendance_id: int
    employee_id: str
    work_date: date
    check_in_time: datetime
    check_out_time: Optional[datetime]
    status: AttendanceStatus
    break_minutes: int = 0
    note: Optional[str] = None

    @property
    def late(self) -> bool:
        return self.status == AttendanceStatus.LATE
