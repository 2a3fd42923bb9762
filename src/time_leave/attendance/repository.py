from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_recent_for_employee(self, employee_id: str, limit: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_checkin(
        self,
        *,
        employee_id: str,
        work_date: date,
        check_in_time: datetime,
        status: AttendanceStatus,
        note: Optional[str] = None,
    ) -> AttendanceRecord:
        raise NotImplementedError

    def update_checkout(
        self,
        *,
        attendance_id: int,
        check_out_time: datetime,
        status: AttendanceStatus,
        note: Optional[str] = None,
    ) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def add_break(self, *, attendance_id: int, minutes: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_range(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        """Records whose work date falls in [start_date, end_date]."""

        raise NotImplementedError
