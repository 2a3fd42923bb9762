from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self):
        self._by_id: dict[int, AttendanceRecord] = {}
        self._id = 0

    def get_recent_for_employee(self, employee_id: str, limit: int) -> Sequence[AttendanceRecord]:
        items = [r for r in self._by_id.values() if r.employee_id == employee_id]
        items.sort(key=lambda r: r.check_in_time, reverse=True)
        return items[:limit]

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        for r in self._by_id.values():
            if r.employee_id == employee_id and r.work_date == work_date:
                return r
        return None

    def create_checkin(
        self,
        *,
        employee_id: str,
        work_date: date,
        check_in_time: datetime,
        status: AttendanceStatus,
        note: Optional[str] = None,
    ) -> AttendanceRecord:
        self._id += 1
        rec = AttendanceRecord(
            attendance_id=self._id,
            employee_id=employee_id,
            work_date=work_date,
            check_in_time=check_in_time,
            check_out_time=None,
            status=status,
            note=note,
        )
        self._by_id[rec.attendance_id] = rec
        return rec

    def update_checkout(
        self,
        *,
        attendance_id: int,
        check_out_time: datetime,
        status: AttendanceStatus,
        note: Optional[str] = None,
    ) -> Optional[AttendanceRecord]:
        rec = self._by_id.get(attendance_id)
        if not rec:
            return None
        rec = replace(rec, check_out_time=check_out_time, status=status, note=note)
        self._by_id[attendance_id] = rec
        return rec

    def add_break(self, *, attendance_id: int, minutes: int) -> Optional[AttendanceRecord]:
        rec = self._by_id.get(attendance_id)
        if not rec:
            return None
        rec = replace(rec, break_minutes=rec.break_minutes + int(minutes))
        self._by_id[attendance_id] = rec
        return rec

    def list_range(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        items = [r for r in self._by_id.values() if start_date <= r.work_date <= end_date]
        items.sort(key=lambda r: (r.work_date, r.employee_id))
        return items
