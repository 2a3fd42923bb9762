from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import now_utc
from ..core.constants import BREAK_INCREMENT_MINUTES, MINUTES_PER_DAY
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .evaluator import AttendanceEvaluator
from .factory import AttendanceStrategyFactory
from .model import AttendanceCheck, AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        evaluator: Optional[AttendanceEvaluator] = None,
        strategy_factory: Optional[AttendanceStrategyFactory] = None,
        break_increment_minutes: int = BREAK_INCREMENT_MINUTES,
    ):
        self._attendance = attendance
        self._employees = employees
        self._evaluator = evaluator or AttendanceEvaluator()
        self._factory = strategy_factory or AttendanceStrategyFactory(evaluator=self._evaluator)
        self._break_increment = int(break_increment_minutes)

    def _get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} does not exist")
        return employee

    def _work_date(self, employee: Employee, now: datetime) -> date:
        return self._evaluator.to_local(now, employee.timezone).date()

    def evaluate(self, employee_id: str, *, now: Optional[datetime] = None) -> AttendanceCheck:
        return self._evaluator.evaluate(self._get_employee(employee_id), now or now_utc())

    def today_record(self, employee_id: str, *, now: Optional[datetime] = None) -> Optional[AttendanceRecord]:
        employee = self._get_employee(employee_id)
        return self._attendance.get_for_employee_and_date(employee_id, self._work_date(employee, now or now_utc()))

    def check_in(self, employee_id: str, *, now: Optional[datetime] = None) -> AttendanceRecord:
        now = now or now_utc()
        employee = self._get_employee(employee_id)
        today = self._work_date(employee, now)

        if self._attendance.get_for_employee_and_date(employee_id, today):
            raise ValidationError("Already checked in today")

        check = self._evaluator.evaluate(employee, now)
        strategy = self._factory.for_checkin(check=check)
        decision = strategy.decide_checkin(check=check)

        record = self._attendance.create_checkin(
            employee_id=employee_id,
            work_date=today,
            check_in_time=now,
            status=decision.status,
            note=decision.note,
        )
        logger.info("check-in employee=%s date=%s status=%s", employee_id, today, decision.status.value)
        return record

    def check_out(self, employee_id: str, *, now: Optional[datetime] = None) -> AttendanceRecord:
        now = now or now_utc()
        employee = self._get_employee(employee_id)
        today = self._work_date(employee, now)

        record = self._attendance.get_for_employee_and_date(employee_id, today)
        if not record:
            raise ValidationError("Not checked in today")
        if record.check_out_time is not None:
            raise ValidationError("Already checked out today")

        strategy = self._factory.for_checkout(employee=employee, now=now, current_status=record.status)
        decision = strategy.decide_checkout(
            local_clock=self._evaluator.local_clock(now, employee.timezone),
            current=record.status,
        )

        updated = self._attendance.update_checkout(
            attendance_id=record.attendance_id,
            check_out_time=now,
            status=decision.status,
            note=decision.note or record.note,
        )
        if not updated:
            raise ValidationError("Check-out failed")
        logger.info("check-out employee=%s date=%s status=%s", employee_id, today, decision.status.value)
        return updated

    def take_break(self, employee_id: str, *, now: Optional[datetime] = None) -> AttendanceRecord:
        record = self.today_record(employee_id, now=now)
        if not record or record.check_out_time is not None:
            raise ValidationError("Check in before taking a break")

        updated = self._attendance.add_break(attendance_id=record.attendance_id, minutes=self._break_increment)
        if not updated:
            raise ValidationError("Recording the break failed")
        return updated

    def status(self, employee_id: str, *, now: Optional[datetime] = None) -> dict:
        """Clock-in hub card data for one employee."""
        now = now or now_utc()
        employee = self._get_employee(employee_id)
        check = self._evaluator.evaluate(employee, now)
        record = self._attendance.get_for_employee_and_date(employee_id, self._work_date(employee, now))

        checked_in = bool(record and record.check_out_time is None)
        if not record:
            label = "Not Checked-In"
        elif record.check_out_time is not None:
            label = "Checked-Out"
        else:
            label = "Late (In)" if record.late else "On Time"

        threshold = check.threshold_minutes
        return {
            "employee_id": employee_id,
            "current_time": check.local_clock,
            "timezone": employee.timezone,
            "late_now": check.late,
            "checked_in": checked_in,
            "status": label,
            "check_in": self._evaluator.local_clock(record.check_in_time, employee.timezone) if record else None,
            "break_minutes": record.break_minutes if record else 0,
            "late_after": f"{threshold // 60:02d}:{threshold % 60:02d}" if threshold < MINUTES_PER_DAY else None,
        }

    def get_history_ui(self, employee_id: str, *, limit: int = 15) -> list[dict]:
        employee = self._get_employee(employee_id)
        return [self._to_ui(employee, r) for r in self._attendance.get_recent_for_employee(employee_id, limit)]

    def _to_ui(self, employee: Employee, r: AttendanceRecord) -> dict:
        label = {
            AttendanceStatus.ON_TIME: "On Time",
            AttendanceStatus.LATE: "Late",
            AttendanceStatus.EARLY_LEAVE: "Early Leave",
            AttendanceStatus.UNKNOWN: "Unknown",
        }.get(r.status, r.status.value)

        return {
            "date": r.work_date.strftime("%Y-%m-%d"),
            "check_in": self._evaluator.local_clock(r.check_in_time, employee.timezone),
            "check_out": self._evaluator.local_clock(r.check_out_time, employee.timezone) if r.check_out_time else "-",
            "break_minutes": r.break_minutes,
            "status": label,
            "note": r.note or "",
        }
