from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from ..attendance.evaluator import AttendanceEvaluator
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_utc
from ..core.constants import LATE_ARRIVALS_WINDOW_DAYS
from ..core.enums import AttendanceStatus, ViewerRole
from ..core.exceptions import AuthorizationError
from ..employees.repository import EmployeeRepository
from ..leave.service import LeaveService
from ..projects.service import ProjectService


class TeamDashboardService:
    """Manager view over attendance, leave and project effort."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        leave: LeaveService,
        projects: ProjectService,
        *,
        evaluator: Optional[AttendanceEvaluator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._leave = leave
        self._projects = projects
        self._evaluator = evaluator or AttendanceEvaluator()

    def attendance_today(self, *, now: Optional[datetime] = None) -> list[dict]:
        now = now or now_utc()
        rows = []
        for e in self._employees.list_all():
            check = self._evaluator.evaluate(e, now)
            local_date = self._evaluator.to_local(now, e.timezone).date()
            record = self._attendance.get_for_employee_and_date(e.employee_id, local_date)

            if record:
                late = record.late
                if record.check_out_time is not None:
                    status = "Checked-Out"
                else:
                    status = "Late" if late else "On-site"
            else:
                late = check.late
                status = "Not checked-in"

            rows.append(
                {
                    "employee_id": e.employee_id,
                    "name": e.name,
                    "local_time": check.local_clock,
                    "late": late,
                    "status": status,
                }
            )
        return rows

    def late_arrivals(self, *, now: Optional[datetime] = None) -> int:
        now = now or now_utc()
        count = 0
        # Each employee's window ends on their own local date
        for e in self._employees.list_all():
            today = self._evaluator.to_local(now, e.timezone).date()
            start = today - timedelta(days=LATE_ARRIVALS_WINDOW_DAYS - 1)
            records = self._attendance.list_range(start_date=start, end_date=today)
            count += sum(1 for r in records if r.employee_id == e.employee_id and r.status == AttendanceStatus.LATE)
        return count

    def summary(self, *, current_role: ViewerRole, now: Optional[datetime] = None) -> dict:
        if current_role not in {ViewerRole.MANAGER, ViewerRole.ADMIN}:
            raise AuthorizationError("Only managers and admins can view the team dashboard")

        now = now or now_utc()
        return {
            "late_arrivals_week": self.late_arrivals(now=now),
            "open_leave_requests": len(self._leave.open_requests()),
            "attendance_today": self.attendance_today(now=now),
            "project_effort": self._projects.effort_split(),
        }
