from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .attendance.evaluator import AttendanceEvaluator
from .attendance.factory import AttendanceStrategyFactory
from .attendance.memory_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .core import constants
from .dashboard.service import TeamDashboardService
from .employees.memory_repository import InMemoryEmployeeRepository
from .employees.service import EmployeeService
from .leave.calculator import FixedHolidayCalendar, LeaveDaysCalculator
from .leave.memory_repository import InMemoryLeaveBalanceRepository, InMemoryLeaveRequestRepository
from .leave.service import LeaveService
from .projects.memory_repository import InMemoryProjectRepository
from .projects.service import ProjectService
from .seed import SeedData, demo_seed
from .timer.service import WorkTimerService
from .timesheets.memory_repository import InMemoryTimesheetRepository
from .timesheets.service import TimesheetApprovalService


@dataclass(frozen=True)
class Container:
    employees_repo: InMemoryEmployeeRepository
    attendance_repo: InMemoryAttendanceRepository
    leave_repo: InMemoryLeaveRequestRepository
    balances_repo: InMemoryLeaveBalanceRepository
    projects_repo: InMemoryProjectRepository
    timesheets_repo: InMemoryTimesheetRepository

    evaluator: AttendanceEvaluator
    employee_service: EmployeeService
    attendance_service: AttendanceService
    leave_service: LeaveService
    timer_service: WorkTimerService
    project_service: ProjectService
    timesheet_service: TimesheetApprovalService
    dashboard_service: TeamDashboardService


def build_container(*, config: Mapping[str, Any], seed: Optional[SeedData] = None) -> Container:
    default_balance = float(config.get("DEFAULT_LEAVE_BALANCE", constants.DEFAULT_LEAVE_BALANCE))
    if seed is None:
        seed = demo_seed(default_balance=default_balance) if config.get("SEED_DEMO_DATA") else SeedData()

    employees_repo = InMemoryEmployeeRepository(seed.employees)
    attendance_repo = InMemoryAttendanceRepository()
    leave_repo = InMemoryLeaveRequestRepository(seed.leave_requests)
    balances_repo = InMemoryLeaveBalanceRepository(seed.leave_balances, default=default_balance)
    projects_repo = InMemoryProjectRepository(seed.projects)
    timesheets_repo = InMemoryTimesheetRepository(seed.timesheets)

    evaluator = AttendanceEvaluator(
        default_grace_minutes=int(config.get("DEFAULT_GRACE_MINUTES", constants.DEFAULT_GRACE_MINUTES))
    )

    holidays_setting = str(config.get("PUBLIC_HOLIDAYS") or "")
    calculator = LeaveDaysCalculator(FixedHolidayCalendar.from_setting(holidays_setting) if holidays_setting.strip() else None)

    employee_service = EmployeeService(employees_repo)
    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        evaluator=evaluator,
        strategy_factory=AttendanceStrategyFactory(evaluator=evaluator),
        break_increment_minutes=int(config.get("BREAK_INCREMENT_MINUTES", constants.BREAK_INCREMENT_MINUTES)),
    )
    leave_service = LeaveService(leave_repo, balances_repo, employees_repo, calculator=calculator)
    project_service = ProjectService(projects_repo)
    timer_service = WorkTimerService(projects_repo)
    timesheet_service = TimesheetApprovalService(timesheets_repo)
    dashboard_service = TeamDashboardService(
        employees_repo,
        attendance_repo,
        leave_service,
        project_service,
        evaluator=evaluator,
    )

    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        leave_repo=leave_repo,
        balances_repo=balances_repo,
        projects_repo=projects_repo,
        timesheets_repo=timesheets_repo,
        evaluator=evaluator,
        employee_service=employee_service,
        attendance_service=attendance_service,
        leave_service=leave_service,
        timer_service=timer_service,
        project_service=project_service,
        timesheet_service=timesheet_service,
        dashboard_service=dashboard_service,
    )
