"""Sample roster, projects, leave history and timesheets for demos and tests.

Each call returns fresh objects so callers never share mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from .core.enums import EmployeeRole, LeaveStatus, LeaveType
from .employees.model import Employee
from .leave.model import LeaveRequest
from .projects.model import Project
from .timesheets.model import WeeklyTimesheet


@dataclass
class SeedData:
    employees: list[Employee] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)
    leave_requests: list[LeaveRequest] = field(default_factory=list)
    leave_balances: dict[str, float] = field(default_factory=dict)
    timesheets: list[WeeklyTimesheet] = field(default_factory=list)


def sample_employees() -> list[Employee]:
    return [
        Employee("E1001", "Rizwan", EmployeeRole.ENGINEER, "AU", "Australia/Melbourne", "08:00", "17:00", 5, 55, "Nick"),
        Employee("E1002", "Hira", EmployeeRole.DRAFTER, "PK", "Asia/Karachi", "08:00", "17:00", 5, 45, "Nick"),
        Employee("E1003", "Miguel", EmployeeRole.ENGINEER, "AU", "Australia/Sydney", "08:00", "17:00", 5, 65, "Nick"),
    ]


def sample_projects() -> list[Project]:
    return [
        Project("01-MEL-01-0007", "Factory Retaining Walls", "RWS", 126),
        Project("01-SYD-01-0032", "Sunset Sleepers Custom", "SSP", 76),
        Project("01-MEL-01-0019", "Keystone POS Connection R&D", "KST", 48),
    ]


def sample_leave_requests() -> list[LeaveRequest]:
    created = datetime(2025, 6, 1, tzinfo=timezone.utc)
    return [
        LeaveRequest("L-001", "E1001", LeaveType.ANNUAL, date(2025, 8, 25), date(2025, 8, 29), 5, LeaveStatus.APPROVED, created),
        LeaveRequest("L-002", "E1001", LeaveType.SICK, date(2025, 7, 2), date(2025, 7, 3), 2, LeaveStatus.APPROVED, created),
    ]


def sample_timesheets() -> list[WeeklyTimesheet]:
    return [
        WeeklyTimesheet("TS-1007", "Rizwan", "05–11 Aug", 39.5),
        WeeklyTimesheet("TS-1008", "Hira", "05–11 Aug", 41.0),
    ]


def demo_seed(*, default_balance: float) -> SeedData:
    employees = sample_employees()
    return SeedData(
        employees=employees,
        projects=sample_projects(),
        leave_requests=sample_leave_requests(),
        leave_balances={e.employee_id: default_balance for e in employees},
        timesheets=sample_timesheets(),
    )
