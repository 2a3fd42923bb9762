from __future__ import annotations

from enum import Enum


class ViewerRole(str, Enum):
    """Which part of the app the current viewer is using."""

    EMPLOYEE = "Employee"
    MANAGER = "Manager"
    ADMIN = "Admin"


class EmployeeRole(str, Enum):
    MANAGER = "Manager"
    ENGINEER = "Engineer"
    DRAFTER = "Drafter"


class AttendanceStatus(str, Enum):
    ON_TIME = "ON_TIME"
    LATE = "LATE"
    EARLY_LEAVE = "EARLY_LEAVE"
    UNKNOWN = "UNKNOWN"


class LeaveType(str, Enum):
    ANNUAL = "Annual"
    SICK = "Sick"
    MISC = "Misc"


class LeaveStatus(str, Enum):
    """Leave lifecycle: SUBMITTED moves once to APPROVED or REJECTED."""

    SUBMITTED = "Submitted"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class TimesheetStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
