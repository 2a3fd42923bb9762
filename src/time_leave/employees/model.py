from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import EmployeeRole


@dataclass(frozen=True)
class Employee:
    """Roster entry.

    Note: shift_start/shift_end are wall-clock "HH:MM" strings in the employee's
    own timezone, not UTC.
    """

    employee_id: str
    name: str
    role: EmployeeRole
    country: str
    timezone: str
    shift_start: str
    shift_end: str
    grace_minutes: Optional[int] = None
    hourly_rate: float = 0.0
    manager: Optional[str] = None
