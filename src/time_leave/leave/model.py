from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveRequest:
    request_id: str
    employee_id: str
    leave_type: LeaveType
    start_date: date
    end_date: date
    days: int
    status: LeaveStatus
    created_at: datetime
    cashout: bool = False
    decided_by: Optional[str] = None
    decided_at: Optional[datetime] = None
