from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus, LeaveType
from .model import LeaveRequest


class LeaveRequestRepository(Protocol):
    def create(
        self,
        *,
        employee_id: str,
        leave_type: LeaveType,
        start_date: date,
        end_date: date,
        days: int,
        cashout: bool,
        created_at: datetime,
    ) -> LeaveRequest:
        """Store a SUBMITTED request under the next sequential id."""

        raise NotImplementedError

    def get(self, request_id: str) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_requests(
        self,
        *,
        employee_id: Optional[str] = None,
        status: Optional[LeaveStatus] = None,
    ) -> Sequence[LeaveRequest]:
        """Newest first."""

        raise NotImplementedError

    def decide(
        self,
        *,
        request_id: str,
        status: LeaveStatus,
        decided_by: str,
        decided_at: datetime,
    ) -> Optional[LeaveRequest]:
        raise NotImplementedError


class LeaveBalanceRepository(Protocol):
    def get_balance(self, employee_id: str) -> float:
        raise NotImplementedError
