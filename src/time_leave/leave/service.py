from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Union

from ..common.datetime_utils import now_utc
from ..core.enums import LeaveStatus, LeaveType, ViewerRole
from ..core.exceptions import (
    AuthorizationError,
    InvalidDateRange,
    InvalidTransition,
    MissingDateRange,
    NotFoundError,
    ValidationError,
)
from ..employees.repository import EmployeeRepository
from .calculator import DateLike, LeaveDaysCalculator, as_date
from .model import LeaveRequest
from .repository import LeaveBalanceRepository, LeaveRequestRepository

logger = logging.getLogger(__name__)

APPROVER_ROLES = {ViewerRole.MANAGER, ViewerRole.ADMIN}


class LeaveService:
    def __init__(
        self,
        requests: LeaveRequestRepository,
        balances: LeaveBalanceRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[LeaveDaysCalculator] = None,
    ):
        self._requests = requests
        self._balances = balances
        self._employees = employees
        self._calculator = calculator or LeaveDaysCalculator()

    @staticmethod
    def _parse_type(value: Union[LeaveType, str]) -> LeaveType:
        try:
            return LeaveType(value)
        except ValueError:
            raise ValidationError(f"Unknown leave type {value!r}")

    def balance(self, employee_id: str) -> float:
        return self._balances.get_balance(employee_id)

    def submit(
        self,
        *,
        employee_id: str,
        leave_type: Union[LeaveType, str],
        start: Optional[DateLike],
        end: Optional[DateLike],
        cashout: bool = False,
        now: Optional[datetime] = None,
    ) -> LeaveRequest:
        """Validate a leave request and record it as SUBMITTED.

        The balance is display-only and is not reduced here.
        """
        if not start or not end:
            raise MissingDateRange("Pick both a start and an end date")

        if not self._employees.get_by_id(employee_id):
            raise NotFoundError(f"Employee {employee_id} does not exist")

        leave_type = self._parse_type(leave_type)
        start_d, end_d = as_date(start), as_date(end)
        if end_d < start_d:
            raise InvalidDateRange("End date must not precede start date")

        days = self._calculator.days_between(start_d, end_d)
        self._calculator.validate(days, self.balance(employee_id), cashout=bool(cashout))

        req = self._requests.create(
            employee_id=employee_id,
            leave_type=leave_type,
            start_date=start_d,
            end_date=end_d,
            days=days,
            cashout=bool(cashout),
            created_at=now or now_utc(),
        )
        logger.info("leave submitted id=%s employee=%s days=%d cashout=%s", req.request_id, employee_id, days, req.cashout)
        return req

    def _decide(self, *, current_role: ViewerRole, approver: str, request_id: str, status: LeaveStatus, now: Optional[datetime]) -> LeaveRequest:
        if current_role not in APPROVER_ROLES:
            raise AuthorizationError("Only managers and admins can decide leave requests")

        req = self._requests.get(request_id)
        if not req:
            raise NotFoundError(f"Leave request {request_id} does not exist")
        if req.status != LeaveStatus.SUBMITTED:
            raise InvalidTransition(f"Leave request {request_id} is already {req.status.value}")

        decided = self._requests.decide(
            request_id=request_id,
            status=status,
            decided_by=approver,
            decided_at=now or now_utc(),
        )
        if not decided:
            raise InvalidTransition(f"Leave request {request_id} could not be {status.value.lower()}")
        logger.info("leave %s id=%s by=%s", status.value.lower(), request_id, approver)
        return decided

    def approve(self, *, current_role: ViewerRole, approver: str, request_id: str, now: Optional[datetime] = None) -> LeaveRequest:
        return self._decide(current_role=current_role, approver=approver, request_id=request_id, status=LeaveStatus.APPROVED, now=now)

    def reject(self, *, current_role: ViewerRole, approver: str, request_id: str, now: Optional[datetime] = None) -> LeaveRequest:
        return self._decide(current_role=current_role, approver=approver, request_id=request_id, status=LeaveStatus.REJECTED, now=now)

    def open_requests(self) -> list[LeaveRequest]:
        return list(self._requests.list_requests(status=LeaveStatus.SUBMITTED))

    def overview(self, employee_id: str) -> dict:
        return {
            "balance": self.balance(employee_id),
            "requests": [to_row(r) for r in self._requests.list_requests(employee_id=employee_id)],
        }


def to_row(r: LeaveRequest) -> dict:
    return {
        "id": r.request_id,
        "employee_id": r.employee_id,
        "type": r.leave_type.value,
        "start": r.start_date.isoformat(),
        "end": r.end_date.isoformat(),
        "days": r.days,
        "cashout": r.cashout,
        "status": r.status.value,
    }
