from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Iterable, Optional, Sequence

from ..core.constants import DEFAULT_LEAVE_BALANCE, LEAVE_ID_PREFIX, LEAVE_ID_WIDTH
from ..core.enums import LeaveStatus, LeaveType
from .model import LeaveRequest
from .repository import LeaveBalanceRepository, LeaveRequestRepository


class InMemoryLeaveRequestRepository(LeaveRequestRepository):
    def __init__(self, requests: Iterable[LeaveRequest] = ()):
        # Insertion order is submission order
        self._items: dict[str, LeaveRequest] = {r.request_id: r for r in requests}

    def _next_id(self) -> str:
        return f"{LEAVE_ID_PREFIX}{len(self._items) + 1:0{LEAVE_ID_WIDTH}d}"

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
        req = LeaveRequest(
            request_id=self._next_id(),
            employee_id=employee_id,
            leave_type=leave_type,
            start_date=start_date,
            end_date=end_date,
            days=days,
            status=LeaveStatus.SUBMITTED,
            created_at=created_at,
            cashout=cashout,
        )
        self._items[req.request_id] = req
        return req

    def get(self, request_id: str) -> Optional[LeaveRequest]:
        return self._items.get(request_id)

    def list_requests(
        self,
        *,
        employee_id: Optional[str] = None,
        status: Optional[LeaveStatus] = None,
    ) -> Sequence[LeaveRequest]:
        items = [
            r
            for r in self._items.values()
            if (employee_id is None or r.employee_id == employee_id) and (status is None or r.status == status)
        ]
        items.reverse()
        return items

    def decide(
        self,
        *,
        request_id: str,
        status: LeaveStatus,
        decided_by: str,
        decided_at: datetime,
    ) -> Optional[LeaveRequest]:
        req = self._items.get(request_id)
        if not req or req.status != LeaveStatus.SUBMITTED:
            return None
        req = replace(req, status=status, decided_by=decided_by, decided_at=decided_at)
        self._items[request_id] = req
        return req


class InMemoryLeaveBalanceRepository(LeaveBalanceRepository):
    def __init__(self, balances: Optional[dict[str, float]] = None, *, default: float = DEFAULT_LEAVE_BALANCE):
        self._balances = dict(balances or {})
        self._default = default

    def get_balance(self, employee_id: str) -> float:
        return self._balances.get(employee_id, self._default)
