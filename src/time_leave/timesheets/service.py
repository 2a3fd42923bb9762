from __future__ import annotations

import logging

from ..core.enums import TimesheetStatus, ViewerRole
from ..core.exceptions import AuthorizationError, InvalidTransition, NotFoundError
from .model import WeeklyTimesheet
from .repository import TimesheetRepository

logger = logging.getLogger(__name__)


class TimesheetApprovalService:
    def __init__(self, timesheets: TimesheetRepository):
        self._timesheets = timesheets

    @staticmethod
    def _require_admin(current_role: ViewerRole) -> None:
        if current_role != ViewerRole.ADMIN:
            raise AuthorizationError("Only admins can manage timesheet approvals")

    def list_timesheets(self, *, current_role: ViewerRole) -> list[WeeklyTimesheet]:
        self._require_admin(current_role)
        return list(self._timesheets.list_all())

    def _decide(self, *, current_role: ViewerRole, timesheet_id: str, status: TimesheetStatus) -> WeeklyTimesheet:
        self._require_admin(current_role)

        ts = self._timesheets.get(timesheet_id)
        if not ts:
            raise NotFoundError(f"Timesheet {timesheet_id} does not exist")
        if ts.status != TimesheetStatus.PENDING:
            raise InvalidTransition(f"Timesheet {timesheet_id} is already {ts.status.value}")

        updated = self._timesheets.set_status(timesheet_id, status)
        logger.info("timesheet %s id=%s", status.value.lower(), timesheet_id)
        return updated

    def approve(self, *, current_role: ViewerRole, timesheet_id: str) -> WeeklyTimesheet:
        return self._decide(current_role=current_role, timesheet_id=timesheet_id, status=TimesheetStatus.APPROVED)

    def reject(self, *, current_role: ViewerRole, timesheet_id: str) -> WeeklyTimesheet:
        return self._decide(current_role=current_role, timesheet_id=timesheet_id, status=TimesheetStatus.REJECTED)
