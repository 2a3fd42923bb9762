from __future__ import annotations

from ...core.enums import AttendanceStatus
from ..model import AttendanceCheck
from .base import AttendanceStrategy, StatusDecision


class EarlyLeaveStrategy(AttendanceStrategy):
    """Early leave on checkout (only when check-in was ON_TIME)."""

    def decide_checkin(self, *, check: AttendanceCheck) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.UNKNOWN)

    def decide_checkout(self, *, local_clock: str, current: AttendanceStatus) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.EARLY_LEAVE, note=f"Checked out at {local_clock} before shift end")
