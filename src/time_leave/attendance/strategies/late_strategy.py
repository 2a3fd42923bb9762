from __future__ import annotations

from ...core.enums import AttendanceStatus
from ..model import AttendanceCheck
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Late check-in."""

    def decide_checkin(self, *, check: AttendanceCheck) -> StatusDecision:
        late_by = check.local_minutes - check.threshold_minutes
        return StatusDecision(
            status=AttendanceStatus.LATE,
            note=f"Checked in at {check.local_clock}, {late_by} min past grace",
        )

    def decide_checkout(self, *, local_clock: str, current: AttendanceStatus) -> StatusDecision:
        return StatusDecision(status=current)
