from __future__ import annotations

from ...core.enums import AttendanceStatus
from ..model import AttendanceCheck
from .base import AttendanceStrategy, StatusDecision


class NormalStrategy(AttendanceStrategy):
    """On-time check-in, normal check-out."""

    def decide_checkin(self, *, check: AttendanceCheck) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ON_TIME)

    def decide_checkout(self, *, local_clock: str, current: AttendanceStatus) -> StatusDecision:
        return StatusDecision(status=current)
