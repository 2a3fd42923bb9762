from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ..common.datetime_utils import minutes_of, parse_hhmm
from ..core.enums import AttendanceStatus
from ..employees.model import Employee
from .evaluator import AttendanceEvaluator
from .model import AttendanceCheck
from .strategies.base import AttendanceStrategy
from .strategies.early_strategy import EarlyLeaveStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    evaluator: AttendanceEvaluator = field(default_factory=AttendanceEvaluator)

    def for_checkin(self, *, check: AttendanceCheck) -> AttendanceStrategy:
        if check.late:
            return LateStrategy()
        return NormalStrategy()

    def for_checkout(self, *, employee: Employee, now: datetime, current_status: AttendanceStatus) -> AttendanceStrategy:
        start = minutes_of(parse_hhmm(employee.shift_start))
        end = minutes_of(parse_hhmm(employee.shift_end))
        # Overnight shifts (end <= start) are never flagged as early leave
        if end <= start:
            return NormalStrategy()

        local_minutes = self.evaluator.minutes_since_midnight(now, employee.timezone)
        if local_minutes < end and current_status == AttendanceStatus.ON_TIME:
            return EarlyLeaveStrategy()
        return NormalStrategy()
