from __future__ import annotations

from datetime import datetime, time
from typing import Optional, Union
from zoneinfo import ZoneInfo

from ..common.datetime_utils import ensure_aware, minutes_of, parse_hhmm
from ..core.constants import DEFAULT_GRACE_MINUTES
from ..employees.model import Employee
from .model import AttendanceCheck


class AttendanceEvaluator:
    """Decides whether an instant counts as late for a shift.

    Everything is computed in the employee's IANA timezone, so results do not
    depend on the host's local timezone. Naive instants are taken as UTC.

    The threshold is ``minutes_of(shift_start) + grace`` with no wraparound: a
    23:50 shift with 60 minutes grace has threshold 1490, which no
    minutes-since-midnight value (0..1439) can exceed on the same calendar day.
    An instant exactly at the threshold minute is on time.
    """

    def __init__(self, *, default_grace_minutes: int = DEFAULT_GRACE_MINUTES):
        self._default_grace = int(default_grace_minutes)

    @staticmethod
    def to_local(instant: datetime, tz_name: str) -> datetime:
        return ensure_aware(instant).astimezone(ZoneInfo(tz_name))

    def minutes_since_midnight(self, instant: datetime, tz_name: str) -> int:
        local = self.to_local(instant, tz_name)
        return local.hour * 60 + local.minute

    def local_clock(self, instant: datetime, tz_name: str) -> str:
        return self.to_local(instant, tz_name).strftime("%H:%M:%S")

    def threshold(self, shift_start: Union[str, time], grace_minutes: Optional[int] = None) -> int:
        start = parse_hhmm(shift_start) if isinstance(shift_start, str) else shift_start
        grace = self._default_grace if grace_minutes is None else int(grace_minutes)
        return minutes_of(start) + grace

    def is_late(
        self,
        *,
        shift_start: Union[str, time],
        instant: datetime,
        tz_name: str,
        grace_minutes: Optional[int] = None,
    ) -> bool:
        return self.minutes_since_midnight(instant, tz_name) > self.threshold(shift_start, grace_minutes)

    def evaluate(self, employee: Employee, instant: datetime) -> AttendanceCheck:
        local_minutes = self.minutes_since_midnight(instant, employee.timezone)
        threshold = self.threshold(employee.shift_start, employee.grace_minutes)
        return AttendanceCheck(
            employee_id=employee.employee_id,
            instant=instant,
            local_minutes=local_minutes,
            threshold_minutes=threshold,
            late=local_minutes > threshold,
            local_clock=self.local_clock(instant, employee.timezone),
        )
