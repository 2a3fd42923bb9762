from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Protocol, Union

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import InsufficientBalance, ValidationError

DateLike = Union[date, str]


class HolidayCalendar(Protocol):
    def is_holiday(self, day: date) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class FixedHolidayCalendar(HolidayCalendar):
    """Holiday calendar backed by an explicit set of dates."""

    holidays: frozenset = frozenset()

    @classmethod
    def from_dates(cls, days: Iterable[DateLike]) -> "FixedHolidayCalendar":
        return cls(frozenset(as_date(d) for d in days))

    @classmethod
    def from_setting(cls, value: str) -> "FixedHolidayCalendar":
        """Build from a comma separated list of YYYY-MM-DD dates."""
        return cls.from_dates(part.strip() for part in (value or "").split(",") if part.strip())

    def is_holiday(self, day: date) -> bool:
        return day in self.holidays


def as_date(value: DateLike) -> date:
    # datetime is a date subclass; keep only the civil date
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"Invalid date {value!r} (expected YYYY-MM-DD)")


class LeaveDaysCalculator:
    """Inclusive civil-day counting for leave requests.

    Without a holiday calendar the count is plain calendar days, both
    endpoints included. With one, days the calendar marks as holidays are
    left out.
    """

    def __init__(self, holidays: Optional[HolidayCalendar] = None):
        self._holidays = holidays

    def days_between(self, start: DateLike, end: DateLike) -> int:
        start_d, end_d = as_date(start), as_date(end)
        if end_d < start_d:
            return 0

        span = (end_d - start_d).days + 1
        if self._holidays is None:
            return span
        return sum(1 for i in range(span) if not self._holidays.is_holiday(start_d + timedelta(days=i)))

    @staticmethod
    def validate(days: int, balance: float, *, cashout: bool = False) -> None:
        # Cash-out has no upper bound
        if days > balance and not cashout:
            raise InsufficientBalance(f"Insufficient balance: {days} days requested, {balance:g} available")
