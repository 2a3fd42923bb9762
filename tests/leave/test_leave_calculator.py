from datetime import date, datetime

import pytest

from time_leave.core.exceptions import InsufficientBalance, ValidationError
from time_leave.leave.calculator import FixedHolidayCalendar, LeaveDaysCalculator, as_date


@pytest.mark.parametrize(
    "start,end,expected",
    [
        ("2025-08-25", "2025-08-29", 5),
        ("2025-07-02", "2025-07-03", 2),
        ("2025-07-02", "2025-07-02", 1),
        ("2025-01-30", "2025-02-02", 4),
        ("2024-02-28", "2024-03-01", 3),
        ("2025-12-30", "2026-01-02", 4),
    ],
)
def test_days_are_inclusive_calendar_days(start, end, expected):
    assert LeaveDaysCalculator().days_between(start, end) == expected


def test_days_span_daylight_saving_change():
    # Melbourne DST starts 2025-10-05; civil dates are unaffected
    assert LeaveDaysCalculator().days_between(date(2025, 10, 3), date(2025, 10, 7)) == 5


def test_end_before_start_counts_zero():
    assert LeaveDaysCalculator().days_between("2025-08-29", "2025-08-25") == 0


def test_invalid_date_string_raises_validation_error():
    with pytest.raises(ValidationError):
        LeaveDaysCalculator().days_between("2025-13-01", "2025-08-25")


def test_holidays_are_excluded_only_when_calendar_supplied():
    calendar = FixedHolidayCalendar.from_dates(["2025-08-27"])

    assert LeaveDaysCalculator(calendar).days_between("2025-08-25", "2025-08-29") == 4
    assert LeaveDaysCalculator().days_between("2025-08-25", "2025-08-29") == 5


def test_holiday_calendar_from_setting():
    calendar = FixedHolidayCalendar.from_setting(" 2025-12-25, 2025-12-26 ,")

    assert calendar.is_holiday(date(2025, 12, 25))
    assert calendar.is_holiday(date(2025, 12, 26))
    assert not calendar.is_holiday(date(2025, 12, 27))
    assert FixedHolidayCalendar.from_setting("").holidays == frozenset()


def test_validate_rejects_over_balance_without_cashout():
    with pytest.raises(InsufficientBalance):
        LeaveDaysCalculator.validate(5, 3)


def test_validate_allows_over_balance_with_cashout():
    LeaveDaysCalculator.validate(5, 3, cashout=True)
    LeaveDaysCalculator.validate(365, 0, cashout=True)


def test_validate_allows_exact_balance():
    LeaveDaysCalculator.validate(12, 12)


def test_datetimes_are_counted_by_civil_date():
    calc = LeaveDaysCalculator()

    assert calc.days_between(datetime(2025, 9, 1, 18, 0), datetime(2025, 9, 2, 6, 0)) == 2
    assert as_date(datetime(2025, 9, 1, 18, 0)) == date(2025, 9, 1)
