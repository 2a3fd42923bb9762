from __future__ import annotations

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from time_leave.attendance.memory_repository import InMemoryAttendanceRepository
from time_leave.attendance.service import AttendanceService
from time_leave.core.enums import AttendanceStatus, EmployeeRole
from time_leave.core.exceptions import NotFoundError, ValidationError
from time_leave.employees.memory_repository import InMemoryEmployeeRepository
from time_leave.employees.model import Employee

MELBOURNE = ZoneInfo("Australia/Melbourne")


def _service():
    employee = Employee("E1001", "Rizwan", EmployeeRole.ENGINEER, "AU", "Australia/Melbourne", "08:00", "17:00", 5, 55, "Nick")
    attendance_repo = InMemoryAttendanceRepository()
    svc = AttendanceService(attendance_repo, InMemoryEmployeeRepository([employee]), break_increment_minutes=15)
    return svc, attendance_repo


def test_checkin_within_grace_is_on_time():
    svc, _ = _service()

    rec = svc.check_in("E1001", now=datetime(2025, 8, 4, 8, 5, tzinfo=MELBOURNE))

    assert rec.status == AttendanceStatus.ON_TIME
    assert rec.late is False
    assert rec.note is None


def test_checkin_after_grace_is_late():
    svc, _ = _service()

    rec = svc.check_in("E1001", now=datetime(2025, 8, 4, 8, 6, tzinfo=MELBOURNE))

    assert rec.status == AttendanceStatus.LATE
    assert "08:06:00" in rec.note


def test_work_date_is_the_employee_local_date():
    svc, repo = _service()
    # Still Aug 3 in UTC, already Aug 4 in Melbourne
    now = datetime(2025, 8, 3, 22, 10, tzinfo=timezone.utc)

    svc.check_in("E1001", now=now)

    assert repo.get_for_employee_and_date("E1001", date(2025, 8, 4)) is not None
    assert repo.get_for_employee_and_date("E1001", date(2025, 8, 3)) is None


def test_second_checkin_same_day_is_rejected():
    svc, _ = _service()
    svc.check_in("E1001", now=datetime(2025, 8, 4, 7, 55, tzinfo=MELBOURNE))

    with pytest.raises(ValidationError):
        svc.check_in("E1001", now=datetime(2025, 8, 4, 9, 0, tzinfo=MELBOURNE))


def test_on_time_checkout_before_shift_end_is_early_leave():
    svc, _ = _service()
    svc.check_in("E1001", now=datetime(2025, 8, 4, 7, 55, tzinfo=MELBOURNE))

    rec = svc.check_out("E1001", now=datetime(2025, 8, 4, 16, 0, tzinfo=MELBOURNE))

    assert rec.status == AttendanceStatus.EARLY_LEAVE
    assert rec.check_out_time is not None


def test_checkout_after_shift_end_keeps_status():
    svc, _ = _service()
    svc.check_in("E1001", now=datetime(2025, 8, 4, 8, 20, tzinfo=MELBOURNE))

    rec = svc.check_out("E1001", now=datetime(2025, 8, 4, 17, 30, tzinfo=MELBOURNE))

    assert rec.status == AttendanceStatus.LATE


def test_checkout_requires_open_checkin():
    svc, _ = _service()
    now = datetime(2025, 8, 4, 17, 30, tzinfo=MELBOURNE)

    with pytest.raises(ValidationError):
        svc.check_out("E1001", now=now)

    svc.check_in("E1001", now=datetime(2025, 8, 4, 8, 0, tzinfo=MELBOURNE))
    svc.check_out("E1001", now=now)
    with pytest.raises(ValidationError):
        svc.check_out("E1001", now=now)


def test_breaks_accumulate_in_fixed_increments():
    svc, _ = _service()
    now = datetime(2025, 8, 4, 10, 0, tzinfo=MELBOURNE)

    with pytest.raises(ValidationError):
        svc.take_break("E1001", now=now)

    svc.check_in("E1001", now=datetime(2025, 8, 4, 8, 0, tzinfo=MELBOURNE))
    svc.take_break("E1001", now=now)
    rec = svc.take_break("E1001", now=now)

    assert rec.break_minutes == 30


def test_status_reports_local_clock_and_labels():
    svc, _ = _service()
    before = svc.status("E1001", now=datetime(2025, 8, 4, 8, 10, tzinfo=MELBOURNE))

    assert before["status"] == "Not Checked-In"
    assert before["current_time"] == "08:10:00"
    assert before["late_now"] is True
    assert before["late_after"] == "08:05"

    svc.check_in("E1001", now=datetime(2025, 8, 4, 8, 10, tzinfo=MELBOURNE))
    after = svc.status("E1001", now=datetime(2025, 8, 4, 9, 0, tzinfo=MELBOURNE))

    assert after["status"] == "Late (In)"
    assert after["checked_in"] is True
    assert after["check_in"] == "08:10:00"


def test_history_is_rendered_in_local_time():
    svc, _ = _service()
    svc.check_in("E1001", now=datetime(2025, 8, 3, 22, 0, tzinfo=timezone.utc))

    rows = svc.get_history_ui("E1001")

    assert rows == [
        {"date": "2025-08-04", "check_in": "08:00:00", "check_out": "-", "break_minutes": 0, "status": "On Time", "note": ""}
    ]


def test_unknown_employee_raises_not_found():
    svc, _ = _service()

    with pytest.raises(NotFoundError):
        svc.check_in("E9999", now=datetime(2025, 8, 4, 8, 0, tzinfo=MELBOURNE))
