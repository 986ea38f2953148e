"""근무 시간 계산과 출결 상태 파생 규칙을 검증하는 테스트입니다."""

from datetime import date, datetime, timedelta, timezone

import pytest

from hrm.exceptions import (
    InvalidDateRange,
    InvalidLeaveStatus,
    InvalidLeaveType,
    InvalidUserID,
    LeaveDateInPast,
    ReasonRequired,
)
from hrm.models.attendance import Attendance, Break
from hrm.models.leave import Leave
from hrm.services.attendance_service import calculate_work_hours
from hrm.services.break_service import calculate_break_duration
from hrm.services.leave_service import calculate_leave_days, validate_leave

DAY = date(2025, 1, 6)


def at(hour: int, minute: int = 0) -> datetime:
    return datetime(2025, 1, 6, hour, minute, tzinfo=timezone.utc)


def make_day(check_in=None, check_out=None, breaks=()):
    attendance = Attendance(user_id=1, work_date=DAY, check_in_time=check_in, check_out_time=check_out)
    attendance.breaks = list(breaks)
    return attendance


def test_status_is_derived_from_timestamps():
    assert make_day().status == "absent"
    assert make_day(check_in=at(9)).status == "present"
    assert make_day(check_in=at(9), check_out=at(17)).status == "completed"


def test_work_hours_zero_until_both_timestamps_set():
    assert calculate_work_hours(make_day()) == 0.0
    assert calculate_work_hours(make_day(check_in=at(9))) == 0.0


def test_work_hours_subtracts_ended_breaks_only():
    attendance = make_day(
        check_in=at(9),
        check_out=at(17),
        breaks=[
            Break(start_time=at(12), end_time=at(13)),
            Break(start_time=at(15), end_time=at(15, 30)),
            Break(start_time=at(16), end_time=None),
        ],
    )
    assert calculate_work_hours(attendance) == pytest.approx(6.5)


def test_work_hours_is_idempotent():
    attendance = make_day(check_in=at(9), check_out=at(17), breaks=[Break(start_time=at(12), end_time=at(13))])
    first = calculate_work_hours(attendance)
    assert calculate_work_hours(attendance) == first == 7.0


def test_work_hours_never_negative():
    attendance = make_day(
        check_in=at(9),
        check_out=at(10),
        breaks=[Break(start_time=at(9), end_time=at(12))],
    )
    assert calculate_work_hours(attendance) == 0.0


def test_work_hours_mixes_naive_and_aware_as_utc():
    attendance = make_day(check_in=at(9).replace(tzinfo=None), check_out=at(18))
    assert calculate_work_hours(attendance) == 9.0

    kst = timezone(timedelta(hours=9))
    attendance = make_day(check_in=datetime(2025, 1, 6, 18, 0, tzinfo=kst), check_out=at(17))
    assert calculate_work_hours(attendance) == 8.0


def test_break_duration_in_minutes():
    assert calculate_break_duration(Break(start_time=at(12), end_time=at(13))) == 60.0
    assert calculate_break_duration(Break(start_time=at(12), end_time=at(12, 15))) == 15.0
    assert calculate_break_duration(Break(start_time=at(12), end_time=None)) == 0.0


def test_leave_days_inclusive():
    assert calculate_leave_days(date(2024, 1, 1), date(2024, 1, 3)) == 3
    assert calculate_leave_days(date(2024, 1, 1), date(2024, 1, 1)) == 1
    # weekends are counted
    assert calculate_leave_days(date(2024, 1, 5), date(2024, 1, 8)) == 4
    assert calculate_leave_days(datetime(2024, 1, 1, 23, 0), datetime(2024, 1, 2, 1, 0)) == 2


def make_leave(**overrides):
    values = {
        "user_id": 1,
        "type": "vacation",
        "status": "pending",
        "start_date": date(2025, 6, 10),
        "end_date": date(2025, 6, 12),
        "reason": "trip",
    }
    values.update(overrides)
    return Leave(**values)


TODAY = date(2025, 6, 1)


def test_validate_leave_accepts_valid_request():
    validate_leave(make_leave(), TODAY)
    validate_leave(make_leave(start_date=TODAY, end_date=TODAY), TODAY)


@pytest.mark.parametrize(
    "overrides, error",
    [
        ({"user_id": 0}, InvalidUserID),
        ({"type": "holiday"}, InvalidLeaveType),
        ({"status": "unknown"}, InvalidLeaveStatus),
        ({"start_date": date(2025, 6, 12), "end_date": date(2025, 6, 10)}, InvalidDateRange),
        ({"start_date": date(2025, 5, 31)}, LeaveDateInPast),
        ({"reason": "   "}, ReasonRequired),
    ],
)
def test_validate_leave_rejects(overrides, error):
    with pytest.raises(error):
        validate_leave(make_leave(**overrides), TODAY)


def test_validate_leave_checks_in_order():
    # invalid type is reported before the empty reason
    with pytest.raises(InvalidLeaveType):
        validate_leave(make_leave(type="holiday", reason=""), TODAY)
