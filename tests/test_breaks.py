"""Test Breaks 휴식 기록 전이와 근무 시간 재계산을 검증하는 자동화 테스트입니다."""

from datetime import date, datetime, timezone

import pytest

from hrm.exceptions import AttendanceNotFound, BreakAlreadyEnded, BreakInProgress, BreakNotFound, InvalidBreakTime
from hrm.services import attendance_service, break_service
from hrm.utils.helpers import as_utc
from tests.conftest import auth_headers

DAY = date(2025, 1, 6)


def at(hour: int, minute: int = 0) -> datetime:
    return datetime(2025, 1, 6, hour, minute, tzinfo=timezone.utc)


@pytest.fixture
def completed_day(db, seed_users):
    user_id = seed_users["employee"].user_id
    attendance_service.check_in(db, user_id, DAY, now=at(9))
    return attendance_service.check_out(db, user_id, DAY, now=at(17))


def test_full_workday_scenario(db, seed_users):
    user_id = seed_users["employee"].user_id
    attendance = attendance_service.check_in(db, user_id, DAY, now=at(9))

    item = break_service.create_break(db, attendance.attendance_id, at(12), "lunch")
    assert item.end_time is None
    break_service.end_break(db, item.break_id, at(13))

    attendance = attendance_service.check_out(db, user_id, DAY, now=at(17))
    assert attendance.total_work_hours == 7.0
    assert attendance.status == "completed"

    breaks = break_service.get_breaks_by_attendance_id(db, attendance.attendance_id)
    assert len(breaks) == 1
    assert breaks[0].duration == 60.0
    assert breaks[0].reason == "lunch"


def test_second_open_break_conflicts(db, completed_day):
    break_service.create_break(db, completed_day.attendance_id, at(12))
    with pytest.raises(BreakInProgress):
        break_service.create_break(db, completed_day.attendance_id, at(14))


def test_new_break_allowed_after_previous_ended(db, completed_day):
    first = break_service.create_break(db, completed_day.attendance_id, at(12))
    break_service.end_break(db, first.break_id, at(12, 30))
    second = break_service.create_break(db, completed_day.attendance_id, at(15))
    assert second.break_id != first.break_id


def test_create_break_unknown_attendance(db, seed_users):
    with pytest.raises(AttendanceNotFound):
        break_service.create_break(db, 999, at(12))


def test_end_break_before_start_rejected(db, completed_day):
    item = break_service.create_break(db, completed_day.attendance_id, at(12))
    with pytest.raises(InvalidBreakTime):
        break_service.end_break(db, item.break_id, at(11))


def test_end_break_twice_conflicts(db, completed_day):
    item = break_service.create_break(db, completed_day.attendance_id, at(12))
    break_service.end_break(db, item.break_id, at(12, 45))
    with pytest.raises(BreakAlreadyEnded):
        break_service.end_break(db, item.break_id, at(13))
    with pytest.raises(BreakNotFound):
        break_service.end_break(db, 999, at(13))


def test_ending_break_after_checkout_updates_hours(db, completed_day):
    item = break_service.create_break(db, completed_day.attendance_id, at(12))
    break_service.end_break(db, item.break_id, at(12, 30))

    attendance = attendance_service.get_attendance_by_id(db, completed_day.attendance_id)
    assert attendance.total_work_hours == 7.5


def test_update_break_keeps_omitted_fields(db, completed_day):
    item = break_service.create_break(db, completed_day.attendance_id, at(12), "lunch")
    break_service.end_break(db, item.break_id, at(13))

    updated = break_service.update_break(db, item.break_id, end_time=at(12, 30))
    assert as_utc(updated.start_time) == at(12)
    assert updated.duration == 30.0
    assert updated.reason == "lunch"

    updated = break_service.update_break(db, item.break_id, reason="coffee")
    assert updated.reason == "coffee"
    assert updated.duration == 30.0

    with pytest.raises(InvalidBreakTime):
        break_service.update_break(db, item.break_id, start_time=at(14))

    attendance = attendance_service.get_attendance_by_id(db, completed_day.attendance_id)
    assert attendance.total_work_hours == 7.5


def test_delete_break_recomputes_hours(db, completed_day):
    item = break_service.create_break(db, completed_day.attendance_id, at(12))
    break_service.end_break(db, item.break_id, at(13))
    assert attendance_service.get_attendance_by_id(db, completed_day.attendance_id).total_work_hours == 7.0

    break_service.delete_break(db, item.break_id)
    assert attendance_service.get_attendance_by_id(db, completed_day.attendance_id).total_work_hours == 8.0
    with pytest.raises(BreakNotFound):
        break_service.get_break_by_id(db, item.break_id)


def test_get_breaks_for_unknown_attendance(db, seed_users):
    with pytest.raises(AttendanceNotFound):
        break_service.get_breaks_by_attendance_id(db, 999)


def test_break_api_flow(client, db, seed_users):
    user_id = seed_users["employee"].user_id
    attendance = attendance_service.check_in(db, user_id, DAY, now=at(9))
    attendance_service.check_out(db, user_id, DAY, now=at(17))
    headers = auth_headers(client, "employee@example.com")

    resp = client.post(
        "/api/breaks",
        headers=headers,
        json={"attendance_id": attendance.attendance_id, "start_time": "2025-01-06T12:00:00Z", "reason": "lunch"},
    )
    assert resp.status_code == 201
    break_id = resp.json()["break_id"]
    assert resp.json()["is_ended"] is False

    resp = client.post(
        "/api/breaks",
        headers=headers,
        json={"attendance_id": attendance.attendance_id, "start_time": "2025-01-06T12:10:00Z"},
    )
    assert resp.status_code == 409
    assert resp.json()["error"] == "break_in_progress"

    resp = client.put("/api/breaks/end", headers=headers, json={"break_id": break_id, "end_time": "2025-01-06T11:00:00Z"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "invalid_break_time"

    resp = client.put("/api/breaks/end", headers=headers, json={"break_id": break_id, "end_time": "2025-01-06T13:00:00Z"})
    assert resp.status_code == 200
    assert resp.json()["duration"] == 60.0

    resp = client.get(f"/api/attendance/{attendance.attendance_id}", headers=headers)
    assert resp.json()["total_work_hours"] == 7.0
    assert len(resp.json()["breaks"]) == 1

    resp = client.get(f"/api/breaks/attendance/{attendance.attendance_id}", headers=headers)
    assert [b["break_id"] for b in resp.json()] == [break_id]

    resp = client.get("/api/breaks", headers=headers)
    assert len(resp.json()) == 1

    resp = client.delete(f"/api/breaks/{break_id}", headers=headers)
    assert resp.status_code == 204
    resp = client.get(f"/api/breaks/{break_id}", headers=headers)
    assert resp.status_code == 404
