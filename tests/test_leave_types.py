"""Test Leave Types 카탈로그 시드, 조회, 변경 규칙을 검증하는 자동화 테스트입니다."""

from datetime import date

import pytest

from hrm.exceptions import InvalidLeaveType, LeaveTypeAlreadyExists, LeaveTypeInUse, LeaveTypeNotFound
from hrm.schemas.leave import LeaveCreate
from hrm.schemas.leave_type import LeaveTypeCreate, LeaveTypeUpdate
from hrm.services import leave_service, leave_type_service
from tests.conftest import auth_headers


def test_default_catalog_is_seeded_once(db):
    types = leave_type_service.get_all_leave_types(db)
    assert [t.type for t in types] == ["sick", "vacation", "personal", "maternity", "paternity", "other"]
    vacation = leave_type_service.get_leave_type_by_code(db, "vacation")
    assert vacation.default_days_per_year == 20
    assert vacation.color == "#28a745"
    assert vacation.requires_approval is True

    assert leave_type_service.seed_default_leave_types(db) == 0
    assert len(leave_type_service.get_all_leave_types(db)) == 6


def test_validate_leave_type():
    assert leave_type_service.validate_leave_type("sick") == "sick"
    with pytest.raises(InvalidLeaveType):
        leave_type_service.validate_leave_type("sabbatical")


def test_create_duplicate_and_invalid(db):
    with pytest.raises(LeaveTypeAlreadyExists):
        leave_type_service.create_leave_type(db, LeaveTypeCreate(type="sick", name="Sick again"))
    with pytest.raises(InvalidLeaveType):
        leave_type_service.create_leave_type(db, LeaveTypeCreate(type="sabbatical", name="Sabbatical"))


def test_delete_unused_then_recreate(db):
    other = leave_type_service.get_leave_type_by_code(db, "other")
    leave_type_service.delete_leave_type(db, other.leave_type_id)
    with pytest.raises(LeaveTypeNotFound):
        leave_type_service.get_leave_type_by_code(db, "other")

    created = leave_type_service.create_leave_type(
        db, LeaveTypeCreate(type="other", name="Special Leave", default_days_per_year=3)
    )
    assert created.name == "Special Leave"
    assert created.color == "#007bff"


def test_delete_in_use_blocked(db, seed_users):
    leave_service.create_leave(
        db,
        seed_users["employee"].user_id,
        LeaveCreate(type="sick", start_date=date(2025, 6, 10), end_date=date(2025, 6, 10), reason="flu"),
        today=date(2025, 6, 1),
    )
    sick = leave_type_service.get_leave_type_by_code(db, "sick")
    with pytest.raises(LeaveTypeInUse):
        leave_type_service.delete_leave_type(db, sick.leave_type_id)

    stats = {row["type"]: row for row in leave_type_service.get_leave_types_with_usage_stats(db)}
    assert stats["sick"]["leave_count"] == 1
    assert stats["vacation"]["leave_count"] == 0


def test_rename_code_in_use_blocked(db, seed_users):
    leave = leave_service.create_leave(
        db,
        seed_users["employee"].user_id,
        LeaveCreate(type="sick", start_date=date(2025, 6, 10), end_date=date(2025, 6, 10), reason="flu"),
        today=date(2025, 6, 1),
    )
    other = leave_type_service.get_leave_type_by_code(db, "other")
    leave_type_service.delete_leave_type(db, other.leave_type_id)

    sick = leave_type_service.get_leave_type_by_code(db, "sick")
    with pytest.raises(LeaveTypeInUse):
        leave_type_service.update_leave_type(db, sick.leave_type_id, LeaveTypeUpdate(type="other"))

    db.expire_all()
    assert leave_type_service.get_leave_type_by_code(db, "sick").leave_type_id == sick.leave_type_id
    with pytest.raises(LeaveTypeNotFound):
        leave_type_service.get_leave_type_by_code(db, "other")
    assert leave_service.get_leave_by_id(db, leave.leave_id).type == "sick"


def test_rename_unused_code(db):
    other = leave_type_service.get_leave_type_by_code(db, "other")
    leave_type_service.delete_leave_type(db, other.leave_type_id)

    personal = leave_type_service.get_leave_type_by_code(db, "personal")
    renamed = leave_type_service.update_leave_type(db, personal.leave_type_id, LeaveTypeUpdate(type="other"))
    assert renamed.type == "other"
    with pytest.raises(LeaveTypeNotFound):
        leave_type_service.get_leave_type_by_code(db, "personal")


def test_update_leave_type(db):
    personal = leave_type_service.get_leave_type_by_code(db, "personal")
    updated = leave_type_service.update_leave_type(
        db, personal.leave_type_id, LeaveTypeUpdate(is_active=False, default_days_per_year=7)
    )
    assert updated.is_active is False
    assert updated.default_days_per_year == 7
    assert "personal" not in [t.type for t in leave_type_service.get_active_leave_types(db)]

    with pytest.raises(LeaveTypeAlreadyExists):
        leave_type_service.update_leave_type(db, personal.leave_type_id, LeaveTypeUpdate(type="sick"))
    with pytest.raises(LeaveTypeNotFound):
        leave_type_service.update_leave_type(db, 999, LeaveTypeUpdate(name="x"))


def test_leave_type_api(client, seed_users):
    headers = auth_headers(client, "employee@example.com")

    resp = client.get("/api/leave-types", headers=headers)
    assert resp.status_code == 200
    assert len(resp.json()) == 6

    resp = client.get("/api/leave-types/active", headers=headers)
    assert len(resp.json()) == 6

    resp = client.get("/api/leave-types/type/maternity", headers=headers)
    assert resp.status_code == 200
    maternity = resp.json()
    assert maternity["default_days_per_year"] == 90

    resp = client.get(f"/api/leave-types/{maternity['leave_type_id']}", headers=headers)
    assert resp.json()["type"] == "maternity"

    resp = client.get("/api/leave-types/stats", headers=headers)
    assert resp.status_code == 200
    assert all(row["leave_count"] == 0 for row in resp.json())

    resp = client.post("/api/leave-types", headers=headers, json={"type": "sick", "name": "Dup"})
    assert resp.status_code == 409
    assert resp.json()["error"] == "leave_type_already_exists"

    resp = client.put(
        f"/api/leave-types/{maternity['leave_type_id']}",
        headers=headers,
        json={"color": "#000000"},
    )
    assert resp.json()["color"] == "#000000"

    resp = client.delete(f"/api/leave-types/{maternity['leave_type_id']}", headers=headers)
    assert resp.status_code == 204
    resp = client.get("/api/leave-types/type/maternity", headers=headers)
    assert resp.status_code == 404
