"""Test Users 동작과 회귀 시나리오를 검증하는 자동화 테스트입니다."""

from datetime import date

from hrm.models.attendance import Attendance
from tests.conftest import auth_headers


def test_list_users_with_pagination(client, seed_users):
    headers = auth_headers(client, "employee@example.com")
    resp = client.get("/api/users", headers=headers)
    assert resp.status_code == 200
    assert len(resp.json()) == 3

    resp = client.get("/api/users?limit=2&offset=2", headers=headers)
    assert resp.status_code == 200
    assert [u["email"] for u in resp.json()] == ["other@example.com"]


def test_list_users_rejects_out_of_range_limit(client, seed_users):
    headers = auth_headers(client, "employee@example.com")
    resp = client.get("/api/users?limit=0", headers=headers)
    assert resp.status_code == 422


def test_get_user_not_found(client, seed_users):
    headers = auth_headers(client, "employee@example.com")
    resp = client.get("/api/users/999", headers=headers)
    assert resp.status_code == 404
    assert resp.json()["error"] == "user_not_found"


def test_update_own_profile(client, seed_users):
    headers = auth_headers(client, "employee@example.com")
    user_id = seed_users["employee"].user_id
    resp = client.put(f"/api/users/{user_id}", headers=headers, json={"name": "Renamed", "password": "newpass1"})
    assert resp.status_code == 200
    assert resp.json()["name"] == "Renamed"

    resp = client.post("/api/auth/signin", json={"email": "employee@example.com", "password": "newpass1"})
    assert resp.status_code == 200


def test_update_other_user_forbidden(client, seed_users):
    headers = auth_headers(client, "employee@example.com")
    resp = client.put(f"/api/users/{seed_users['manager'].user_id}", headers=headers, json={"name": "Hacked"})
    assert resp.status_code == 403
    assert resp.json()["error"] == "unauthorized"


def test_update_email_in_use_conflict(client, seed_users):
    headers = auth_headers(client, "employee@example.com")
    resp = client.put(
        f"/api/users/{seed_users['employee'].user_id}",
        headers=headers,
        json={"email": "manager@example.com"},
    )
    assert resp.status_code == 409


def test_delete_own_account(client, seed_users):
    headers = auth_headers(client, "other@example.com")
    user_id = seed_users["other"].user_id
    resp = client.delete(f"/api/users/{user_id}", headers=headers)
    assert resp.status_code == 204

    resp = client.get(f"/api/users/{user_id}", headers=auth_headers(client, "employee@example.com"))
    assert resp.status_code == 404


def test_delete_user_with_attendance_blocked(client, db, seed_users):
    user_id = seed_users["employee"].user_id
    db.add(Attendance(user_id=user_id, work_date=date(2025, 1, 6), total_work_hours=0.0))
    db.commit()

    headers = auth_headers(client, "employee@example.com")
    resp = client.delete(f"/api/users/{user_id}", headers=headers)
    assert resp.status_code == 400
    assert resp.json()["error"] == "user_in_use"
