from __future__ import annotations

import pytest

from mi_descanso.container import wire_container
from mi_descanso.main import create_app
from tests.fakes import FakeExtraDaysRepo, FakeUsersRepo, FakeVacationsRepo, christmas_options


@pytest.fixture()
def container():
    return wire_container(
        users_repo=FakeUsersRepo(),
        vacations_repo=FakeVacationsRepo(),
        extra_days_repo=FakeExtraDaysRepo(christmas_options(2026)),
        admin_emails=["admin@test.local"],
    )


@pytest.fixture()
def client(container):
    app = create_app(container=container, settings_module="config.testing")
    return app.test_client()


def _register(client, email="ana@example.com", name="Ana García", birth_date="1990-05-17"):
    return client.post(
        "/api/auth/register",
        json={"email": email, "password": "secreto", "name": name, "birth_date": birth_date},
    )


def test_health(client):
    assert client.get("/health").get_json()["success"] is True


def test_owner_scoped_routes_require_login(client):
    resp = client.get("/api/vacations/balance?year=2026")
    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_register_login_and_me(client):
    assert _register(client).status_code == 201
    client.post("/api/auth/logout")
    assert client.get("/api/auth/me").status_code == 401

    resp = client.post("/api/auth/login", json={"email": "ana@example.com", "password": "secreto"})
    assert resp.status_code == 200
    assert client.get("/api/auth/me").get_json()["user"]["name"] == "Ana García"


def test_bad_login_is_401(client):
    _register(client)
    resp = client.post("/api/auth/login", json={"email": "ana@example.com", "password": "wrong!"})
    assert resp.status_code == 401


def test_vacation_flow_and_insufficient_balance(client):
    _register(client)

    created = client.post("/api/vacations", json={"start_date": "2026-07-01", "end_date": "2026-07-15"})
    assert created.status_code == 201

    blocked = client.post("/api/vacations", json={"start_date": "2026-08-03", "end_date": "2026-08-21"})
    assert blocked.status_code == 400
    assert blocked.get_json()["remaining"] == 11

    balance = client.get("/api/vacations/balance?year=2026").get_json()["balance"]
    assert balance == {"year": 2026, "base_days": 22, "used_days": 11, "remaining_days": 11}


def test_weekend_and_missing_range_are_400(client):
    _register(client)
    assert client.post("/api/vacations", json={"start_date": "2026-07-04", "end_date": "2026-07-05"}).status_code == 400
    assert client.post("/api/vacations", json={"start_date": "2026-07-04"}).status_code == 400
    assert client.post("/api/vacations", json={"start_date": "julio", "end_date": "2026-07-05"}).status_code == 400


def test_extra_days_defaults_are_saved_once(client, container):
    _register(client)

    first = client.get("/api/extra-days?year=2026").get_json()
    second = client.get("/api/extra-days?year=2026").get_json()

    assert first["defaults_saved"] == ["birthday", "holiday_week"]
    assert first["birthday_date"] == "2026-05-17"
    assert first["holiday_label"] == "A"
    assert second["defaults_saved"] == []
    assert len(container.extra_days_repo.writes) == 2


def test_holiday_choice_shows_in_my_list_and_calendar(client):
    _register(client)
    resp = client.put("/api/extra-days/holiday-choice", json={"year": 2026, "option_label": "B"})
    assert resp.status_code == 200

    requests = client.get("/api/vacations?year=2026").get_json()["requests"]
    assert requests[0]["type"] == "christmas"
    assert requests[0]["deletable"] is False
    assert client.delete(f"/api/vacations/{requests[0]['id']}").status_code == 400

    calendar = client.get("/api/calendar?year=2026&month=12").get_json()["calendar"]
    day = next(d for d in calendar["days"] if d["date"] == "2026-12-30")
    assert [e["label"] for e in day["entries"]] == ["Ana"]
    assert day["entries"][0]["type"] == "christmas"
    assert next(d for d in calendar["days"] if d["date"] == "2026-12-25")["holiday_name"] == "Navidad"


def test_admin_routes_are_forbidden_for_employees(client):
    _register(client)
    assert client.get("/api/admin/users").status_code == 403
    assert client.get("/api/admin/holiday-options").status_code == 403


def test_admin_can_manage_options_and_roles(client):
    _register(client, email="admin@test.local", name="Marc Admin", birth_date="1980-01-01")

    users = client.get("/api/admin/users").get_json()["users"]
    assert users[0]["role"] == "admin"

    created = client.post(
        "/api/admin/holiday-options",
        json={"year": 2027, "option_label": "A", "start_date": "2027-12-22", "end_date": "2027-12-28"},
    )
    assert created.status_code == 201

    option_id = created.get_json()["id"]
    updated = client.put(f"/api/admin/holiday-options/{option_id}", json={"end_date": "2027-12-27"})
    assert updated.get_json()["option"]["end_date"] == "2027-12-27"

    bad_role = client.put(f"/api/admin/users/{users[0]['id']}/role", json={"role": "owner"})
    assert bad_role.status_code == 400
