from __future__ import annotations

from datetime import date

import pytest
from werkzeug.security import generate_password_hash

from mi_descanso.core.enums import Role
from mi_descanso.core.exceptions import AuthenticationError, AuthorizationError, NoActiveOwner, ValidationError
from mi_descanso.users.service import AuthService, NameLookup, UserService, require_actor
from tests.fakes import FakeUsersRepo, make_actor, profile


def test_register_creates_employee_with_hashed_password():
    repo = FakeUsersRepo()
    svc = AuthService(repo)

    user = svc.register(email=" Ana@Example.com ", password="secreto", name="Ana García", birth_date=date(1990, 5, 17))

    stored = repo.get_by_id(user.user_id)
    assert stored.email == "ana@example.com"
    assert stored.role == Role.EMPLOYEE
    assert stored.password_hash != "secreto"
    assert svc.authenticate("ana@example.com", "secreto").user_id == user.user_id


def test_configured_admin_email_registers_as_admin():
    svc = AuthService(FakeUsersRepo(), admin_emails=["boss@example.com"])
    user = svc.register(email="boss@example.com", password="secreto", name="Marc", birth_date=date(1980, 1, 1))
    assert user.is_admin


@pytest.mark.parametrize(
    "email, password, name, birth_date",
    [
        ("not-an-email", "secreto", "Ana", date(1990, 1, 1)),
        ("ana@example.com", "123", "Ana", date(1990, 1, 1)),
        ("ana@example.com", "secreto", "  ", date(1990, 1, 1)),
        ("ana@example.com", "secreto", "Ana", None),
    ],
)
def test_register_validates_input(email, password, name, birth_date):
    with pytest.raises(ValidationError):
        AuthService(FakeUsersRepo()).register(email=email, password=password, name=name, birth_date=birth_date)


def test_register_rejects_duplicate_email():
    svc = AuthService(FakeUsersRepo())
    svc.register(email="ana@example.com", password="secreto", name="Ana", birth_date=date(1990, 1, 1))
    with pytest.raises(ValidationError):
        svc.register(email="ana@example.com", password="otro123", name="Ana", birth_date=date(1990, 1, 1))


def test_wrong_password_or_placeholder_hash_fails():
    repo = FakeUsersRepo(
        [
            profile("u1", "Ana", password_hash=generate_password_hash("secreto")),
            profile("u2", "Luis", password_hash="CHANGE_ME"),
        ]
    )
    svc = AuthService(repo)

    with pytest.raises(AuthenticationError):
        svc.authenticate("u1@example.com", "nope")
    with pytest.raises(AuthenticationError):
        svc.authenticate("u2@example.com", "CHANGE_ME")
    with pytest.raises(AuthenticationError):
        svc.authenticate("nobody@example.com", "secreto")


def test_resolve_returns_none_for_unknown_ids():
    svc = AuthService(FakeUsersRepo([profile("u1", "Ana")]))
    assert svc.resolve("u1").name == "Ana"
    assert svc.resolve("ghost") is None
    assert svc.resolve(None) is None


def test_require_actor_raises_without_identity():
    with pytest.raises(NoActiveOwner):
        require_actor(None)


def test_admin_manages_roles_and_birth_dates():
    repo = FakeUsersRepo([profile("u1", "Ana")])
    svc = UserService(repo)
    admin = make_actor(user_id="boss", name="Marc", role=Role.ADMIN)

    svc.update_role(actor=admin, user_id="u1", role=Role.ADMIN)
    svc.update_birth_date(actor=admin, user_id="u1", birth_date=date(1991, 2, 3))

    assert repo.get_by_id("u1").role == Role.ADMIN
    assert repo.get_by_id("u1").birth_date == date(1991, 2, 3)
    with pytest.raises(ValidationError):
        svc.update_role(actor=admin, user_id="ghost", role=Role.ADMIN)


def test_employees_cannot_manage_users():
    svc = UserService(FakeUsersRepo([profile("u1", "Ana")]))
    with pytest.raises(AuthorizationError):
        svc.list_with_roles(actor=make_actor())


def test_name_lookup_falls_back_to_placeholder():
    lookup = NameLookup(FakeUsersRepo([profile("u1", "Ana")]))
    assert lookup.names_for(["u1", "ghost", "u1"]) == {"u1": "Ana", "ghost": "Unknown"}
    assert lookup.display_name("ghost", fallback="Usuario") == "Usuario"
