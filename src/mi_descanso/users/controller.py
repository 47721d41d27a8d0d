from __future__ import annotations

from flask import Flask, session

from ..common.web import (
    admin_required,
    current_actor,
    date_field,
    handle_errors,
    json_body,
    json_error,
    json_ok,
    login_required,
)
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from .model import Profile, SessionUser


def session_user_dict(user: SessionUser) -> dict:
    return {
        "id": user.user_id,
        "name": user.name,
        "email": user.email,
        "role": user.role.value,
        "birth_date": user.birth_date.isoformat() if user.birth_date else None,
    }


def profile_dict(profile: Profile) -> dict:
    return {
        "id": profile.user_id,
        "name": profile.name,
        "email": profile.email,
        "role": profile.role.value,
        "birth_date": profile.birth_date.isoformat() if profile.birth_date else None,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/register", methods=["POST"], endpoint="auth_register")
    @handle_errors("registrar la cuenta")
    def auth_register():
        data = json_body()
        user = container.auth_service.register(
            email=data.get("email", ""),
            password=data.get("password", ""),
            name=data.get("name", ""),
            birth_date=date_field(data, "birth_date"),
        )
        session.clear()
        session["user_id"] = user.user_id
        return json_ok("Cuenta creada", 201, user=session_user_dict(user))

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def auth_login():
        data = json_body()
        try:
            user = container.auth_service.authenticate(data.get("email", ""), data.get("password", ""))
        except AuthenticationError as e:
            return json_error(str(e), 401)

        session.clear()
        session["user_id"] = user.user_id
        return json_ok("Sesión iniciada", user=session_user_dict(user))

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    def auth_logout():
        session.clear()
        return json_ok("Sesión cerrada")

    @app.route("/api/auth/me", methods=["GET"], endpoint="auth_me")
    @login_required(container)
    def auth_me():
        return json_ok(user=session_user_dict(current_actor(container)))

    @app.route("/api/admin/users", methods=["GET"], endpoint="admin_users")
    @admin_required(container)
    @handle_errors("cargar los usuarios")
    def admin_users():
        profiles = container.user_service.list_with_roles(actor=current_actor(container))
        return json_ok(users=[profile_dict(p) for p in profiles])

    @app.route("/api/admin/users/<user_id>/role", methods=["PUT"], endpoint="admin_user_role")
    @admin_required(container)
    @handle_errors("actualizar el rol")
    def admin_user_role(user_id: str):
        try:
            role = Role(json_body().get("role", ""))
        except ValueError:
            raise ValidationError("Rol no válido")

        container.user_service.update_role(actor=current_actor(container), user_id=user_id, role=role)
        return json_ok("Rol actualizado")

    @app.route("/api/admin/users/<user_id>/birth-date", methods=["PUT"], endpoint="admin_user_birth_date")
    @admin_required(container)
    @handle_errors("actualizar la fecha de nacimiento")
    def admin_user_birth_date(user_id: str):
        birth_date = date_field(json_body(), "birth_date")
        if birth_date is None:
            raise ValidationError("Selecciona una fecha")

        container.user_service.update_birth_date(actor=current_actor(container), user_id=user_id, birth_date=birth_date)
        return json_ok("Fecha de nacimiento actualizada")
