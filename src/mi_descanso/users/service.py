from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_email, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH, UNKNOWN_NAME
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, NoActiveOwner, ValidationError
from .model import Profile, SessionUser
from .repository import UserRepository

logger = logging.getLogger(__name__)


def require_actor(actor: Optional[SessionUser]) -> SessionUser:
    if actor is None:
        raise NoActiveOwner()
    return actor


def require_admin(actor: Optional[SessionUser]) -> SessionUser:
    actor = require_actor(actor)
    if not actor.is_admin:
        raise AuthorizationError("No tienes permisos de administrador")
    return actor


class AuthService:
    """Use case: register, log in and resolve the session identity."""

    def __init__(self, users: UserRepository, *, admin_emails: Iterable[str] = ()):
        self._users = users
        self._admin_emails = {e.strip().lower() for e in admin_emails if e and e.strip()}

    def register(self, *, email: str, password: str, name: str, birth_date: Optional[date]) -> SessionUser:
        email = require_email(email)
        name = require_non_empty(name, "Nombre")
        require_min_length(password, "Contraseña", MIN_PASSWORD_LENGTH)
        if birth_date is None:
            raise ValidationError("Por favor completa todos los campos")

        if self._users.get_by_email(email):
            raise ValidationError("Ya existe una cuenta con ese email")

        role = Role.ADMIN if email in self._admin_emails else Role.EMPLOYEE
        user_id = self._users.create_profile(
            email=email,
            name=name,
            password_hash=generate_password_hash(password),
            role=role,
            birth_date=birth_date,
        )
        logger.info("registered profile %s with role %s", user_id, role.value)
        return SessionUser(user_id=user_id, name=name, email=email, role=role, birth_date=birth_date)

    def authenticate(self, email: str, password: str) -> SessionUser:
        profile = self._users.get_by_email((email or "").strip().lower())
        if not profile:
            raise AuthenticationError("Email o contraseña incorrectos")

        try:
            ok = check_password_hash(profile.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Email o contraseña incorrectos")

        return SessionUser.from_profile(profile)

    def resolve(self, user_id: Optional[str]) -> Optional[SessionUser]:
        if not user_id:
            return None
        profile = self._users.get_by_id(user_id)
        return SessionUser.from_profile(profile) if profile else None


class UserService:
    """Use case: manage users (admin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_with_roles(self, *, actor: Optional[SessionUser]) -> Sequence[Profile]:
        require_admin(actor)
        return self._users.list_all()

    def update_role(self, *, actor: Optional[SessionUser], user_id: str, role: Role) -> None:
        actor = require_admin(actor)
        if not self._users.update_role(user_id, role=role):
            raise ValidationError("El usuario no existe")
        logger.info("role of %s set to %s by %s", user_id, role.value, actor.user_id)

    def update_birth_date(self, *, actor: Optional[SessionUser], user_id: str, birth_date: date) -> None:
        require_admin(actor)
        if not self._users.update_birth_date(user_id, birth_date=birth_date):
            raise ValidationError("El usuario no existe")


class NameLookup:
    """Display names for calendar entries; a missing profile degrades to a placeholder."""

    def __init__(self, users: UserRepository):
        self._users = users

    def display_name(self, user_id: str, *, fallback: str = UNKNOWN_NAME) -> str:
        return self.names_for([user_id], fallback=fallback)[user_id]

    def names_for(self, user_ids: Iterable[str], *, fallback: str = UNKNOWN_NAME) -> dict[str, str]:
        """One lookup for the whole batch; ids without a profile get `fallback`."""
        ids = list(dict.fromkeys(user_ids))
        if not ids:
            return {}
        found = self._users.get_names(ids)
        return {uid: found.get(uid) or fallback for uid in ids}
