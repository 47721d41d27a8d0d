from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Profile:
    """Domain entity: a registered person.

    Plain data object; database access lives in the repository.
    """

    user_id: str
    email: str
    name: str
    password_hash: str
    role: Role = Role.EMPLOYEE
    birth_date: Optional[date] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class SessionUser:
    """Resolved identity handed explicitly to every owner-scoped operation."""

    user_id: str
    name: str
    email: str
    role: Role
    birth_date: Optional[date] = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @classmethod
    def from_profile(cls, profile: Profile) -> "SessionUser":
        return cls(
            user_id=profile.user_id,
            name=profile.name,
            email=profile.email,
            role=profile.role,
            birth_date=profile.birth_date,
        )
