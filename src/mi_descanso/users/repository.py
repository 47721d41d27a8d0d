from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Profile


class UserRepository(Protocol):
    """Repository interface for profiles and their roles.

    Services depend on this interface, never on a concrete database.
    """

    def get_by_id(self, user_id: str) -> Optional[Profile]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Profile]:
        raise NotImplementedError

    def create_profile(
        self,
        *,
        email: str,
        name: str,
        password_hash: str,
        role: Role,
        birth_date: Optional[date],
    ) -> str:
        raise NotImplementedError

    def list_all(self) -> Sequence[Profile]:
        """All profiles ordered by name."""

        raise NotImplementedError

    def update_role(self, user_id: str, *, role: Role) -> bool:
        raise NotImplementedError

    def update_birth_date(self, user_id: str, *, birth_date: date) -> bool:
        raise NotImplementedError

    def get_names(self, user_ids: Sequence[str]) -> dict[str, str]:
        """user_id -> name for the ids that have a profile."""

        raise NotImplementedError
