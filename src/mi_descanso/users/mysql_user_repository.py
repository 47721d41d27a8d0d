from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, new_id, normalize_mysql_date
from .model import Profile
from .repository import UserRepository

_PROFILE_COLUMNS = "id, email, name, password_hash, role, birth_date, created_at"


def _to_profile(row: dict) -> Profile:
    return Profile(
        user_id=str(row["id"]),
        email=row["email"],
        name=row["name"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        birth_date=normalize_mysql_date(row.get("birth_date")),
        created_at=row.get("created_at"),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: str) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_PROFILE_COLUMNS} FROM profiles WHERE id=%s", (user_id,))
            row = fetchone(cur)
            return _to_profile(row) if row else None

    def get_by_email(self, email: str) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_PROFILE_COLUMNS} FROM profiles WHERE email=%s", (email,))
            row = fetchone(cur)
            return _to_profile(row) if row else None

    def create_profile(
        self,
        *,
        email: str,
        name: str,
        password_hash: str,
        role: Role,
        birth_date: Optional[date],
    ) -> str:
        user_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO profiles(id, email, name, password_hash, role, birth_date)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (user_id, email, name, password_hash, role.value, birth_date),
            )
        return user_id

    def list_all(self) -> Sequence[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_PROFILE_COLUMNS} FROM profiles ORDER BY name ASC")
            return [_to_profile(r) for r in fetchall(cur)]

    def update_role(self, user_id: str, *, role: Role) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE profiles SET role=%s WHERE id=%s", (role.value, user_id))
            return cur.rowcount > 0

    def update_birth_date(self, user_id: str, *, birth_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE profiles SET birth_date=%s, updated_at=CURRENT_TIMESTAMP WHERE id=%s",
                (birth_date, user_id),
            )
            return cur.rowcount > 0

    def get_names(self, user_ids: Sequence[str]) -> dict[str, str]:
        ids = list(user_ids)
        if not ids:
            return {}

        placeholders = ",".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT id, name FROM profiles WHERE id IN ({placeholders})", tuple(ids))
            return {str(r["id"]): r["name"] for r in fetchall(cur)}
