from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import VacationStatus, VacationType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, new_id, normalize_mysql_date
from .model import VacationRequest
from .repository import VacationRepository

_COLUMNS = "id, user_id, start_date, end_date, type, status, days_count, created_at"


def _to_request(row: dict) -> VacationRequest:
    return VacationRequest(
        request_id=str(row["id"]),
        user_id=str(row["user_id"]),
        start_date=normalize_mysql_date(row["start_date"]),
        end_date=normalize_mysql_date(row["end_date"]),
        vacation_type=VacationType(row["type"]),
        status=VacationStatus(row["status"]),
        days_count=int(row["days_count"]),
        created_at=row["created_at"],
    )


class MySQLVacationRepository(VacationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        user_id: str,
        start_date: date,
        end_date: date,
        vacation_type: VacationType,
        status: VacationStatus,
        days_count: int,
    ) -> str:
        request_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO vacation_requests(id, user_id, start_date, end_date, type, status, days_count)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (request_id, user_id, start_date, end_date, vacation_type.value, status.value, int(days_count)),
            )
        return request_id

    def get(self, request_id: str) -> Optional[VacationRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM vacation_requests WHERE id=%s", (request_id,))
            row = fetchone(cur)
            return _to_request(row) if row else None

    def list_for_user(self, user_id: str, *, year: Optional[int] = None) -> Sequence[VacationRequest]:
        clauses = ["user_id=%s"]
        params: list[object] = [user_id]
        if year is not None:
            clauses.append("YEAR(start_date)=%s")
            params.append(int(year))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM vacation_requests
                WHERE {where}
                ORDER BY created_at DESC, id ASC
                """,
                tuple(params),
            )
            return [_to_request(r) for r in fetchall(cur)]

    def list_approved_between(self, first_day: date, last_day: date) -> Sequence[VacationRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM vacation_requests
                WHERE status=%s AND start_date<=%s AND end_date>=%s
                ORDER BY created_at ASC, id ASC
                """,
                (VacationStatus.APPROVED.value, last_day, first_day),
            )
            return [_to_request(r) for r in fetchall(cur)]

    def delete(self, request_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM vacation_requests WHERE id=%s", (request_id,))
            return cur.rowcount > 0
