from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, new_id, normalize_mysql_date
from .model import HolidayWeekOption, UserBirthdayDay, UserHolidayChoice
from .repository import ExtraDaysRepository


def _to_option(r: dict) -> HolidayWeekOption:
    return HolidayWeekOption(
        option_id=str(r["id"]),
        year=int(r["year"]),
        option_label=r["option_label"],
        start_date=normalize_mysql_date(r["start_date"]),
        end_date=normalize_mysql_date(r["end_date"]),
    )


def _to_choice(r: dict) -> UserHolidayChoice:
    return UserHolidayChoice(user_id=str(r["user_id"]), year=int(r["year"]), option_label=r["option_label"])


def _to_birthday(r: dict) -> UserBirthdayDay:
    return UserBirthdayDay(
        user_id=str(r["user_id"]),
        year=int(r["year"]),
        selected_date=normalize_mysql_date(r["selected_date"]),
    )


class MySQLExtraDaysRepository(ExtraDaysRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    # -------- Holiday-week options --------
    def list_options(self, year: int) -> Sequence[HolidayWeekOption]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, year, option_label, start_date, end_date
                FROM christmas_options
                WHERE year=%s
                ORDER BY option_label ASC
                """,
                (int(year),),
            )
            return [_to_option(r) for r in fetchall(cur)]

    def list_all_options(self) -> Sequence[HolidayWeekOption]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, year, option_label, start_date, end_date
                FROM christmas_options
                ORDER BY year ASC, option_label ASC
                """
            )
            return [_to_option(r) for r in fetchall(cur)]

    def get_option(self, option_id: str) -> Optional[HolidayWeekOption]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, year, option_label, start_date, end_date FROM christmas_options WHERE id=%s",
                (option_id,),
            )
            r = fetchone(cur)
            return _to_option(r) if r else None

    def create_option(self, *, year: int, option_label: str, start_date: date, end_date: date) -> str:
        option_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO christmas_options(id, year, option_label, start_date, end_date)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (option_id, int(year), option_label, start_date, end_date),
            )
        return option_id

    def update_option(self, option_id: str, *, start_date: date, end_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE christmas_options SET start_date=%s, end_date=%s WHERE id=%s",
                (start_date, end_date, option_id),
            )
            return cur.rowcount > 0

    # -------- Holiday-week choices --------
    def get_holiday_choice(self, *, user_id: str, year: int) -> Optional[UserHolidayChoice]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT user_id, year, option_label FROM user_christmas_choices WHERE user_id=%s AND year=%s",
                (user_id, int(year)),
            )
            r = fetchone(cur)
            return _to_choice(r) if r else None

    def list_holiday_choices(self, year: int) -> Sequence[UserHolidayChoice]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, year, option_label
                FROM user_christmas_choices
                WHERE year=%s
                ORDER BY created_at ASC, user_id ASC
                """,
                (int(year),),
            )
            return [_to_choice(r) for r in fetchall(cur)]

    def upsert_holiday_choice(self, *, user_id: str, year: int, option_label: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO user_christmas_choices(id, user_id, year, option_label)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE option_label=VALUES(option_label)
                """,
                (new_id(), user_id, int(year), option_label),
            )

    # -------- Birthday days --------
    def get_birthday_day(self, *, user_id: str, year: int) -> Optional[UserBirthdayDay]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT user_id, year, selected_date FROM user_birthday_days WHERE user_id=%s AND year=%s",
                (user_id, int(year)),
            )
            r = fetchone(cur)
            return _to_birthday(r) if r else None

    def list_birthday_days(self, year: int) -> Sequence[UserBirthdayDay]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, year, selected_date
                FROM user_birthday_days
                WHERE year=%s
                ORDER BY created_at ASC, user_id ASC
                """,
                (int(year),),
            )
            return [_to_birthday(r) for r in fetchall(cur)]

    def upsert_birthday_day(self, *, user_id: str, year: int, selected_date: date) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO user_birthday_days(id, user_id, year, selected_date)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE selected_date=VALUES(selected_date)
                """,
                (new_id(), user_id, int(year), selected_date),
            )
