from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import HolidayWeekOption, UserBirthdayDay, UserHolidayChoice


class ExtraDaysRepository(Protocol):
    # Holiday-week options
    def list_options(self, year: int) -> Sequence[HolidayWeekOption]:
        """Options of one year ordered by label."""

        raise NotImplementedError

    def list_all_options(self) -> Sequence[HolidayWeekOption]:
        raise NotImplementedError

    def get_option(self, option_id: str) -> Optional[HolidayWeekOption]:
        raise NotImplementedError

    def create_option(self, *, year: int, option_label: str, start_date: date, end_date: date) -> str:
        raise NotImplementedError

    def update_option(self, option_id: str, *, start_date: date, end_date: date) -> bool:
        raise NotImplementedError

    # Holiday-week choices, unique on (user_id, year)
    def get_holiday_choice(self, *, user_id: str, year: int) -> Optional[UserHolidayChoice]:
        raise NotImplementedError

    def list_holiday_choices(self, year: int) -> Sequence[UserHolidayChoice]:
        raise NotImplementedError

    def upsert_holiday_choice(self, *, user_id: str, year: int, option_label: str) -> None:
        raise NotImplementedError

    # Birthday days, unique on (user_id, year)
    def get_birthday_day(self, *, user_id: str, year: int) -> Optional[UserBirthdayDay]:
        raise NotImplementedError

    def list_birthday_days(self, year: int) -> Sequence[UserBirthdayDay]:
        raise NotImplementedError

    def upsert_birthday_day(self, *, user_id: str, year: int, selected_date: date) -> None:
        raise NotImplementedError
