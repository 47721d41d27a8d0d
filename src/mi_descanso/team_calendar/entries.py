"""Calendar entries as a small tagged variant.

Stored vacation rows, holiday-week choices and birthday days all become a
CalendarEntry; each kind knows how to expand into its display interval.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import ClassVar, Iterable, Mapping, Optional

from ..core.constants import FALLBACK_NAME, UNKNOWN_NAME
from ..core.enums import VacationStatus, VacationType
from ..extra_days.model import HolidayWeekOption, UserBirthdayDay, UserHolidayChoice
from ..vacations.model import VacationRequest


@dataclass(frozen=True)
class CalendarEntry(ABC):
    kind: ClassVar[VacationType]

    user_id: str
    user_name: str

    @property
    @abstractmethod
    def entry_id(self) -> str:
        raise NotImplementedError

    @property
    def status(self) -> VacationStatus:
        return VacationStatus.APPROVED

    @property
    @abstractmethod
    def sort_key(self) -> tuple[datetime, str]:
        raise NotImplementedError

    @abstractmethod
    def display_interval(self) -> tuple[date, date]:
        raise NotImplementedError

    def covers(self, day: date) -> bool:
        start, end = self.display_interval()
        return start <= day <= end

    def overlaps(self, first_day: date, last_day: date) -> bool:
        start, end = self.display_interval()
        return start <= last_day and end >= first_day


@dataclass(frozen=True)
class StoredVacationEntry(CalendarEntry):
    request: VacationRequest

    @property
    def kind(self) -> VacationType:
        return self.request.vacation_type

    @property
    def entry_id(self) -> str:
        return self.request.request_id

    @property
    def status(self) -> VacationStatus:
        return self.request.status

    @property
    def sort_key(self) -> tuple[datetime, str]:
        return self.request.created_at, self.request.request_id

    def display_interval(self) -> tuple[date, date]:
        return self.request.start_date, self.request.end_date


@dataclass(frozen=True)
class HolidayWeekEntry(CalendarEntry):
    kind: ClassVar[VacationType] = VacationType.CHRISTMAS

    choice: UserHolidayChoice
    option: HolidayWeekOption

    @property
    def entry_id(self) -> str:
        return f"christmas-{self.choice.user_id}-{self.choice.year}"

    @property
    def sort_key(self) -> tuple[datetime, str]:
        return datetime.combine(self.option.start_date, time.min), self.entry_id

    def display_interval(self) -> tuple[date, date]:
        return self.option.start_date, self.option.end_date


@dataclass(frozen=True)
class BirthdayEntry(CalendarEntry):
    kind: ClassVar[VacationType] = VacationType.BIRTHDAY

    birthday: UserBirthdayDay

    @property
    def entry_id(self) -> str:
        return f"birthday-{self.birthday.user_id}-{self.birthday.year}"

    @property
    def sort_key(self) -> tuple[datetime, str]:
        return datetime.combine(self.birthday.selected_date, time.min), self.entry_id

    def display_interval(self) -> tuple[date, date]:
        day = self.birthday.selected_date
        return day, day


def materialize_entries(
    records: Iterable[VacationRequest],
    holiday_choices: Iterable[UserHolidayChoice],
    birthday_days: Iterable[UserBirthdayDay],
    holiday_options: Iterable[HolidayWeekOption],
    names: Optional[Mapping[str, str]] = None,
) -> list[CalendarEntry]:
    """Stored rows plus synthetic entries; choices without a matching option are dropped."""
    names = names or {}
    entries: list[CalendarEntry] = [
        StoredVacationEntry(user_id=r.user_id, user_name=names.get(r.user_id) or UNKNOWN_NAME, request=r)
        for r in records
    ]

    options = list(holiday_options)
    for choice in holiday_choices:
        option = next(
            (o for o in options if o.year == choice.year and o.option_label == choice.option_label),
            None,
        )
        if option is None:
            continue
        entries.append(
            HolidayWeekEntry(
                user_id=choice.user_id,
                user_name=names.get(choice.user_id) or FALLBACK_NAME,
                choice=choice,
                option=option,
            )
        )

    for birthday in birthday_days:
        entries.append(
            BirthdayEntry(
                user_id=birthday.user_id,
                user_name=names.get(birthday.user_id) or FALLBACK_NAME,
                birthday=birthday,
            )
        )

    return entries
