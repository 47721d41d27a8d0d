"""Month overlay for the team calendar.

Builds one DayCell per day of the displayed month from already-fetched
records. Pure functions only; nothing here touches the database.
"""
from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import iter_days, month_bounds
from ..core.constants import FALLBACK_NAME, MAX_VISIBLE_ENTRIES, USER_PALETTE
from ..core.enums import VacationStatus
from ..extra_days.model import HolidayWeekOption, UserBirthdayDay, UserHolidayChoice
from ..vacations.model import VacationRequest
from .entries import CalendarEntry, materialize_entries
from .fixed_holidays import FixedHoliday

_HASH_MODULUS = 2147483647


def hash_string(value: str) -> int:
    h = 0
    for ch in value:
        h = (h * 31 + ord(ch)) % _HASH_MODULUS
    return h


def color_index(user_id: str, palette_size: int = len(USER_PALETTE)) -> int:
    """Palette slot for a person; a pure function of the identifier."""
    return hash_string(user_id) % palette_size


def first_name(full_name: Optional[str]) -> str:
    parts = (full_name or "").split()
    return parts[0] if parts else FALLBACK_NAME


def display_labels(entries: Iterable[CalendarEntry]) -> dict[str, str]:
    """user_id -> label; a first name shared by different people shows full names."""
    names_by_user: dict[str, str] = {}
    for entry in entries:
        names_by_user.setdefault(entry.user_id, (entry.user_name or "").strip() or FALLBACK_NAME)

    people_by_first: dict[str, set[str]] = defaultdict(set)
    for user_id, name in names_by_user.items():
        people_by_first[first_name(name)].add(user_id)

    labels: dict[str, str] = {}
    for user_id, name in names_by_user.items():
        first = first_name(name)
        labels[user_id] = name if len(people_by_first[first]) > 1 else first
    return labels


@dataclass(frozen=True)
class DisplayEntry:
    entry: CalendarEntry
    label: str
    color_index: int

    @property
    def color(self) -> str:
        return USER_PALETTE[self.color_index]


@dataclass
class DayCell:
    day: date
    entries: list[DisplayEntry] = field(default_factory=list)
    holiday_name: Optional[str] = None

    @property
    def is_holiday(self) -> bool:
        return self.holiday_name is not None

    @property
    def is_weekend(self) -> bool:
        return self.day.weekday() >= 5

    def visible(self, limit: int = MAX_VISIBLE_ENTRIES) -> list[DisplayEntry]:
        return self.entries[:limit]

    def hidden_count(self, limit: int = MAX_VISIBLE_ENTRIES) -> int:
        return max(len(self.entries) - limit, 0)


@dataclass
class MonthOverlay:
    year: int
    month: int
    cells: dict[date, DayCell]

    @property
    def leading_blank_days(self) -> int:
        """Empty grid slots before day 1 in a Monday-first week."""
        return date(self.year, self.month, 1).weekday()

    def days(self) -> list[DayCell]:
        return [self.cells[d] for d in sorted(self.cells)]


def overlay_for_month(
    records: Iterable[VacationRequest],
    holiday_choices: Iterable[UserHolidayChoice],
    birthday_days: Iterable[UserBirthdayDay],
    holiday_options: Iterable[HolidayWeekOption],
    fixed_holidays: Sequence[FixedHoliday],
    month: int,
    year: int,
    names: Optional[Mapping[str, str]] = None,
) -> MonthOverlay:
    first_day, last_day = month_bounds(year, month)

    entries = materialize_entries(records, holiday_choices, birthday_days, holiday_options, names)
    entries = [e for e in entries if e.status == VacationStatus.APPROVED and e.overlaps(first_day, last_day)]
    entries.sort(key=lambda e: e.sort_key)

    # Labels only consider people visible in this month.
    labels = display_labels(entries)
    holiday_names: dict[date, str] = {}
    for h in fixed_holidays:
        holiday_names.setdefault(h.day, h.name)

    cells: dict[date, DayCell] = {}
    for day in iter_days(first_day, last_day):
        cells[day] = DayCell(
            day=day,
            entries=[
                DisplayEntry(entry=e, label=labels[e.user_id], color_index=color_index(e.user_id))
                for e in entries
                if e.covers(day)
            ],
            holiday_name=holiday_names.get(day),
        )

    return MonthOverlay(year=year, month=month, cells=cells)
