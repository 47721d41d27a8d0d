from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class HolidayWeekOption:
    """Admin-configured Christmas week for a year (labels A and B)."""

    option_id: str
    year: int
    option_label: str
    start_date: date
    end_date: date


@dataclass(frozen=True)
class UserHolidayChoice:
    user_id: str
    year: int
    option_label: str


@dataclass(frozen=True)
class UserBirthdayDay:
    user_id: str
    year: int
    selected_date: date
