from __future__ import annotations

from typing import Optional

from ..common.datetime_utils import month_bounds
from ..core.constants import FALLBACK_NAME, UNKNOWN_NAME
from ..core.exceptions import ValidationError
from ..extra_days.repository import ExtraDaysRepository
from ..users.service import NameLookup
from ..vacations.repository import VacationRepository
from .fixed_holidays import fixed_holidays_for_year
from .overlay import MonthOverlay, overlay_for_month


class TeamCalendarService:
    """Use case: the shared month view of everybody's days off."""

    def __init__(self, vacations: VacationRepository, extra_days: ExtraDaysRepository, names: NameLookup):
        self._vacations = vacations
        self._extra_days = extra_days
        self._names = names

    def month_view(self, *, year: int, month: int) -> MonthOverlay:
        if not 1 <= int(month) <= 12:
            raise ValidationError("Mes no válido")
        year = int(year)

        first_day, last_day = month_bounds(year, int(month))
        records = self._vacations.list_approved_between(first_day, last_day)
        # A holiday week chosen for December may run into January.
        years = (year - 1, year) if int(month) == 1 else (year,)
        choices = [c for y in years for c in self._extra_days.list_holiday_choices(y)]
        birthdays = self._extra_days.list_birthday_days(year)
        options = [o for y in years for o in self._extra_days.list_options(y)]

        stored_ids = {r.user_id for r in records}
        all_ids = [r.user_id for r in records] + [c.user_id for c in choices] + [b.user_id for b in birthdays]
        resolved = self._names.names_for(all_ids, fallback="")
        names = {
            uid: name or (UNKNOWN_NAME if uid in stored_ids else FALLBACK_NAME)
            for uid, name in resolved.items()
        }

        return overlay_for_month(
            records,
            choices,
            birthdays,
            options,
            fixed_holidays_for_year(year),
            int(month),
            year,
            names=names,
        )


def serialize_overlay(overlay: MonthOverlay, *, limit: Optional[int] = None) -> dict:
    days = []
    for cell in overlay.days():
        entries = cell.entries if limit is None else cell.visible(limit)
        days.append(
            {
                "date": cell.day.isoformat(),
                "is_weekend": cell.is_weekend,
                "is_holiday": cell.is_holiday,
                "holiday_name": cell.holiday_name,
                "entries": [
                    {
                        "id": d.entry.entry_id,
                        "user_id": d.entry.user_id,
                        "user_name": d.entry.user_name,
                        "label": d.label,
                        "type": d.entry.kind.value,
                        "color": d.color,
                        "color_index": d.color_index,
                    }
                    for d in entries
                ],
                "hidden_count": 0 if limit is None else cell.hidden_count(limit),
            }
        )
    return {
        "year": overlay.year,
        "month": overlay.month,
        "leading_blank_days": overlay.leading_blank_days,
        "days": days,
    }
