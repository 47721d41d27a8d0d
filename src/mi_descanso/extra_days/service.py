from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..core.constants import HOLIDAY_WEEK_LABELS
from ..core.exceptions import ValidationError
from ..users.model import SessionUser
from ..users.service import require_actor, require_admin
from .model import HolidayWeekOption
from .repository import ExtraDaysRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MyExtraDays:
    year: int
    options: Sequence[HolidayWeekOption]
    holiday_label: Optional[str]
    birthday_date: Optional[date]


class ExtraDaysService:
    def __init__(self, extra_days: ExtraDaysRepository):
        self._extra_days = extra_days

    def list_options(self, year: int) -> Sequence[HolidayWeekOption]:
        return self._extra_days.list_options(int(year))

    def list_all_options(self, *, actor: Optional[SessionUser]) -> Sequence[HolidayWeekOption]:
        require_admin(actor)
        return self._extra_days.list_all_options()

    def create_option(
        self,
        *,
        actor: Optional[SessionUser],
        year: int,
        option_label: str,
        start_date: date,
        end_date: date,
    ) -> str:
        require_admin(actor)
        label = (option_label or "").strip().upper()
        if label not in HOLIDAY_WEEK_LABELS:
            raise ValidationError("La opción debe ser A o B")
        if end_date < start_date:
            raise ValidationError("La fecha fin debe ser posterior a la fecha inicio")
        if any(o.option_label == label for o in self._extra_days.list_options(int(year))):
            raise ValidationError(f"La opción {label} ya existe para {year}")

        return self._extra_days.create_option(year=int(year), option_label=label, start_date=start_date, end_date=end_date)

    def update_option(
        self,
        *,
        actor: Optional[SessionUser],
        option_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> HolidayWeekOption:
        actor = require_admin(actor)
        option = self._extra_days.get_option(option_id)
        if not option:
            raise ValidationError("La opción no existe")

        new_start = start_date or option.start_date
        new_end = end_date or option.end_date
        if new_end < new_start:
            raise ValidationError("La fecha fin debe ser posterior a la fecha inicio")

        if not self._extra_days.update_option(option_id, start_date=new_start, end_date=new_end):
            raise ValidationError("No se pudo actualizar la opción")
        logger.info("holiday week option %s/%s updated by %s", option.year, option.option_label, actor.user_id)
        return HolidayWeekOption(
            option_id=option.option_id,
            year=option.year,
            option_label=option.option_label,
            start_date=new_start,
            end_date=new_end,
        )

    def save_holiday_choice(self, *, actor: Optional[SessionUser], year: int, option_label: str) -> None:
        actor = require_actor(actor)
        label = (option_label or "").strip().upper()
        if not any(o.option_label == label for o in self._extra_days.list_options(int(year))):
            raise ValidationError(f"La opción {label or '-'} no existe para {year}")
        self._extra_days.upsert_holiday_choice(user_id=actor.user_id, year=int(year), option_label=label)

    def save_birthday_day(self, *, actor: Optional[SessionUser], year: int, selected_date: Optional[date]) -> None:
        actor = require_actor(actor)
        if selected_date is None:
            raise ValidationError("Selecciona una fecha")
        if selected_date.year != int(year):
            raise ValidationError(f"La fecha debe estar dentro de {year}")
        self._extra_days.upsert_birthday_day(user_id=actor.user_id, year=int(year), selected_date=selected_date)

    def get_my_extra_days(self, *, actor: Optional[SessionUser], year: int) -> MyExtraDays:
        actor = require_actor(actor)
        choice = self._extra_days.get_holiday_choice(user_id=actor.user_id, year=int(year))
        birthday = self._extra_days.get_birthday_day(user_id=actor.user_id, year=int(year))
        return MyExtraDays(
            year=int(year),
            options=self._extra_days.list_options(int(year)),
            holiday_label=choice.option_label if choice else None,
            birthday_date=birthday.selected_date if birthday else None,
        )
