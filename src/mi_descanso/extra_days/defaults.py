"""Default birthday day and holiday-week choice for a (user, year).

Defaults are advisory: an explicit row always wins, and each default is
written at most once per (kind, user, year) within one session scope.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import anniversary_in_year
from ..core.constants import DEFAULT_HOLIDAY_WEEK_LABEL
from ..users.model import SessionUser
from ..users.service import require_actor
from .model import HolidayWeekOption
from .repository import ExtraDaysRepository

logger = logging.getLogger(__name__)

BIRTHDAY = "birthday"
HOLIDAY_WEEK = "holiday_week"


class DefaultingGuard:
    """(kind, user_id, year) triples already defaulted in the owning session."""

    def __init__(self, keys: Iterable[Sequence] = ()):
        self._keys: set[tuple[str, str, int]] = set()
        for key in keys:
            kind, user_id, year = key
            self._keys.add((str(kind), str(user_id), int(year)))

    def __contains__(self, key: tuple[str, str, int]) -> bool:
        return key in self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def mark(self, kind: str, user_id: str, year: int) -> None:
        self._keys.add((kind, user_id, int(year)))

    def to_list(self) -> list[list]:
        """JSON-friendly form, e.g. for the Flask session."""
        return [list(k) for k in sorted(self._keys)]


@dataclass
class DefaultsOutcome:
    year: int
    birthday_date: Optional[date] = None
    holiday_label: Optional[str] = None
    saved: list[str] = field(default_factory=list)


def pick_default_option(options: Sequence[HolidayWeekOption]) -> Optional[HolidayWeekOption]:
    """Option labelled A if present, else the first one in supplied order."""
    for option in options:
        if option.option_label == DEFAULT_HOLIDAY_WEEK_LABEL:
            return option
    return options[0] if options else None


class DefaultChoiceService:
    def __init__(self, extra_days: ExtraDaysRepository):
        self._extra_days = extra_days

    def apply_defaults(
        self,
        *,
        actor: Optional[SessionUser],
        year: int,
        guard: DefaultingGuard,
    ) -> DefaultsOutcome:
        actor = require_actor(actor)
        outcome = DefaultsOutcome(year=int(year))
        self._default_birthday(actor, int(year), guard, outcome)
        self._default_holiday_week(actor, int(year), guard, outcome)
        return outcome

    def _default_birthday(self, actor: SessionUser, year: int, guard: DefaultingGuard, outcome: DefaultsOutcome) -> None:
        existing = self._extra_days.get_birthday_day(user_id=actor.user_id, year=year)
        if existing:
            outcome.birthday_date = existing.selected_date
            return
        if actor.birth_date is None:
            return

        derived = anniversary_in_year(actor.birth_date, year)
        outcome.birthday_date = derived
        if (BIRTHDAY, actor.user_id, year) in guard:
            logger.debug("birthday default for %s/%s already saved in this session", actor.user_id, year)
            return

        self._extra_days.upsert_birthday_day(user_id=actor.user_id, year=year, selected_date=derived)
        guard.mark(BIRTHDAY, actor.user_id, year)
        outcome.saved.append(BIRTHDAY)
        logger.info("default birthday day %s saved for %s", derived.isoformat(), actor.user_id)

    def _default_holiday_week(self, actor: SessionUser, year: int, guard: DefaultingGuard, outcome: DefaultsOutcome) -> None:
        existing = self._extra_days.get_holiday_choice(user_id=actor.user_id, year=year)
        if existing:
            outcome.holiday_label = existing.option_label
            return

        option = pick_default_option(self._extra_days.list_options(year))
        if option is None:
            return

        outcome.holiday_label = option.option_label
        if (HOLIDAY_WEEK, actor.user_id, year) in guard:
            logger.debug("holiday week default for %s/%s already saved in this session", actor.user_id, year)
            return

        self._extra_days.upsert_holiday_choice(user_id=actor.user_id, year=year, option_label=option.option_label)
        guard.mark(HOLIDAY_WEEK, actor.user_id, year)
        outcome.saved.append(HOLIDAY_WEEK)
        logger.info("default holiday week %s saved for %s/%s", option.option_label, actor.user_id, year)
