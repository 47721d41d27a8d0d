from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.constants import BASE_DAYS_PER_YEAR
from ..core.enums import VacationStatus, VacationType
from ..core.exceptions import AuthorizationError, ValidationError
from ..extra_days.repository import ExtraDaysRepository
from ..users.model import SessionUser
from ..users.service import require_actor
from .balance import compute_balance, validate_submission
from .model import Balance, VacationRequest
from .repository import VacationRepository

logger = logging.getLogger(__name__)

CHRISTMAS_ID_PREFIX = "christmas-"


def christmas_request_id(user_id: str, year: int) -> str:
    return f"{CHRISTMAS_ID_PREFIX}{user_id}-{year}"


class VacationService:
    def __init__(
        self,
        vacations: VacationRepository,
        extra_days: ExtraDaysRepository,
        *,
        base_days: int = BASE_DAYS_PER_YEAR,
    ):
        self._vacations = vacations
        self._extra_days = extra_days
        self._base_days = int(base_days)

    @property
    def base_days(self) -> int:
        return self._base_days

    def balance_for_year(self, *, actor: Optional[SessionUser], year: int) -> Balance:
        actor = require_actor(actor)
        records = self._vacations.list_for_user(actor.user_id, year=int(year))
        return compute_balance(records, int(year), self._base_days)

    def create_regular(
        self,
        *,
        actor: Optional[SessionUser],
        start_date: Optional[date],
        end_date: Optional[date],
    ) -> str:
        actor = require_actor(actor)
        if start_date is not None and end_date is not None and end_date < start_date:
            raise ValidationError("La fecha fin debe ser posterior a la fecha inicio")

        year = start_date.year if start_date else now_local().year
        balance = self.balance_for_year(actor=actor, year=year)
        days_count = validate_submission(start_date, end_date, balance.remaining_days)

        request_id = self._vacations.create(
            user_id=actor.user_id,
            start_date=start_date,
            end_date=end_date,
            vacation_type=VacationType.REGULAR,
            status=VacationStatus.APPROVED,
            days_count=days_count,
        )
        logger.info(
            "vacation %s created for %s: %s..%s (%s days)",
            request_id,
            actor.user_id,
            start_date.isoformat(),
            end_date.isoformat(),
            days_count,
        )
        return request_id

    def delete_request(self, *, actor: Optional[SessionUser], request_id: str) -> None:
        actor = require_actor(actor)
        if request_id.startswith(CHRISTMAS_ID_PREFIX):
            raise ValidationError("La semana de Navidad no se puede eliminar")

        req = self._vacations.get(request_id)
        if not req:
            raise ValidationError("La solicitud no existe")
        if req.user_id != actor.user_id and not actor.is_admin:
            raise AuthorizationError("No puedes eliminar solicitudes de otra persona")

        if not self._vacations.delete(request_id):
            raise ValidationError("No se pudo eliminar la solicitud")
        logger.info("vacation %s deleted by %s", request_id, actor.user_id)

    def list_my_requests(self, *, actor: Optional[SessionUser], year: int) -> list[VacationRequest]:
        """Own stored requests plus the chosen Christmas week of `year`, newest first."""
        actor = require_actor(actor)
        requests = list(self._vacations.list_for_user(actor.user_id))

        christmas = self._christmas_request(actor, int(year))
        if christmas:
            requests.append(christmas)

        requests.sort(key=lambda r: (r.created_at, r.request_id), reverse=True)
        return requests

    def _christmas_request(self, actor: SessionUser, year: int) -> Optional[VacationRequest]:
        choice = self._extra_days.get_holiday_choice(user_id=actor.user_id, year=year)
        if not choice:
            return None
        option = next((o for o in self._extra_days.list_options(year) if o.option_label == choice.option_label), None)
        if not option:
            return None
        return VacationRequest(
            request_id=christmas_request_id(actor.user_id, year),
            user_id=actor.user_id,
            start_date=option.start_date,
            end_date=option.end_date,
            vacation_type=VacationType.CHRISTMAS,
            status=VacationStatus.APPROVED,
            days_count=0,
            created_at=datetime.combine(option.start_date, time.min),
        )
