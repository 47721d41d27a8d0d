from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import VacationStatus, VacationType
from .model import VacationRequest


class VacationRepository(Protocol):
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
        raise NotImplementedError

    def get(self, request_id: str) -> Optional[VacationRequest]:
        raise NotImplementedError

    def list_for_user(self, user_id: str, *, year: Optional[int] = None) -> Sequence[VacationRequest]:
        """Own requests, newest first. `year` scopes by the start date's year."""

        raise NotImplementedError

    def list_approved_between(self, first_day: date, last_day: date) -> Sequence[VacationRequest]:
        """Approved requests overlapping [first_day, last_day], oldest first."""

        raise NotImplementedError

    def delete(self, request_id: str) -> bool:
        raise NotImplementedError
