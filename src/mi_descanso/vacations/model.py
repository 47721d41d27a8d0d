from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.enums import VacationStatus, VacationType


@dataclass(frozen=True)
class VacationRequest:
    request_id: str
    user_id: str
    start_date: date
    end_date: date
    vacation_type: VacationType
    status: VacationStatus
    days_count: int
    created_at: datetime

    @property
    def is_synthetic(self) -> bool:
        return self.vacation_type == VacationType.CHRISTMAS


@dataclass(frozen=True)
class Balance:
    year: int
    base_days: int
    used_days: int
    remaining_days: int
