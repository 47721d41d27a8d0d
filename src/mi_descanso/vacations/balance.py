"""Allowance arithmetic for regular vacation requests.

Everything here is pure: callers fetch records and pass them in.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Optional

from ..core.constants import BASE_DAYS_PER_YEAR
from ..core.enums import VacationStatus, VacationType
from ..core.exceptions import EmptyBusinessDayRange, InsufficientBalance, MissingRange
from .model import Balance, VacationRequest


def business_day_count(start: date, end: date) -> int:
    """Weekdays (Mon-Fri) in the closed interval [start, end]."""
    if end < start:
        return 0

    total_days = (end - start).days + 1
    full_weeks, rest = divmod(total_days, 7)
    count = full_weeks * 5

    day = start + timedelta(days=full_weeks * 7)
    for _ in range(rest):
        if day.weekday() < 5:
            count += 1
        day += timedelta(days=1)
    return count


def compute_balance(
    records: Iterable[VacationRequest],
    year: int,
    base_days: int = BASE_DAYS_PER_YEAR,
) -> Balance:
    """Sum approved regular requests against the allowance.

    Records are not filtered by year here; scope the query instead.
    remaining_days may go negative.
    """
    used = sum(
        int(r.days_count)
        for r in records
        if r.vacation_type == VacationType.REGULAR and r.status == VacationStatus.APPROVED
    )
    return Balance(year=year, base_days=base_days, used_days=used, remaining_days=base_days - used)


def validate_submission(start: Optional[date], end: Optional[date], remaining_days: int) -> int:
    """Return the business-day count of a new request or raise why it cannot be taken."""
    if start is None or end is None:
        raise MissingRange()

    days = business_day_count(start, end)
    if days == 0:
        raise EmptyBusinessDayRange()
    if days > remaining_days:
        raise InsufficientBalance(remaining_days)
    return days
