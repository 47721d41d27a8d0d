from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class FixedHoliday:
    day: date
    name: str


_NATIONAL_NAMES = (
    ((1, 1), "Año Nuevo"),
    ((1, 6), "Epifanía del Señor"),
    (None, "Viernes Santo"),
    ((5, 1), "Fiesta del Trabajo"),
    ((8, 15), "Asunción de la Virgen"),
    ((10, 12), "Fiesta Nacional de España"),
    ((11, 1), "Todos los Santos"),
    ((12, 6), "Día de la Constitución"),
    ((12, 8), "Inmaculada Concepción"),
    ((12, 25), "Navidad"),
)

# Good Friday is the only movable national holiday in the table.
_GOOD_FRIDAY = {
    2026: date(2026, 4, 3),
    2027: date(2027, 3, 26),
    2028: date(2028, 4, 14),
    2029: date(2029, 3, 30),
    2030: date(2030, 4, 19),
}


def company_holidays(year: int) -> list[FixedHoliday]:
    return [
        FixedHoliday(date(year, 12, 24), "24 Diciembre"),
        FixedHoliday(date(year, 12, 31), "31 Diciembre"),
    ]


def national_holidays(year: int) -> list[FixedHoliday]:
    """Spanish national holidays; years outside the table have none."""
    good_friday = _GOOD_FRIDAY.get(year)
    if good_friday is None:
        return []

    out: list[FixedHoliday] = []
    for month_day, name in _NATIONAL_NAMES:
        day = good_friday if month_day is None else date(year, *month_day)
        out.append(FixedHoliday(day, name))
    return out


def fixed_holidays_for_year(year: int) -> list[FixedHoliday]:
    return company_holidays(year) + national_holidays(year)
