from __future__ import annotations

from datetime import date

import pytest

from mi_descanso.core.enums import VacationStatus
from mi_descanso.core.exceptions import ValidationError
from mi_descanso.team_calendar.service import TeamCalendarService, serialize_overlay
from mi_descanso.users.service import NameLookup
from tests.fakes import (
    FakeExtraDaysRepo,
    FakeUsersRepo,
    FakeVacationsRepo,
    christmas_options,
    make_request,
    profile,
)


def _service(requests=(), options=(), profiles=()):
    vacations = FakeVacationsRepo(requests)
    extra_days = FakeExtraDaysRepo(options)
    users = FakeUsersRepo(profiles)
    return TeamCalendarService(vacations, extra_days, NameLookup(users)), extra_days


def test_month_view_resolves_names_and_placeholders():
    svc, extra_days = _service(
        [
            make_request("r1", "u1", date(2026, 12, 1), date(2026, 12, 2)),
            make_request("r2", "gone", date(2026, 12, 1), date(2026, 12, 1)),
        ],
        christmas_options(2026),
        [profile("u1", "Ana García")],
    )
    extra_days.upsert_holiday_choice(user_id="gone-too", year=2026, option_label="A")

    overlay = svc.month_view(year=2026, month=12)

    names = {d.entry.user_id: d.entry.user_name for c in overlay.days() for d in c.entries}
    assert names == {"u1": "Ana García", "gone": "Unknown", "gone-too": "Usuario"}


def test_january_shows_week_chosen_in_previous_december():
    svc, extra_days = _service(options=christmas_options(2026), profiles=[profile("u1", "Ana")])
    extra_days.upsert_holiday_choice(user_id="u1", year=2026, option_label="B")

    overlay = svc.month_view(year=2027, month=1)

    covered = [c.day for c in overlay.days() if c.entries]
    assert covered == [date(2027, 1, d) for d in range(1, 5)]


def test_invalid_month_is_rejected():
    svc, _ = _service()
    with pytest.raises(ValidationError):
        svc.month_view(year=2026, month=13)


def test_serialized_cells_respect_visible_limit():
    records = [make_request(f"r{i}", f"u{i}", date(2026, 7, 8), date(2026, 7, 8)) for i in range(4)]
    svc, _ = _service(records, profiles=[profile(f"u{i}", f"Persona{i} X") for i in range(4)])

    data = serialize_overlay(svc.month_view(year=2026, month=7), limit=3)

    day = next(d for d in data["days"] if d["date"] == "2026-07-08")
    assert len(day["entries"]) == 3
    assert day["hidden_count"] == 1
    assert day["entries"][0]["type"] == "regular"
    assert data["leading_blank_days"] == 2
    assert len(data["days"]) == 31


def test_month_view_only_loads_requests_overlapping_the_month():
    svc, _ = _service(
        [
            make_request("r1", "u1", date(2026, 7, 8), date(2026, 7, 8)),
            make_request("r2", "u2", date(2023, 3, 6), date(2023, 3, 10)),
            make_request("r3", "u3", date(2026, 6, 29), date(2026, 7, 1)),
            make_request("r4", "u4", date(2026, 8, 3), date(2026, 8, 4)),
        ],
        profiles=[profile("u1", "Ana García"), profile("u2", "Ana López"), profile("u3", "Luis"), profile("u4", "Eva")],
    )

    overlay = svc.month_view(year=2026, month=7)

    shown = {d.entry.entry_id: d.label for c in overlay.days() for d in c.entries}
    assert shown == {"r1": "Ana", "r3": "Luis"}


def test_approved_between_is_inclusive_and_skips_other_statuses():
    repo = FakeVacationsRepo(
        [
            make_request("r1", "u1", date(2026, 6, 30), date(2026, 7, 1)),
            make_request("r2", "u1", date(2026, 7, 31), date(2026, 8, 2)),
            make_request("r3", "u1", date(2026, 6, 1), date(2026, 6, 30)),
            make_request("r4", "u1", date(2026, 7, 6), date(2026, 7, 6), status=VacationStatus.PENDING),
        ]
    )

    found = repo.list_approved_between(date(2026, 7, 1), date(2026, 7, 31))

    assert sorted(r.request_id for r in found) == ["r1", "r2"]


def test_month_view_resolves_names_in_one_query():
    vacations = FakeVacationsRepo([make_request(f"r{i}", f"u{i}", date(2026, 7, 8), date(2026, 7, 8)) for i in range(5)])
    extra_days = FakeExtraDaysRepo()
    extra_days.upsert_birthday_day(user_id="u9", year=2026, selected_date=date(2026, 7, 9))
    users = FakeUsersRepo([profile(f"u{i}", f"Persona{i}") for i in range(5)])

    TeamCalendarService(vacations, extra_days, NameLookup(users)).month_view(year=2026, month=7)

    assert users.name_queries == 1
