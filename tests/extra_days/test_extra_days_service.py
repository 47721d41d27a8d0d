from __future__ import annotations

from datetime import date

import pytest

from mi_descanso.core.enums import Role
from mi_descanso.core.exceptions import AuthorizationError, ValidationError
from mi_descanso.extra_days.service import ExtraDaysService
from tests.fakes import FakeExtraDaysRepo, christmas_options, make_actor

ADMIN = make_actor(user_id="boss", name="Marc Admin", role=Role.ADMIN)


def test_admin_creates_options_a_and_b_once_per_year():
    repo = FakeExtraDaysRepo()
    svc = ExtraDaysService(repo)

    svc.create_option(actor=ADMIN, year=2028, option_label="a", start_date=date(2028, 12, 22), end_date=date(2028, 12, 28))

    assert [o.option_label for o in svc.list_options(2028)] == ["A"]
    with pytest.raises(ValidationError):
        svc.create_option(actor=ADMIN, year=2028, option_label="A", start_date=date(2028, 12, 22), end_date=date(2028, 12, 28))
    with pytest.raises(ValidationError):
        svc.create_option(actor=ADMIN, year=2028, option_label="C", start_date=date(2028, 12, 22), end_date=date(2028, 12, 28))


def test_employees_cannot_manage_options():
    svc = ExtraDaysService(FakeExtraDaysRepo())
    with pytest.raises(AuthorizationError):
        svc.create_option(actor=make_actor(), year=2028, option_label="A", start_date=date(2028, 12, 22), end_date=date(2028, 12, 28))
    with pytest.raises(AuthorizationError):
        svc.list_all_options(actor=make_actor())


def test_update_option_keeps_missing_dates():
    repo = FakeExtraDaysRepo(christmas_options(2026))
    svc = ExtraDaysService(repo)

    updated = svc.update_option(actor=ADMIN, option_id="opt-2026-A", end_date=date(2026, 12, 27))

    assert updated.start_date == date(2026, 12, 22)
    assert repo.get_option("opt-2026-A").end_date == date(2026, 12, 27)


def test_update_option_rejects_inverted_range():
    svc = ExtraDaysService(FakeExtraDaysRepo(christmas_options(2026)))
    with pytest.raises(ValidationError):
        svc.update_option(actor=ADMIN, option_id="opt-2026-A", start_date=date(2026, 12, 30))


def test_holiday_choice_must_match_an_existing_option():
    repo = FakeExtraDaysRepo(christmas_options(2026))
    svc = ExtraDaysService(repo)
    actor = make_actor()

    svc.save_holiday_choice(actor=actor, year=2026, option_label="b")
    assert repo.get_holiday_choice(user_id="u1", year=2026).option_label == "B"

    with pytest.raises(ValidationError):
        svc.save_holiday_choice(actor=actor, year=2030, option_label="A")


def test_changing_the_choice_keeps_a_single_row():
    repo = FakeExtraDaysRepo(christmas_options(2026))
    svc = ExtraDaysService(repo)
    actor = make_actor()

    svc.save_holiday_choice(actor=actor, year=2026, option_label="A")
    svc.save_holiday_choice(actor=actor, year=2026, option_label="B")

    assert [c.option_label for c in repo.list_holiday_choices(2026)] == ["B"]


def test_birthday_day_must_be_inside_the_year():
    repo = FakeExtraDaysRepo()
    svc = ExtraDaysService(repo)
    actor = make_actor()

    svc.save_birthday_day(actor=actor, year=2026, selected_date=date(2026, 5, 18))
    assert repo.get_birthday_day(user_id="u1", year=2026).selected_date == date(2026, 5, 18)

    with pytest.raises(ValidationError):
        svc.save_birthday_day(actor=actor, year=2026, selected_date=date(2027, 1, 2))
    with pytest.raises(ValidationError):
        svc.save_birthday_day(actor=actor, year=2026, selected_date=None)


def test_my_extra_days_reports_current_state():
    repo = FakeExtraDaysRepo(christmas_options(2026))
    svc = ExtraDaysService(repo)
    actor = make_actor()
    svc.save_holiday_choice(actor=actor, year=2026, option_label="B")

    mine = svc.get_my_extra_days(actor=actor, year=2026)

    assert mine.holiday_label == "B"
    assert mine.birthday_date is None
    assert [o.option_label for o in mine.options] == ["A", "B"]
