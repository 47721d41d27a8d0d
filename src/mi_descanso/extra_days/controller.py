from __future__ import annotations

from flask import Flask, session

from ..common.datetime_utils import now_local
from ..common.web import (
    admin_required,
    current_actor,
    date_field,
    handle_errors,
    int_arg,
    json_body,
    json_ok,
    login_required,
)
from ..container import Container
from ..core.exceptions import ValidationError
from .defaults import DefaultingGuard
from .model import HolidayWeekOption

GUARD_SESSION_KEY = "defaulted"


def option_dict(option: HolidayWeekOption) -> dict:
    return {
        "id": option.option_id,
        "year": option.year,
        "option_label": option.option_label,
        "start_date": option.start_date.isoformat(),
        "end_date": option.end_date.isoformat(),
    }


def register(app: Flask, container: Container) -> None:
    def _year_from_body(data: dict) -> int:
        try:
            return int(data.get("year") or now_local().year)
        except (TypeError, ValueError):
            raise ValidationError("Año no válido")

    @app.route("/api/extra-days", methods=["GET"], endpoint="my_extra_days")
    @login_required(container)
    @handle_errors("cargar los días extra")
    def my_extra_days():
        year = int_arg("year", now_local().year)
        actor = current_actor(container)

        guard = DefaultingGuard(session.get(GUARD_SESSION_KEY, []))
        outcome = container.default_choice_service.apply_defaults(actor=actor, year=year, guard=guard)
        if outcome.saved:
            session[GUARD_SESSION_KEY] = guard.to_list()

        mine = container.extra_days_service.get_my_extra_days(actor=actor, year=year)
        return json_ok(
            year=mine.year,
            options=[option_dict(o) for o in mine.options],
            holiday_label=mine.holiday_label,
            birthday_date=mine.birthday_date.isoformat() if mine.birthday_date else None,
            defaults_saved=outcome.saved,
        )

    @app.route("/api/extra-days/holiday-choice", methods=["PUT"], endpoint="save_holiday_choice")
    @login_required(container)
    @handle_errors("guardar la semana de Navidad")
    def save_holiday_choice():
        data = json_body()
        container.extra_days_service.save_holiday_choice(
            actor=current_actor(container),
            year=_year_from_body(data),
            option_label=data.get("option_label", ""),
        )
        return json_ok("Semana de Navidad guardada")

    @app.route("/api/extra-days/birthday", methods=["PUT"], endpoint="save_birthday_day")
    @login_required(container)
    @handle_errors("guardar el día de cumpleaños")
    def save_birthday_day():
        data = json_body()
        container.extra_days_service.save_birthday_day(
            actor=current_actor(container),
            year=_year_from_body(data),
            selected_date=date_field(data, "selected_date"),
        )
        return json_ok("Día de cumpleaños guardado")

    @app.route("/api/admin/holiday-options", methods=["GET"], endpoint="admin_holiday_options")
    @admin_required(container)
    @handle_errors("cargar las opciones")
    def admin_holiday_options():
        options = container.extra_days_service.list_all_options(actor=current_actor(container))
        return json_ok(options=[option_dict(o) for o in options])

    @app.route("/api/admin/holiday-options", methods=["POST"], endpoint="admin_create_holiday_option")
    @admin_required(container)
    @handle_errors("crear la opción")
    def admin_create_holiday_option():
        data = json_body()
        start_date = date_field(data, "start_date")
        end_date = date_field(data, "end_date")
        if start_date is None or end_date is None:
            raise ValidationError("Selecciona un rango de fechas")

        option_id = container.extra_days_service.create_option(
            actor=current_actor(container),
            year=_year_from_body(data),
            option_label=data.get("option_label", ""),
            start_date=start_date,
            end_date=end_date,
        )
        return json_ok("Opción creada", 201, id=option_id)

    @app.route("/api/admin/holiday-options/<option_id>", methods=["PUT"], endpoint="admin_update_holiday_option")
    @admin_required(container)
    @handle_errors("actualizar la opción")
    def admin_update_holiday_option(option_id: str):
        data = json_body()
        option = container.extra_days_service.update_option(
            actor=current_actor(container),
            option_id=option_id,
            start_date=date_field(data, "start_date"),
            end_date=date_field(data, "end_date"),
        )
        return json_ok("Opción actualizada", option=option_dict(option))
