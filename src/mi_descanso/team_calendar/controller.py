from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import now_local
from ..common.web import handle_errors, int_arg, json_ok, login_required
from ..container import Container
from ..core.constants import MAX_VISIBLE_ENTRIES
from .service import serialize_overlay


def register(app: Flask, container: Container) -> None:
    @app.route("/api/calendar", methods=["GET"], endpoint="team_calendar")
    @login_required(container)
    @handle_errors("cargar el calendario")
    def team_calendar():
        today = now_local()
        year = int_arg("year", today.year)
        month = int_arg("month", today.month)
        limit = int_arg("limit", MAX_VISIBLE_ENTRIES)

        overlay = container.team_calendar_service.month_view(year=year, month=month)
        return json_ok(calendar=serialize_overlay(overlay, limit=limit if limit > 0 else None))
