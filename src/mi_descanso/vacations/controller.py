from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import now_local
from ..common.web import current_actor, date_field, handle_errors, int_arg, json_body, json_ok, login_required
from ..container import Container
from .model import Balance, VacationRequest


def request_dict(req: VacationRequest) -> dict:
    return {
        "id": req.request_id,
        "user_id": req.user_id,
        "start_date": req.start_date.isoformat(),
        "end_date": req.end_date.isoformat(),
        "type": req.vacation_type.value,
        "status": req.status.value,
        "days_count": req.days_count,
        "created_at": req.created_at.isoformat() if req.created_at else None,
        "deletable": not req.is_synthetic,
    }


def balance_dict(balance: Balance) -> dict:
    return {
        "year": balance.year,
        "base_days": balance.base_days,
        "used_days": balance.used_days,
        "remaining_days": balance.remaining_days,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/vacations", methods=["GET"], endpoint="my_vacations")
    @login_required(container)
    @handle_errors("cargar las vacaciones")
    def my_vacations():
        year = int_arg("year", now_local().year)
        actor = current_actor(container)
        requests = container.vacation_service.list_my_requests(actor=actor, year=year)
        balance = container.vacation_service.balance_for_year(actor=actor, year=year)
        return json_ok(requests=[request_dict(r) for r in requests], balance=balance_dict(balance))

    @app.route("/api/vacations/balance", methods=["GET"], endpoint="my_balance")
    @login_required(container)
    @handle_errors("calcular el saldo")
    def my_balance():
        year = int_arg("year", now_local().year)
        balance = container.vacation_service.balance_for_year(actor=current_actor(container), year=year)
        return json_ok(balance=balance_dict(balance))

    @app.route("/api/vacations", methods=["POST"], endpoint="create_vacation")
    @login_required(container)
    @handle_errors("crear la solicitud")
    def create_vacation():
        data = json_body()
        request_id = container.vacation_service.create_regular(
            actor=current_actor(container),
            start_date=date_field(data, "start_date"),
            end_date=date_field(data, "end_date"),
        )
        return json_ok("Vacaciones registradas", 201, id=request_id)

    @app.route("/api/vacations/<request_id>", methods=["DELETE"], endpoint="delete_vacation")
    @login_required(container)
    @handle_errors("eliminar la solicitud")
    def delete_vacation(request_id: str):
        container.vacation_service.delete_request(actor=current_actor(container), request_id=request_id)
        return json_ok("Solicitud eliminada")
