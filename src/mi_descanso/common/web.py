"""Flask glue shared by the JSON controllers."""
from __future__ import annotations

import logging
from datetime import date
from functools import wraps
from typing import Any, Callable, Optional

from flask import g, jsonify, request, session

from ..core.exceptions import AuthenticationError, AuthorizationError, InsufficientBalance, ValidationError
from ..users.model import SessionUser
from .datetime_utils import parse_optional_date

logger = logging.getLogger(__name__)


def json_ok(message: str = "", status: int = 200, **payload: Any):
    body = {"success": True, "message": message}
    body.update(payload)
    return jsonify(body), status


def json_error(message: str, status: int = 400, **payload: Any):
    body = {"success": False, "message": message}
    body.update(payload)
    return jsonify(body), status


def current_actor(container) -> Optional[SessionUser]:
    """Identity of the logged-in user, resolved once per request."""
    if "actor" not in g:
        g.actor = container.auth_service.resolve(session.get("user_id"))
    return g.actor


def login_required(container) -> Callable:
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if current_actor(container) is None:
                session.clear()
                return json_error("Inicia sesión para continuar", 401)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def admin_required(container) -> Callable:
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            actor = current_actor(container)
            if actor is None:
                return json_error("Inicia sesión para continuar", 401)
            if not actor.is_admin:
                return json_error("No tienes permisos de administrador", 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def handle_errors(action: str) -> Callable:
    """Map domain errors to JSON responses; anything else is a 500."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except InsufficientBalance as e:
                return json_error(str(e), 400, remaining=e.remaining)
            except ValidationError as e:
                return json_error(str(e), 400)
            except AuthenticationError as e:
                return json_error(str(e), 401)
            except AuthorizationError as e:
                return json_error(str(e), 403)
            except Exception:
                logger.exception("unexpected error while trying to %s", action)
                return json_error(f"Error del sistema al {action}", 500)

        return wrapper

    return decorator


def json_body() -> dict:
    return request.get_json(silent=True) or {}


def date_field(data: dict, key: str) -> Optional[date]:
    try:
        return parse_optional_date(data.get(key))
    except (TypeError, ValueError):
        raise ValidationError(f"Fecha no válida: {key}")


def int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw in (None, ""):
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"Parámetro no válido: {name}")
