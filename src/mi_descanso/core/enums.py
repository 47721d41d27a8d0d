from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Application role stored next to each profile."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class VacationType(str, Enum):
    REGULAR = "regular"
    BIRTHDAY = "birthday"
    HOLIDAY = "holiday"
    CHRISTMAS = "christmas"


class VacationStatus(str, Enum):
    """Request status.

    Requests are written as APPROVED on creation; PENDING and REJECTED are
    never produced by any flow in this application.
    """

    APPROVED = "approved"
    PENDING = "pending"
    REJECTED = "rejected"
