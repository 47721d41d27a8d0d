from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .core.constants import BASE_DAYS_PER_YEAR
from .database.connection import DBConfig, DatabaseConnection
from .extra_days.defaults import DefaultChoiceService
from .extra_days.mysql_extra_days_repository import MySQLExtraDaysRepository
from .extra_days.repository import ExtraDaysRepository
from .extra_days.service import ExtraDaysService
from .team_calendar.service import TeamCalendarService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, NameLookup, UserService
from .vacations.mysql_vacation_repository import MySQLVacationRepository
from .vacations.repository import VacationRepository
from .vacations.service import VacationService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    vacations_repo: VacationRepository
    extra_days_repo: ExtraDaysRepository

    auth_service: AuthService
    user_service: UserService
    name_lookup: NameLookup
    vacation_service: VacationService
    extra_days_service: ExtraDaysService
    default_choice_service: DefaultChoiceService
    team_calendar_service: TeamCalendarService


def wire_container(
    *,
    users_repo: UserRepository,
    vacations_repo: VacationRepository,
    extra_days_repo: ExtraDaysRepository,
    conn: Optional[DatabaseConnection] = None,
    base_days: int = BASE_DAYS_PER_YEAR,
    admin_emails: Iterable[str] = (),
) -> Container:
    name_lookup = NameLookup(users_repo)

    return Container(
        conn=conn,
        users_repo=users_repo,
        vacations_repo=vacations_repo,
        extra_days_repo=extra_days_repo,
        auth_service=AuthService(users_repo, admin_emails=admin_emails),
        user_service=UserService(users_repo),
        name_lookup=name_lookup,
        vacation_service=VacationService(vacations_repo, extra_days_repo, base_days=base_days),
        extra_days_service=ExtraDaysService(extra_days_repo),
        default_choice_service=DefaultChoiceService(extra_days_repo),
        team_calendar_service=TeamCalendarService(vacations_repo, extra_days_repo, name_lookup),
    )


def build_container(
    *,
    db_config: dict,
    base_days: int = BASE_DAYS_PER_YEAR,
    admin_emails: Iterable[str] = (),
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire_container(
        users_repo=MySQLUserRepository(conn),
        vacations_repo=MySQLVacationRepository(conn),
        extra_days_repo=MySQLExtraDaysRepository(conn),
        conn=conn,
        base_days=base_days,
        admin_emails=admin_emails,
    )
