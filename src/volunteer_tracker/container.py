from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_status_repository import MySQLStatusRepository
from .attendance.repository import StatusRepository
from .attendance.service import AttendanceService
from .checkin.service import CheckInService
from .database.connection import DBConfig, DatabaseConnection
from .game_dates.mysql_game_date_repository import MySQLGameDateRepository
from .game_dates.repository import GameDateRepository
from .volunteers.mysql_volunteer_repository import MySQLVolunteerRepository
from .volunteers.repository import VolunteerRepository


@dataclass(frozen=True)
class Container:
    volunteers_repo: VolunteerRepository
    game_dates_repo: GameDateRepository
    statuses_repo: StatusRepository

    attendance_service: AttendanceService
    checkin_service: CheckInService


def wire(
    *,
    volunteers_repo: VolunteerRepository,
    game_dates_repo: GameDateRepository,
    statuses_repo: StatusRepository,
) -> Container:
    attendance_service = AttendanceService(volunteers_repo, game_dates_repo, statuses_repo)
    checkin_service = CheckInService(attendance_service)

    return Container(
        volunteers_repo=volunteers_repo,
        game_dates_repo=game_dates_repo,
        statuses_repo=statuses_repo,
        attendance_service=attendance_service,
        checkin_service=checkin_service,
    )


def build_container(*, db_config: dict) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)

    return wire(
        volunteers_repo=MySQLVolunteerRepository(conn),
        game_dates_repo=MySQLGameDateRepository(conn),
        statuses_repo=MySQLStatusRepository(conn),
    )
