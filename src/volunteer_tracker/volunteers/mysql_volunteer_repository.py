from __future__ import annotations

from typing import Any, Dict, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Volunteer
from .repository import VolunteerRepository


def _row_to_volunteer(row: Dict[str, Any]) -> Volunteer:
    return Volunteer(
        volunteer_id=int(row["volunteer_id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        department=row.get("department"),
        is_active=bool(row.get("is_active", True)),
    )


class MySQLVolunteerRepository(VolunteerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Volunteer]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT volunteer_id, first_name, last_name, department, is_active
                FROM volunteers
                ORDER BY department ASC, last_name ASC
                """
            )
            return [_row_to_volunteer(r) for r in fetchall(cur)]

    def set_active(self, volunteer_id: int, *, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE volunteers SET is_active=%s WHERE volunteer_id=%s",
                (1 if is_active else 0, int(volunteer_id)),
            )
            return cur.rowcount > 0
