from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import StatusRecord
from .repository import StatusRepository


class MySQLStatusRepository(StatusRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[StatusRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT volunteer_id, date_id, status FROM volunteer_date_status")
            return [
                StatusRecord(
                    volunteer_id=int(r["volunteer_id"]),
                    date_id=int(r["date_id"]),
                    status=AttendanceStatus(r["status"]),
                )
                for r in fetchall(cur)
            ]

    @staticmethod
    def _lock_existing(cur, *, volunteer_id: int, date_id: int) -> Optional[AttendanceStatus]:
        cur.execute(
            """
            SELECT status
            FROM volunteer_date_status
            WHERE volunteer_id=%s AND date_id=%s
            FOR UPDATE
            """,
            (int(volunteer_id), int(date_id)),
        )
        r = fetchone(cur)
        return AttendanceStatus(r["status"]) if r else None

    def upsert(self, *, volunteer_id: int, date_id: int, status: AttendanceStatus) -> Optional[AttendanceStatus]:
        with db_cursor(self._conn_factory) as (_, cur):
            previous = self._lock_existing(cur, volunteer_id=volunteer_id, date_id=date_id)

            # The unique key on (volunteer_id, date_id) turns a racing insert into an update.
            cur.execute(
                """
                INSERT INTO volunteer_date_status(volunteer_id, date_id, status)
                VALUES(%s,%s,%s) AS new
                ON DUPLICATE KEY UPDATE status=new.status
                """,
                (int(volunteer_id), int(date_id), status.value),
            )
            return previous

    def delete(self, *, volunteer_id: int, date_id: int) -> Optional[AttendanceStatus]:
        with db_cursor(self._conn_factory) as (_, cur):
            removed = self._lock_existing(cur, volunteer_id=volunteer_id, date_id=date_id)
            if removed is None:
                return None

            cur.execute(
                "DELETE FROM volunteer_date_status WHERE volunteer_id=%s AND date_id=%s",
                (int(volunteer_id), int(date_id)),
            )
            return removed
