from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import GameDate
from .repository import GameDateRepository


class MySQLGameDateRepository(GameDateRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[GameDate]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT date_id, game_date, is_active FROM game_dates ORDER BY game_date ASC")
            return [
                GameDate(
                    date_id=int(r["date_id"]),
                    game_date=r["game_date"],
                    is_active=bool(r.get("is_active", True)),
                )
                for r in fetchall(cur)
            ]
