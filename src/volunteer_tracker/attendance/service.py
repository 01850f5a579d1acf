from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import Any, Dict, List, Optional

from ..common.validators import require_status
from ..core.constants import ALL_DEPARTMENTS
from ..core.exceptions import NotFoundError
from ..game_dates.repository import GameDateRepository
from ..volunteers.filters import VolunteerFilter, filter_volunteers, group_by_department
from ..volunteers.model import Volunteer
from ..volunteers.repository import VolunteerRepository
from .board import AttendanceBoard
from .model import VolunteerView
from .repository import StatusRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases for the attendance overview.

    Every mutation writes to the store first and patches the board only
    once the store has accepted it; store errors propagate unchanged.

    Request threads share one service. Board swaps and each
    write-then-patch sequence run under one lock, and patches always go to
    the board that is live after the write.
    """

    def __init__(
        self,
        volunteers: VolunteerRepository,
        dates: GameDateRepository,
        statuses: StatusRepository,
    ):
        self._volunteers = volunteers
        self._dates = dates
        self._statuses = statuses
        self._board: Optional[AttendanceBoard] = None
        # Re-entrant: the lazy board load can happen inside a mutation.
        self._lock = threading.RLock()

    def load(self) -> AttendanceBoard:
        with self._lock:
            dates = self._dates.list_all()
            volunteers = self._volunteers.list_all()
            records = self._statuses.list_all()

            self._board = AttendanceBoard(volunteers, dates, records)
            logger.debug(
                "board loaded: %d volunteers, %d dates, %d status records",
                len(volunteers),
                len(dates),
                len(records),
            )
            return self._board

    @property
    def board(self) -> AttendanceBoard:
        board = self._board
        if board is None:
            with self._lock:
                if self._board is None:
                    return self.load()
                return self._board
        return board

    def view_for(self, volunteer_id: int) -> VolunteerView:
        return self.board.get_view(volunteer_id)

    def departments(self) -> List[str]:
        return list(group_by_department(self.board.volunteers))

    def filter_views(
        self,
        *,
        search_text: str = "",
        department: str = ALL_DEPARTMENTS,
        include_inactive: bool = False,
    ) -> List[VolunteerView]:
        criteria = VolunteerFilter(
            search_text=search_text or "",
            department=department or ALL_DEPARTMENTS,
            include_inactive=include_inactive,
        )
        board = self.board
        return [board.get_view(v.volunteer_id) for v in filter_volunteers(board.volunteers, criteria)]

    def views_by_department(self, **criteria) -> Dict[str, List[VolunteerView]]:
        return group_by_department(self.filter_views(**criteria), volunteer_of=lambda view: view.volunteer)

    def set_status(self, volunteer_id: int, date_id: int, status: Any) -> VolunteerView:
        status = require_status(status)
        with self._lock:
            self.board.get_view(volunteer_id)
            self.board.get_date(date_id)

            stored = self._statuses.upsert(volunteer_id=int(volunteer_id), date_id=int(date_id), status=status)
            self._warn_on_drift(volunteer_id, date_id, stored)

            view = self.board.apply_status(volunteer_id, date_id, status)
        logger.info("status set: volunteer=%s date=%s status=%s", volunteer_id, date_id, status.value)
        return view

    def clear_status(self, volunteer_id: int, date_id: int) -> VolunteerView:
        with self._lock:
            self.board.get_view(volunteer_id)
            self.board.get_date(date_id)

            removed = self._statuses.delete(volunteer_id=int(volunteer_id), date_id=int(date_id))
            self._warn_on_drift(volunteer_id, date_id, removed)

            view = self.board.apply_clear(volunteer_id, date_id)
        if removed is not None:
            logger.info("status cleared: volunteer=%s date=%s", volunteer_id, date_id)
        return view

    def toggle_active(self, volunteer_id: int) -> Volunteer:
        with self._lock:
            volunteer = self.board.get_view(volunteer_id).volunteer
            is_active = not volunteer.is_active

            if not self._volunteers.set_active(volunteer.volunteer_id, is_active=is_active):
                raise NotFoundError(f"Volunteer {volunteer_id} not found")

            updated = replace(self.board.get_view(volunteer_id).volunteer, is_active=is_active)
            self.board.apply_volunteer(updated)
        logger.info("volunteer %s active=%s", volunteer_id, is_active)
        return updated

    def _warn_on_drift(self, volunteer_id: int, date_id: int, stored) -> None:
        local = self.board.status_of(volunteer_id, date_id)
        if local != stored:
            logger.warning(
                "board drift for volunteer=%s date=%s: board=%s store=%s",
                volunteer_id,
                date_id,
                local.value if local else None,
                stored.value if stored else None,
            )
