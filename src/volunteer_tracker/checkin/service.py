from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional

from ..attendance.model import VolunteerView
from ..attendance.service import AttendanceService
from ..common.datetime_utils import today_local
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_SUGGESTION_LIMIT
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from ..game_dates.model import GameDate
from ..game_dates.service import pick_current_game_date
from ..volunteers.filters import group_by_department
from ..volunteers.model import Volunteer

# Statuses that put a volunteer on the check-in desk roster.
ROSTER_STATUSES = (AttendanceStatus.SCHEDULED, AttendanceStatus.PRESENT)


@dataclass(frozen=True)
class RosterEntry:
    volunteer: Volunteer
    status: AttendanceStatus


class CheckInService:
    """Use case: the front desk marking volunteers present on game day."""

    def __init__(self, attendance: AttendanceService, *, suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT):
        self._attendance = attendance
        self._suggestion_limit = int(suggestion_limit)

    def current_game_date(self, *, today: Optional[date] = None) -> Optional[GameDate]:
        return pick_current_game_date(self._attendance.board.dates, today or today_local())

    def _active_volunteers(self) -> List[Volunteer]:
        active = [v for v in self._attendance.board.volunteers if v.is_active]
        return sorted(active, key=lambda v: v.first_name.lower())

    def suggest(self, query: str, *, limit: Optional[int] = None) -> List[Volunteer]:
        if not query:
            return []
        needle = query.lower()
        matches = [v for v in self._active_volunteers() if needle in v.full_name.lower()]
        return matches[: limit if limit is not None else self._suggestion_limit]

    def find_by_full_name(self, full_name: str) -> Volunteer:
        name = require_non_empty(full_name, "Volunteer name").lower()
        for v in self._active_volunteers():
            if v.full_name.lower() == name:
                return v
        raise NotFoundError("Volunteer not found. Please select a volunteer from the suggestions.")

    def mark_present(
        self,
        full_name: str,
        *,
        date_id: Optional[int] = None,
        today: Optional[date] = None,
    ) -> VolunteerView:
        volunteer = self.find_by_full_name(full_name)

        if date_id is None:
            current = self.current_game_date(today=today)
            if current is None:
                raise NotFoundError("No game dates found")
            date_id = current.date_id

        return self._attendance.set_status(volunteer.volunteer_id, date_id, AttendanceStatus.PRESENT)

    def roster(self, date_id: int) -> Dict[str, List[RosterEntry]]:
        board = self._attendance.board
        date_id = board.get_date(date_id).date_id

        entries: List[RosterEntry] = []
        for v in self._active_volunteers():
            status = board.status_of(v.volunteer_id, date_id)
            if status in ROSTER_STATUSES:
                entries.append(RosterEntry(volunteer=v, status=status))
        return group_by_department(entries, volunteer_of=lambda e: e.volunteer)
