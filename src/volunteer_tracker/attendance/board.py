from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from ..game_dates.model import GameDate
from ..volunteers.model import Volunteer
from .model import StatusRecord, StatusSummary, VolunteerView


def index_statuses(records: Iterable[StatusRecord]) -> Dict[Tuple[int, int], AttendanceStatus]:
    """(volunteer_id, date_id) -> status lookup.

    The store keeps one record per pair; if a duplicate slips through the
    last one read wins, so map and summary still agree.
    """

    return {(r.volunteer_id, r.date_id): r.status for r in records}


def summarize(statuses: Iterable[AttendanceStatus]) -> StatusSummary:
    summary = StatusSummary()
    for status in statuses:
        summary = summary.adding(status)
    return summary


def build_views(
    volunteers: Iterable[Volunteer],
    dates: Sequence[GameDate],
    records: Iterable[StatusRecord],
) -> Dict[int, VolunteerView]:
    """Join volunteers with their per-date statuses and summaries.

    Every date id appears in every status map, unset dates map to None.
    The result keeps the volunteers' input order.
    """

    index = index_statuses(records)

    by_volunteer: Dict[int, List[AttendanceStatus]] = {}
    for (volunteer_id, _), status in index.items():
        by_volunteer.setdefault(volunteer_id, []).append(status)

    views: Dict[int, VolunteerView] = {}
    for v in volunteers:
        statuses = {d.date_id: index.get((v.volunteer_id, d.date_id)) for d in dates}
        views[v.volunteer_id] = VolunteerView(
            volunteer=v,
            statuses=statuses,
            summary=summarize(by_volunteer.get(v.volunteer_id, [])),
        )
    return views


class AttendanceBoard:
    """In-memory snapshot of volunteers, game dates and their statuses.

    Only the attendance service patches it, and only after the store has
    confirmed the write. Views are immutable; a patch swaps in a new view.
    """

    def __init__(
        self,
        volunteers: Iterable[Volunteer],
        dates: Iterable[GameDate],
        records: Iterable[StatusRecord],
    ):
        self._dates: List[GameDate] = list(dates)
        self._dates_by_id = {d.date_id: d for d in self._dates}
        self._views = build_views(volunteers, self._dates, records)

    @property
    def dates(self) -> List[GameDate]:
        return list(self._dates)

    @property
    def views(self) -> List[VolunteerView]:
        return list(self._views.values())

    @property
    def volunteers(self) -> List[Volunteer]:
        return [view.volunteer for view in self._views.values()]

    def get_view(self, volunteer_id: int) -> VolunteerView:
        view = self._views.get(int(volunteer_id))
        if view is None:
            raise NotFoundError(f"Volunteer {volunteer_id} not found")
        return view

    def get_date(self, date_id: int) -> GameDate:
        game_date = self._dates_by_id.get(int(date_id))
        if game_date is None:
            raise NotFoundError(f"Game date {date_id} not found")
        return game_date

    def status_of(self, volunteer_id: int, date_id: int) -> Optional[AttendanceStatus]:
        return self.get_view(volunteer_id).status_on(int(date_id))

    def apply_status(self, volunteer_id: int, date_id: int, status: AttendanceStatus) -> VolunteerView:
        view = self.get_view(volunteer_id)
        date_id = self.get_date(date_id).date_id
        previous = view.status_on(date_id)

        summary = view.summary
        if previous != status:
            if previous is not None:
                summary = summary.removing(previous)
            summary = summary.adding(status)

        return self._swap(replace(view, statuses={**view.statuses, date_id: status}, summary=summary))

    def apply_clear(self, volunteer_id: int, date_id: int) -> VolunteerView:
        view = self.get_view(volunteer_id)
        date_id = self.get_date(date_id).date_id
        previous = view.status_on(date_id)
        if previous is None:
            return view

        return self._swap(
            replace(
                view,
                statuses={**view.statuses, date_id: None},
                summary=view.summary.removing(previous),
            )
        )

    def apply_volunteer(self, volunteer: Volunteer) -> VolunteerView:
        view = self.get_view(volunteer.volunteer_id)
        return self._swap(replace(view, volunteer=volunteer))

    def _swap(self, view: VolunteerView) -> VolunteerView:
        self._views[view.volunteer_id] = view
        return view
