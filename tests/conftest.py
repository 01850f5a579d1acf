from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Optional

import pytest

from volunteer_tracker.attendance.model import StatusRecord
from volunteer_tracker.attendance.service import AttendanceService
from volunteer_tracker.container import wire
from volunteer_tracker.core.enums import AttendanceStatus
from volunteer_tracker.game_dates.model import GameDate
from volunteer_tracker.main import create_app
from volunteer_tracker.volunteers.model import Volunteer


@dataclass
class InMemoryVolunteers:
    volunteers: list[Volunteer]
    fail_with: Optional[Exception] = None

    def list_all(self):
        return list(self.volunteers)

    def set_active(self, volunteer_id: int, *, is_active: bool) -> bool:
        if self.fail_with:
            raise self.fail_with
        for i, v in enumerate(self.volunteers):
            if v.volunteer_id == volunteer_id:
                self.volunteers[i] = replace(v, is_active=is_active)
                return True
        return False


@dataclass
class InMemoryGameDates:
    dates: list[GameDate]

    def list_all(self):
        return sorted(self.dates, key=lambda d: d.game_date)


@dataclass
class InMemoryStatuses:
    by_pair: dict[tuple[int, int], AttendanceStatus] = field(default_factory=dict)
    fail_with: Optional[Exception] = None
    writes: int = 0

    def list_all(self):
        return [StatusRecord(volunteer_id=v, date_id=d, status=s) for (v, d), s in self.by_pair.items()]

    def upsert(self, *, volunteer_id: int, date_id: int, status: AttendanceStatus):
        if self.fail_with:
            raise self.fail_with
        self.writes += 1
        previous = self.by_pair.get((volunteer_id, date_id))
        self.by_pair[(volunteer_id, date_id)] = status
        return previous

    def delete(self, *, volunteer_id: int, date_id: int):
        if self.fail_with:
            raise self.fail_with
        self.writes += 1
        return self.by_pair.pop((volunteer_id, date_id), None)


@pytest.fixture
def volunteers_repo():
    # Store order: department, then last name.
    return InMemoryVolunteers(
        [
            Volunteer(volunteer_id=1, first_name="Alex", last_name="Baker", department="concessions"),
            Volunteer(volunteer_id=2, first_name="John", last_name="Doe", department="operations", is_active=False),
            Volunteer(volunteer_id=3, first_name="Joanna", last_name="Reyes", department="operations"),
            Volunteer(volunteer_id=4, first_name="Sam", last_name="Lee", department=None),
        ]
    )


@pytest.fixture
def game_dates_repo():
    return InMemoryGameDates(
        [
            GameDate(date_id=10, game_date=date(2026, 3, 7)),
            GameDate(date_id=11, game_date=date(2026, 3, 14)),
            GameDate(date_id=12, game_date=date(2026, 3, 21), is_active=False),
            GameDate(date_id=13, game_date=date(2026, 3, 28)),
        ]
    )


@pytest.fixture
def statuses_repo():
    return InMemoryStatuses(
        {
            (1, 10): AttendanceStatus.PRESENT,
            (1, 11): AttendanceStatus.ABSENT,
            (3, 10): AttendanceStatus.PRESENT,
            (3, 11): AttendanceStatus.SCHEDULED,
            (2, 10): AttendanceStatus.SCHEDULED,
        }
    )


@pytest.fixture
def attendance_service(volunteers_repo, game_dates_repo, statuses_repo):
    return AttendanceService(volunteers_repo, game_dates_repo, statuses_repo)


@pytest.fixture
def container(volunteers_repo, game_dates_repo, statuses_repo):
    return wire(
        volunteers_repo=volunteers_repo,
        game_dates_repo=game_dates_repo,
        statuses_repo=statuses_repo,
    )


@pytest.fixture
def client(container):
    app = create_app(container, settings_module="volunteer_tracker.config.testing")
    return app.test_client()
