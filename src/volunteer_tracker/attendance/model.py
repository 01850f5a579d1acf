from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Mapping, Optional

from ..core.enums import AttendanceStatus
from ..volunteers.model import Volunteer


@dataclass(frozen=True)
class StatusRecord:
    """Domain entity: one row of volunteer_date_status.

    Identity is the (volunteer_id, date_id) pair.
    """

    volunteer_id: int
    date_id: int
    status: AttendanceStatus


@dataclass(frozen=True)
class StatusSummary:
    scheduled: int = 0
    present: int = 0
    absent: int = 0

    @property
    def total(self) -> int:
        return self.scheduled + self.present + self.absent

    @property
    def attendance_rate(self) -> float:
        """Percentage of assignments marked present (unrounded)."""

        total = self.total
        if total == 0:
            return 0.0
        return self.present / total * 100

    def count(self, status: AttendanceStatus) -> int:
        return getattr(self, status.value)

    def adding(self, status: AttendanceStatus) -> "StatusSummary":
        return replace(self, **{status.value: self.count(status) + 1})

    def removing(self, status: AttendanceStatus) -> "StatusSummary":
        # Floored at zero so a drifted counter never goes negative.
        return replace(self, **{status.value: max(0, self.count(status) - 1)})

    def as_dict(self) -> dict:
        return {
            "scheduled": self.scheduled,
            "present": self.present,
            "absent": self.absent,
            "total": self.total,
            "attendance_rate": self.attendance_rate,
        }


@dataclass(frozen=True)
class VolunteerView:
    """Read-model: a volunteer with a status per known game date and a summary."""

    volunteer: Volunteer
    statuses: Mapping[int, Optional[AttendanceStatus]] = field(default_factory=dict)
    summary: StatusSummary = field(default_factory=StatusSummary)

    @property
    def volunteer_id(self) -> int:
        return self.volunteer.volunteer_id

    def status_on(self, date_id: int) -> Optional[AttendanceStatus]:
        return self.statuses.get(date_id)
