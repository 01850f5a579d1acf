from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status values stored in volunteer_date_status.status."""

    SCHEDULED = "scheduled"
    PRESENT = "present"
    ABSENT = "absent"
