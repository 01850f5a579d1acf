from __future__ import annotations

import math
from typing import Optional

from ..core.enums import AttendanceStatus
from ..game_dates.model import GameDate
from ..volunteers.model import Volunteer
from .model import VolunteerView


def status_value(status: Optional[AttendanceStatus]) -> Optional[str]:
    return status.value if status else None


def volunteer_to_dict(v: Volunteer) -> dict:
    return {
        "volunteer_id": v.volunteer_id,
        "first_name": v.first_name,
        "last_name": v.last_name,
        "full_name": v.full_name,
        "department": v.department_key,
        "is_active": v.is_active,
    }


def game_date_to_dict(d: GameDate) -> dict:
    return {
        "date_id": d.date_id,
        "date": d.game_date.strftime("%Y-%m-%d"),
        "label": f"{d.game_date:%b} {d.game_date.day}",
        "is_active": d.is_active,
    }


def view_to_dict(view: VolunteerView) -> dict:
    summary = view.summary.as_dict()
    summary["attendance_rate_label"] = rate_label(view.summary.attendance_rate)
    return {
        **volunteer_to_dict(view.volunteer),
        "statuses": {str(date_id): status_value(s) for date_id, s in view.statuses.items()},
        "summary": summary,
    }


def rate_label(rate: float) -> str:
    """Whole-percent label, halves rounded up (12.5 -> "13%")."""

    return f"{math.floor(rate + 0.5)}%"
