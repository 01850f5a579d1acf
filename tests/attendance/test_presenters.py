from __future__ import annotations

import pytest

from volunteer_tracker.attendance.model import StatusSummary, VolunteerView
from volunteer_tracker.attendance.presenters import rate_label, view_to_dict
from volunteer_tracker.volunteers.model import Volunteer


@pytest.mark.parametrize(
    "summary,label",
    [
        (StatusSummary(present=1, absent=7), "13%"),
        (StatusSummary(present=5, absent=3), "63%"),
        (StatusSummary(present=1, scheduled=2), "33%"),
        (StatusSummary(present=2, absent=1), "67%"),
        (StatusSummary(), "0%"),
    ],
)
def test_rate_label_rounds_halves_up(summary, label):
    view = VolunteerView(volunteer=Volunteer(volunteer_id=1, first_name="Alex", last_name="Baker"), summary=summary)

    body = view_to_dict(view)

    assert body["summary"]["attendance_rate_label"] == label
    assert body["summary"]["attendance_rate"] == summary.attendance_rate


def test_rate_label_on_whole_numbers():
    assert rate_label(100.0) == "100%"
    assert rate_label(0.0) == "0%"
    assert rate_label(49.5) == "50%"
