from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, TypeVar

from ..core.constants import ALL_DEPARTMENTS
from .model import Volunteer

T = TypeVar("T")


@dataclass(frozen=True)
class VolunteerFilter:
    """Search box + department selector + "show inactive" toggle."""

    search_text: str = ""
    department: str = ALL_DEPARTMENTS
    include_inactive: bool = False

    def matches_name(self, volunteer: Volunteer) -> bool:
        return self.search_text.lower() in volunteer.full_name.lower()

    def matches_department(self, volunteer: Volunteer) -> bool:
        if self.department == ALL_DEPARTMENTS:
            return True
        return self.department in (volunteer.department, volunteer.department_key)

    def matches_active(self, volunteer: Volunteer) -> bool:
        return self.include_inactive or volunteer.is_active

    def matches(self, volunteer: Volunteer) -> bool:
        return self.matches_name(volunteer) and self.matches_department(volunteer) and self.matches_active(volunteer)


def filter_volunteers(volunteers: Iterable[Volunteer], criteria: VolunteerFilter) -> List[Volunteer]:
    """Volunteers matching all criteria, in input order."""

    return [v for v in volunteers if criteria.matches(v)]


def group_by_department(
    items: Iterable[T],
    *,
    volunteer_of: Optional[Callable[[T], Volunteer]] = None,
) -> Dict[str, List[T]]:
    """Group volunteers (or objects wrapping one) by department.

    Volunteers without a department land under "unassigned". Groups keep
    first-seen order and items keep input order.
    """

    groups: Dict[str, List[T]] = {}
    for item in items:
        volunteer = volunteer_of(item) if volunteer_of else item
        groups.setdefault(volunteer.department_key, []).append(item)
    return groups
