from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import UNASSIGNED_DEPARTMENT, UNSET_DEPARTMENT_TAGS


@dataclass(frozen=True)
class Volunteer:
    """Domain entity: a volunteer.

    Note: plain data object (no DB access code).
    """

    volunteer_id: int
    first_name: str
    last_name: str
    department: Optional[str] = None
    is_active: bool = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def department_key(self) -> str:
        """Department used for grouping; unset departments share one bucket."""

        dept = (self.department or "").strip()
        if dept.lower() in UNSET_DEPARTMENT_TAGS:
            return UNASSIGNED_DEPARTMENT
        return dept
