from __future__ import annotations

from typing import Protocol, Sequence

from .model import Volunteer


class VolunteerRepository(Protocol):
    """Repository interface for volunteers.

    Note (DIP): services depend on this interface, not on a concrete DB.
    """

    def list_all(self) -> Sequence[Volunteer]:
        """All volunteers ordered by department, then last name."""

        raise NotImplementedError

    def set_active(self, volunteer_id: int, *, is_active: bool) -> bool:
        raise NotImplementedError
