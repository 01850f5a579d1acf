from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import StatusRecord


class StatusRepository(Protocol):
    def list_all(self) -> Sequence[StatusRecord]:
        raise NotImplementedError

    def upsert(self, *, volunteer_id: int, date_id: int, status: AttendanceStatus) -> Optional[AttendanceStatus]:
        """Create or update the record for the pair.

        Returns the status stored before the write, or None if the record was created.
        """

        raise NotImplementedError

    def delete(self, *, volunteer_id: int, date_id: int) -> Optional[AttendanceStatus]:
        """Delete the record for the pair.

        Returns the removed status, or None if there was no record.
        """

        raise NotImplementedError
