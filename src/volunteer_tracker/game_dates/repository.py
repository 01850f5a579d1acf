from __future__ import annotations

from typing import Protocol, Sequence

from .model import GameDate


class GameDateRepository(Protocol):
    """Game dates are managed outside this app; read-only here."""

    def list_all(self) -> Sequence[GameDate]:
        """All game dates ordered by date ascending."""

        raise NotImplementedError
