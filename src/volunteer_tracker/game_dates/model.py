from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class GameDate:
    """One occasion volunteers can be scheduled for."""

    date_id: int
    game_date: date
    is_active: bool = True
