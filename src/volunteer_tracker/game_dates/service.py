from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from .model import GameDate


def pick_current_game_date(dates: Iterable[GameDate], today: date) -> Optional[GameDate]:
    """Choose the game date the check-in desk works on.

    Active dates only: today's date if there is one, otherwise the nearest
    upcoming date, otherwise the most recent past date.
    """

    active = [d for d in dates if d.is_active]

    for d in active:
        if d.game_date == today:
            return d

    upcoming = [d for d in active if d.game_date > today]
    if upcoming:
        return min(upcoming, key=lambda d: d.game_date)

    past = [d for d in active if d.game_date < today]
    if past:
        return max(past, key=lambda d: d.game_date)
    return None
