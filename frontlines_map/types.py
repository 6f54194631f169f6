"""Common type aliases and enumerations.

Territory labels, player names and map ids are all plain strings; the aliases
exist so signatures say which kind of string they expect. ``MatchOutcome``
values are the literal strings used in the match-result table.
"""

from enum import StrEnum, auto
from typing import Tuple


TerritoryLabel = str
PlayerName = str
MapID = str

RGB = Tuple[int, int, int]


class MatchOutcome(StrEnum):
    """Result of a single match as recorded in the event log."""

    P1_WIN = "P1 Win"
    P2_WIN = "P2 Win"
    DRAW = "Draw"


class BorderTier(StrEnum):
    """Border emphasis tiers, highest priority first.

    Members:
        RECENT: Territory changed hands within the recent-change window.
        OWNED: Territory has an owner (border is a darker shade of its fill).
        UNCLAIMED: Neutral territory.
    """

    RECENT = auto()
    OWNED = auto()
    UNCLAIMED = auto()
