"""Typed input records.

One frozen dataclass per input table row. Records are produced by
:mod:`frontlines_map.tables` from raw rows, or built directly by callers
that already hold structured data. Territory fields hold canonical labels
once they have gone through ingestion; match results keep the raw claimed
territory because the resolver canonicalizes it itself.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from frontlines_map.types import MapID, MatchOutcome, PlayerName, TerritoryLabel


@dataclass(frozen=True)
class Player:
    """Roster entry.

    Attributes:
        name: Identity key; compared verbatim (no case folding).
        color: Display color, expected as ``#RRGGBB``.
        affiliation: A map id or the configured "both" sentinel.
    """

    name: PlayerName
    color: str
    affiliation: str


@dataclass(frozen=True)
class PointOfInterest:
    territory: TerritoryLabel
    map_id: MapID
    name: str


@dataclass(frozen=True)
class StartingClaim:
    """Initial owner of a territory on one map."""

    territory: TerritoryLabel
    owner: PlayerName
    map_id: MapID


@dataclass(frozen=True)
class MatchResult:
    """One entry of the match-result event log.

    Log position is the only ordering signal; ``date`` is carried for the
    host's benefit and never compared.

    Attributes:
        player1: Name in the first slot.
        player2: Name in the second slot.
        outcome: Parsed outcome, or ``None`` if the table value was unknown.
        map_id: Map the match was played on.
        claimed_territory: Raw claimed territory (may be empty for draws).
        date: Opaque date cell.
        extras: Remaining columns (glory, exploration, mission), unused here.
    """

    player1: PlayerName
    player2: PlayerName
    outcome: Optional[MatchOutcome]
    map_id: MapID
    claimed_territory: str = ""
    date: Any = None
    extras: Tuple[Any, ...] = field(default=())

    @property
    def winner(self) -> Optional[PlayerName]:
        """Name in the winning slot, or ``None`` for draws / unknown outcomes."""
        if self.outcome == MatchOutcome.P1_WIN:
            return self.player1 or None
        if self.outcome == MatchOutcome.P2_WIN:
            return self.player2 or None
        return None
