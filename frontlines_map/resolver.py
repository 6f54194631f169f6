"""Ownership resolution.

Replays the match-result log over a map's starting snapshot. The exported
:func:`resolve_ownership` is pure: the snapshot is never mutated (it is
wrapped in a persistent map) and the same inputs always produce an equal
:class:`~frontlines_map.state.OwnershipState`.

Replay rules, applied to each event in log order:

1. Events for other maps are ignored.
2. Draws never change ownership.
3. The winner is the player in the winning slot. If the event has no
    resolvable winner, or its claimed territory is missing or not a valid
    label, it is skipped and does not count toward the recent window.
4. Otherwise the canonical territory is assigned to the winner and appended
    to the recent-change list, which is then trimmed to its last N entries.
"""

import logging
from dataclasses import replace
from typing import Dict, Iterable, Mapping

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from frontlines_map.config import DEFAULT_CONFIG, GridConfig
from frontlines_map.coords import canonical_label
from frontlines_map.records import MatchResult
from frontlines_map.state import OwnershipState
from frontlines_map.types import MapID, MatchOutcome, PlayerName, TerritoryLabel


logger = logging.getLogger(__name__)


def resolve_ownership(
    starting_owners: Mapping[TerritoryLabel, PlayerName],
    results: Iterable[MatchResult],
    map_id: MapID,
    recent_window: int = DEFAULT_CONFIG.display.highlight_recent_count,
    grid: GridConfig = DEFAULT_CONFIG.grid,
) -> OwnershipState:
    """Compute current ownership and the recent-change window for one map.

    Args:
        starting_owners (Mapping[TerritoryLabel, PlayerName]): Starting snapshot
            for ``map_id``. Keys are canonicalized; entries whose key is not
            a valid label are dropped. Not modified.
        results (Iterable[MatchResult]): Full event log, all maps intermixed,
            in log order.
        map_id (MapID): Map to resolve.
        recent_window (int): Number of most recent claims to keep.
        grid (GridConfig): Dimensions used to validate claimed territories.

    Returns:
        OwnershipState: Resolved owners plus the bounded recent-change list.
    """
    state = OwnershipState(
        map_id=map_id, owners=canonical_owners(starting_owners, grid)
    )
    for index, result in enumerate(results):
        state = apply_match_result(state, result, recent_window, grid, index)
    return state


def canonical_owners(
    owners: Mapping[TerritoryLabel, PlayerName],
    grid: GridConfig = DEFAULT_CONFIG.grid,
) -> PMap[TerritoryLabel, PlayerName]:
    """Re-key an ownership snapshot by canonical label."""
    result: Dict[TerritoryLabel, PlayerName] = {}
    for label, owner in owners.items():
        territory = canonical_label(label, grid)
        if territory is None:
            logger.debug("Starting owner %r skipped: invalid territory %r", owner, label)
            continue
        result[territory] = owner
    return pmap(result)


def apply_match_result(
    state: OwnershipState,
    result: MatchResult,
    recent_window: int = DEFAULT_CONFIG.display.highlight_recent_count,
    grid: GridConfig = DEFAULT_CONFIG.grid,
    index: int = -1,
) -> OwnershipState:
    """Fold a single event into ``state``; returns ``state`` unchanged if skipped."""
    if result.map_id != state.map_id:
        return state
    if result.outcome == MatchOutcome.DRAW:
        return state

    winner = result.winner
    if winner is None:
        logger.debug("Event %d skipped: no resolvable winner", index)
        return state

    if not str(result.claimed_territory or "").strip():
        logger.debug("Event %d skipped: no claimed territory", index)
        return state
    territory = canonical_label(result.claimed_territory, grid)
    if territory is None:
        logger.debug(
            "Event %d skipped: invalid territory %r", index, result.claimed_territory
        )
        return state

    return replace(
        state,
        owners=state.owners.set(territory, winner),
        recent_changes=trim_recent_changes(
            state.recent_changes.append(territory), recent_window
        ),
    )


def trim_recent_changes(
    changes: Iterable[TerritoryLabel], window: int
) -> PVector[TerritoryLabel]:
    """Keep the last ``window`` entries, preserving order."""
    if window <= 0:
        return pvector()
    return pvector(changes)[-window:]
