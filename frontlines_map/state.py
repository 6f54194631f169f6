"""Immutable per-map ownership state.

:class:`OwnershipState` is the value the resolver folds match results into.
It is rebuilt from the starting snapshot and the full event log on every
request; nothing carries over between recomputations.

Design notes:

* ``owners`` is a persistent map keyed by canonical territory label. Absence
    of a key means the territory is neutral.
* ``recent_changes`` keeps one entry per ownership-changing event in log
    order, bounded to the configured window. Entries are not deduplicated, so
    a territory claimed twice inside the window appears twice.
"""

from dataclasses import dataclass
from typing import Optional

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from frontlines_map.types import MapID, PlayerName, TerritoryLabel


@dataclass(frozen=True)
class OwnershipState:
    """Resolved ownership for one map.

    Attributes:
        map_id (MapID): Map this state belongs to.
        owners (PMap[TerritoryLabel, PlayerName]): Current owner per territory.
        recent_changes (PVector[TerritoryLabel]): Last N claimed territories,
            oldest first.
    """

    map_id: MapID
    owners: PMap[TerritoryLabel, PlayerName] = pmap()
    recent_changes: PVector[TerritoryLabel] = pvector()

    def owner_of(self, territory: TerritoryLabel) -> Optional[PlayerName]:
        return self.owners.get(territory)

    def is_recent(self, territory: TerritoryLabel) -> bool:
        return territory in self.recent_changes
