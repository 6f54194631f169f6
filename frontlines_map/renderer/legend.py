"""Player legend and roster grouping.

The legend for a map lists every roster player affiliated with that map or
with every map, sorted by name. Names are compared with the Unicode Collation
Algorithm (root collation), so ``"Émile"`` sorts between ``"Bob"`` and
``"Zed"`` and ``"alice"`` sorts just before ``"Alice"``.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap
from pyuca import Collator

from frontlines_map.colors import darken
from frontlines_map.config import DEFAULT_CONFIG, CampaignConfig
from frontlines_map.records import Player
from frontlines_map.tables import player_affiliations, player_colors
from frontlines_map.types import MapID, PlayerName


_COLLATOR = Collator()


@dataclass(frozen=True)
class LegendEntry:
    """One legend row.

    Attributes:
        name: Player name.
        color: Swatch color (neutral when the player has no valid color).
        border_color: Swatch border, a darker shade of ``color``.
    """

    name: PlayerName
    color: str
    border_color: str


def legend_sort_key(name: PlayerName) -> Tuple[Tuple[int, ...], str]:
    # Raw name breaks ties between names that collate equal.
    return (_COLLATOR.sort_key(name), name)


def is_on_map(
    affiliation: str, map_id: MapID, config: CampaignConfig = DEFAULT_CONFIG
) -> bool:
    return affiliation == map_id or affiliation == config.both_maps


def build_legend(
    roster: Iterable[Player],
    map_id: MapID,
    config: CampaignConfig = DEFAULT_CONFIG,
    colors: Optional[Mapping[PlayerName, str]] = None,
) -> Tuple[LegendEntry, ...]:
    """Filter the roster to ``map_id`` and sort by name.

    Duplicate names collapse to one entry; the last roster row wins.
    ``colors`` is the validated color lookup for ``roster``; it is built
    here when not supplied.
    """
    roster = list(roster)
    if colors is None:
        colors = player_colors(roster)
    affiliations = player_affiliations(roster)
    names = sorted(
        (
            name
            for name, affiliation in affiliations.items()
            if is_on_map(affiliation, map_id, config)
        ),
        key=legend_sort_key,
    )
    entries: List[LegendEntry] = []
    for name in names:
        color = colors.get(name, config.display.neutral_color)
        entries.append(LegendEntry(name=name, color=color, border_color=darken(color)))
    return tuple(entries)


def summarize_roster(
    roster: Iterable[Player], config: CampaignConfig = DEFAULT_CONFIG
) -> PMap[str, Tuple[PlayerName, ...]]:
    """Group player names by affiliation, in roster order.

    Keys are the configured map ids followed by the "both" sentinel. Players
    with any other affiliation are left out.
    """
    groups: Dict[str, List[PlayerName]] = {
        key: [] for key in (*config.maps, config.both_maps)
    }
    # Roster order; a later duplicate row overrides the affiliation.
    latest: Dict[PlayerName, str] = {}
    for player in roster:
        latest[player.name] = player.affiliation
    for name, affiliation in latest.items():
        if affiliation in groups:
            groups[affiliation].append(name)
    return pmap({key: tuple(names) for key, names in groups.items()})
