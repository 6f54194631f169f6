"""Per-map orchestration.

:func:`build_map_view` runs the whole pipeline for one map: select the map's
starting snapshot and POIs, resolve ownership from the full event log, build
the render grid and the legend. :func:`build_map_views` does the same for
every configured map. Maps share no mutable state, so they are computed
independently.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap

from frontlines_map.config import DEFAULT_CONFIG, CampaignConfig
from frontlines_map.renderer.grid import RenderGrid, build_render_grid
from frontlines_map.renderer.legend import LegendEntry, build_legend
from frontlines_map.resolver import resolve_ownership
from frontlines_map.state import OwnershipState
from frontlines_map.tables import (
    CampaignTables,
    player_colors,
    poi_lookup,
    starting_owners,
)
from frontlines_map.types import MapID


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MapView:
    """Everything an external renderer needs for one map.

    Attributes:
        map_id: Map identifier.
        title: Display title.
        ownership: Resolved ownership state.
        grid: ``grid[row][col]`` cell descriptors.
        legend: Sorted legend entries.
    """

    map_id: MapID
    title: str
    ownership: OwnershipState
    grid: RenderGrid
    legend: Tuple[LegendEntry, ...]


def build_map_view(
    tables: CampaignTables,
    map_id: MapID,
    config: CampaignConfig = DEFAULT_CONFIG,
) -> MapView:
    colors = player_colors(tables.roster)
    ownership = resolve_ownership(
        starting_owners(tables.starting_territories, map_id),
        tables.match_results,
        map_id,
        recent_window=config.display.highlight_recent_count,
        grid=config.grid,
    )
    grid = build_render_grid(
        ownership,
        poi_lookup(tables.pois, map_id),
        colors,
        config,
    )
    legend = build_legend(tables.roster, map_id, config, colors=colors)
    logger.info(
        "Built %s view: %d owned territories, %d recent, %d legend entries",
        map_id,
        len(ownership.owners),
        len(ownership.recent_changes),
        len(legend),
    )
    return MapView(
        map_id=map_id,
        title=config.map_title(map_id),
        ownership=ownership,
        grid=grid,
        legend=legend,
    )


def build_map_views(
    tables: CampaignTables, config: CampaignConfig = DEFAULT_CONFIG
) -> PMap[MapID, MapView]:
    return pmap({map_id: build_map_view(tables, map_id, config) for map_id in config.maps})
