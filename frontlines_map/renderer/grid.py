"""Render grid construction.

Combines a resolved :class:`~frontlines_map.state.OwnershipState`, the map's
POI table and the roster colors into a dense ``rows x cols`` grid of
:class:`CellDescriptor` values. Layering rules:

* Fill color always reflects ownership: the owner's roster color, or the
    neutral color for unowned cells and for owners missing from the roster.
* A POI cell shows the POI glyph whatever its ownership; other cells are
    blank. POI marking and ownership coloring are independent.
* Border emphasis has three exclusive tiers: a recent change (thick, fixed
    emphasis color) beats an owned cell (a darker shade of its own fill),
    which beats an unclaimed cell (fixed neutral border).
"""

from dataclasses import dataclass
from typing import Iterator, Mapping, Optional, Tuple

from frontlines_map.colors import darken, is_hex_color
from frontlines_map.config import DEFAULT_CONFIG, CampaignConfig
from frontlines_map.coords import Coordinate, from_label, to_label
from frontlines_map.state import OwnershipState
from frontlines_map.types import BorderTier, PlayerName, TerritoryLabel


@dataclass(frozen=True)
class Border:
    tier: BorderTier
    color: str
    thick: bool = False


@dataclass(frozen=True)
class CellDescriptor:
    """Visual description of one territory.

    Attributes:
        territory: Canonical label.
        coordinate: Grid position.
        owner: Resolved owner or ``None`` when neutral.
        poi_name: Point of interest name or ``None``.
        is_recent: True if the territory is in the recent-change window.
        color: Fill color.
        symbol: POI glyph or an empty string.
        note: Tooltip text (empty for neutral non-POI cells).
        text_color: Color for ``symbol``.
        border: Border emphasis.
    """

    territory: TerritoryLabel
    coordinate: Coordinate
    owner: Optional[PlayerName]
    poi_name: Optional[str]
    is_recent: bool
    color: str
    symbol: str
    note: str
    text_color: str
    border: Border

    @property
    def is_poi(self) -> bool:
        return bool(self.poi_name)

    @property
    def is_owned(self) -> bool:
        return self.owner is not None


RenderGrid = Tuple[Tuple[CellDescriptor, ...], ...]


def cell_note(
    territory: TerritoryLabel, owner: Optional[str], poi_name: Optional[str]
) -> str:
    if poi_name:
        if owner:
            return f"📍 {poi_name}\nOwned by: {owner}"
        return f"📍 {poi_name}\nNeutral (unclaimed)"
    if owner:
        return f"Territory: {territory}\nOwned by: {owner}"
    return ""


def choose_border(
    is_recent: bool,
    owner: Optional[str],
    fill_color: str,
    config: CampaignConfig = DEFAULT_CONFIG,
) -> Border:
    if is_recent:
        return Border(BorderTier.RECENT, config.display.recent_border_color, thick=True)
    if owner:
        return Border(BorderTier.OWNED, darken(fill_color))
    return Border(BorderTier.UNCLAIMED, config.display.unclaimed_border_color)


def build_cell(
    coord: Coordinate,
    ownership: OwnershipState,
    pois: Mapping[TerritoryLabel, str],
    player_colors: Mapping[PlayerName, str],
    config: CampaignConfig = DEFAULT_CONFIG,
) -> CellDescriptor:
    territory = to_label(coord.col, coord.row, config.grid)
    if territory is None:
        raise IndexError(
            f"Out of bounds: {coord} for grid {config.grid.cols}x{config.grid.rows}"
        )
    display = config.display

    owner = ownership.owner_of(territory) or None
    poi_name = pois.get(territory) or None
    is_recent = ownership.is_recent(territory)
    color = display.neutral_color
    if owner is not None and is_hex_color(player_colors.get(owner)):
        color = player_colors[owner]

    return CellDescriptor(
        territory=territory,
        coordinate=coord,
        owner=owner,
        poi_name=poi_name,
        is_recent=is_recent,
        color=color,
        symbol=display.poi_symbol if poi_name else "",
        note=cell_note(territory, owner, poi_name),
        text_color=display.poi_text_color,
        border=choose_border(is_recent, owner, color, config),
    )


def build_render_grid(
    ownership: OwnershipState,
    pois: Mapping[TerritoryLabel, str],
    player_colors: Mapping[PlayerName, str],
    config: CampaignConfig = DEFAULT_CONFIG,
) -> RenderGrid:
    """Build the full ``grid[row][col]`` of cell descriptors for one map."""
    return tuple(
        tuple(
            build_cell(Coordinate(col, row), ownership, pois, player_colors, config)
            for col in range(config.grid.cols)
        )
        for row in range(config.grid.rows)
    )


def cell_at(
    grid: RenderGrid, territory: TerritoryLabel, config: CampaignConfig = DEFAULT_CONFIG
) -> CellDescriptor:
    """Look up a cell by label.

    Raises:
        IndexError: If ``territory`` is not a label on this grid.
    """
    coord = from_label(territory, config.grid)
    if coord is None or not (
        0 <= coord.row < len(grid) and 0 <= coord.col < len(grid[coord.row])
    ):
        raise IndexError(f"No cell {territory!r} in grid")
    return grid[coord.row][coord.col]


def iter_cells(grid: RenderGrid) -> Iterator[CellDescriptor]:
    for row in grid:
        yield from row
