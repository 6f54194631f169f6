"""Immutable campaign configuration.

A :class:`CampaignConfig` is built once at startup (either the module level
:data:`DEFAULT_CONFIG` or via :func:`load_config`) and passed explicitly to
every component. All config dataclasses are frozen and validated on
construction; use :func:`dataclasses.replace` to derive variants.
"""

import logging
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, Tuple, Type, TypeVar, Union

import yaml

from frontlines_map.types import MapID


logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


@dataclass(frozen=True)
class GridConfig:
    """Fixed dimensions of every map.

    Attributes:
        rows: Number of rows (labels use 1-based row numbers).
        cols: Number of columns.
        column_letters: Column label alphabet; only the first ``cols`` are used.
        cell_size: Pixel size of one cell for raster rendering.
    """

    rows: int = 9
    cols: int = 14
    column_letters: str = "ABCDEFGHIJKLMN"
    cell_size: int = 50

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Grid must be non-empty, got {self.cols}x{self.rows}")
        if len(self.column_letters) < self.cols:
            raise ValueError(
                f"{self.cols} columns need {self.cols} letters, "
                f"got {self.column_letters!r}"
            )
        letters = self.column_letters[: self.cols]
        if len(set(letters.upper())) != len(letters):
            raise ValueError(f"Column letters must be unique: {letters!r}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")

    @property
    def letters(self) -> str:
        """Upper-cased column letters actually in use."""
        return self.column_letters[: self.cols].upper()


@dataclass(frozen=True)
class DisplayConfig:
    """Colors, glyphs and the recent-change window size."""

    highlight_recent_count: int = 3
    poi_symbol: str = "⌘"
    neutral_color: str = "#CCCCCC"
    poi_text_color: str = "#FFFFFF"
    recent_border_color: str = "#000000"
    unclaimed_border_color: str = "#AAAAAA"

    def __post_init__(self) -> None:
        if self.highlight_recent_count < 0:
            raise ValueError(
                f"highlight_recent_count must be >= 0, got {self.highlight_recent_count}"
            )
        for name in (
            "neutral_color",
            "poi_text_color",
            "recent_border_color",
            "unclaimed_border_color",
        ):
            value = getattr(self, name)
            if not isinstance(value, str) or not _HEX_COLOR.match(value):
                raise ValueError(f"{name} must be a #RRGGBB color, got {value!r}")


@dataclass(frozen=True)
class TableNames:
    """Names of the input tables in the host data store."""

    player_roster: str = "Player Roster"
    poi_definitions: str = "POI Definitions"
    starting_territories: str = "Starting Territories"
    game_results: str = "Game Results"


@dataclass(frozen=True)
class CampaignConfig:
    """Top-level configuration value.

    Attributes:
        grid: Map dimensions shared by every map.
        display: Rendering constants.
        tables: Host table names.
        maps: Ordered map identifiers.
        both_maps: Affiliation sentinel meaning "plays on every map".
    """

    grid: GridConfig = field(default_factory=GridConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    tables: TableNames = field(default_factory=TableNames)
    maps: Tuple[MapID, ...] = ("TGA", "Westgate")
    both_maps: str = "Both"

    def __post_init__(self) -> None:
        # Accept any sequence (e.g. a YAML list) but store a tuple.
        object.__setattr__(self, "maps", tuple(self.maps))
        if not self.maps:
            raise ValueError("At least one map must be configured")
        if len(set(self.maps)) != len(self.maps):
            raise ValueError(f"Duplicate map ids: {self.maps}")
        if self.both_maps in self.maps:
            raise ValueError(
                f"both_maps sentinel {self.both_maps!r} collides with a map id"
            )

    def map_title(self, map_id: MapID) -> str:
        return f"{map_id} Map"


DEFAULT_CONFIG = CampaignConfig()

_T = TypeVar("_T")


def _section(cls: Type[_T], data: Any, name: str) -> _T:
    if data is None:
        return cls()
    if not isinstance(data, Mapping):
        raise ValueError(f"Config section {name!r} must be a mapping")
    known = {f.name for f in fields(cls)}  # type: ignore[arg-type]
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown keys in {name!r}: {sorted(unknown)}")
    return cls(**data)


def config_from_dict(data: Mapping[str, Any]) -> CampaignConfig:
    """Build a :class:`CampaignConfig` from a nested mapping.

    Missing sections and keys fall back to defaults.

    Raises:
        ValueError: On unknown keys or invalid values.
    """
    unknown = set(data) - {"grid", "display", "tables", "maps", "both_maps"}
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")
    kwargs: dict[str, Any] = {
        "grid": _section(GridConfig, data.get("grid"), "grid"),
        "display": _section(DisplayConfig, data.get("display"), "display"),
        "tables": _section(TableNames, data.get("tables"), "tables"),
    }
    if "maps" in data:
        kwargs["maps"] = tuple(str(m) for m in data["maps"])
    if "both_maps" in data:
        kwargs["both_maps"] = str(data["both_maps"])
    return CampaignConfig(**kwargs)


def load_config(path: Union[str, Path]) -> CampaignConfig:
    """Load a YAML config file. An empty file yields the defaults."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"Config file {path} must contain a mapping")
    config = config_from_dict(data)
    logger.info("Loaded campaign config from %s (maps=%s)", path, config.maps)
    return config
