"""Coordinate system.

Bidirectional mapping between 0-based grid indices and territory labels such
as ``"D4"`` (column letter followed by the 1-based row number). Parsing never
raises: malformed labels return ``None`` so callers can skip bad rows without
aborting a batch.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from frontlines_map.config import DEFAULT_CONFIG, GridConfig
from frontlines_map.types import TerritoryLabel


@dataclass(frozen=True)
class Coordinate:
    """Grid coordinate.

    Attributes:
        col: Column index (0 at left, ``A``).
        row: Row index (0 at top, row number 1).
    """

    col: int
    row: int


def is_in_bounds(coord: Coordinate, grid: GridConfig = DEFAULT_CONFIG.grid) -> bool:
    """Return True if ``coord`` lies within the map rectangle."""
    return 0 <= coord.col < grid.cols and 0 <= coord.row < grid.rows


def to_label(
    col: int, row: int, grid: GridConfig = DEFAULT_CONFIG.grid
) -> Optional[TerritoryLabel]:
    """Return the label for ``(col, row)`` or ``None`` if out of range."""
    if not is_in_bounds(Coordinate(col, row), grid):
        return None
    return f"{grid.letters[col]}{row + 1}"


def from_label(
    label: object, grid: GridConfig = DEFAULT_CONFIG.grid
) -> Optional[Coordinate]:
    """Parse a territory label.

    The first character is the column letter (case-insensitive) and the rest
    must be a positive decimal row number no greater than ``grid.rows``.
    Surrounding whitespace is ignored.

    Returns:
        Coordinate | None: Parsed coordinate, or ``None`` for anything invalid.
    """
    if not isinstance(label, str):
        return None
    text = label.strip().upper()
    if len(text) < 2:
        return None
    col = grid.letters.find(text[0])
    digits = text[1:]
    if col == -1 or not (digits.isascii() and digits.isdigit()):
        return None
    row_number = int(digits)
    if not 1 <= row_number <= grid.rows:
        return None
    return Coordinate(col, row_number - 1)


def canonical_label(
    label: object, grid: GridConfig = DEFAULT_CONFIG.grid
) -> Optional[TerritoryLabel]:
    """Normalize a raw label to its canonical key (``" d04 "`` -> ``"D4"``)."""
    coord = from_label(label, grid)
    if coord is None:
        return None
    return to_label(coord.col, coord.row, grid)


def iter_coordinates(grid: GridConfig = DEFAULT_CONFIG.grid) -> Iterator[Coordinate]:
    """Yield every coordinate in row-major order."""
    for row in range(grid.rows):
        for col in range(grid.cols):
            yield Coordinate(col, row)
