"""External mutation hooks.

The host integration layer owns trigger wiring (e.g. "a cell was edited").
It turns each event into a :class:`CellEdit` and asks a hook what, if
anything, to reformat. Hooks are pure decisions; applying the returned
:class:`~frontlines_map.colors.CellFormat` is the host's job.
"""

from dataclasses import dataclass
from typing import Any, Optional, Protocol

from frontlines_map.colors import CellFormat, format_color_cell
from frontlines_map.config import DEFAULT_CONFIG, CampaignConfig


ROSTER_COLOR_COLUMN = 2


@dataclass(frozen=True)
class CellEdit:
    """A single-cell edit reported by the host.

    Attributes:
        table: Name of the edited table.
        row: 1-based row (row 1 is the header).
        column: 1-based column.
        value: New cell value.
    """

    table: str
    row: int
    column: int
    value: Any


class ExternalMutationHook(Protocol):
    def __call__(self, edit: CellEdit) -> Optional[CellFormat]: ...


def roster_color_hook(config: CampaignConfig = DEFAULT_CONFIG) -> ExternalMutationHook:
    """Hook that paints roster color cells with their own color.

    Edits outside the roster's color column, header edits and values that are
    not ``#RRGGBB`` colors yield ``None``.
    """
    table_name = config.tables.player_roster

    def hook(edit: CellEdit) -> Optional[CellFormat]:
        if edit.table != table_name:
            return None
        if edit.column != ROSTER_COLOR_COLUMN or edit.row <= 1:
            return None
        return format_color_cell(edit.value)

    return hook
