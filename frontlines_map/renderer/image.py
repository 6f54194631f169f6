"""Reference raster renderer.

Draws a :class:`~frontlines_map.view.MapView` into a Pillow image: a title
bar, column and row headers, the cell grid (fill color, tiered border, POI
marker) and the player legend to the right of the grid. The host renderer is
free to ignore this and apply the descriptors to its own surface; this one
is for previews and exports.
"""

from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from frontlines_map.config import DEFAULT_CONFIG, CampaignConfig
from frontlines_map.coords import Coordinate
from frontlines_map.renderer.grid import CellDescriptor, iter_cells
from frontlines_map.renderer.legend import LegendEntry
from frontlines_map.view import MapView


TITLE_BACKGROUND = "#2C3E50"
HEADER_BACKGROUND = "#34495E"
HEADER_TEXT = "#FFFFFF"
LEGEND_NAME_BACKGROUND = "#F8F9FA"
LEGEND_NAME_BORDER = "#CCCCCC"
LEGEND_TEXT = "#000000"
CANVAS_BACKGROUND = (255, 255, 255, 255)

THICK_BORDER = 3
THIN_BORDER = 1
LEGEND_COLUMNS = 4  # legend width in cells (swatch + name)

Box = Tuple[int, int, int, int]


def _font(size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    return ImageFont.load_default(size=max(8, size))


def grid_origin(cell_size: int) -> Tuple[int, int]:
    """Top-left pixel of cell A1 (below title + column headers, right of row headers)."""
    return cell_size // 2, cell_size + cell_size // 2


def cell_box(coord: Coordinate, cell_size: int) -> Box:
    x0, y0 = grid_origin(cell_size)
    x = x0 + coord.col * cell_size
    y = y0 + coord.row * cell_size
    return x, y, x + cell_size - 1, y + cell_size - 1


def legend_origin(cols: int, cell_size: int) -> Tuple[int, int]:
    x0, _ = grid_origin(cell_size)
    return x0 + (cols + 1) * cell_size, cell_size


def image_size(view: MapView, cell_size: int, cols: int, rows: int) -> Tuple[int, int]:
    _, y0 = grid_origin(cell_size)
    row_height = cell_size // 2
    legend_x, legend_y = legend_origin(cols, cell_size)
    width = legend_x + LEGEND_COLUMNS * cell_size
    height = max(y0 + rows * cell_size, legend_y + (len(view.legend) + 1) * row_height)
    return width, height


def draw_poi_marker(draw: ImageDraw.ImageDraw, box: Box, color: str) -> None:
    """Small diamond in the middle of the cell."""
    left, top, right, bottom = box
    cx, cy = (left + right) // 2, (top + bottom) // 2
    r = max(3, (right - left) // 5)
    draw.polygon(
        [(cx, cy - r), (cx + r, cy), (cx, cy + r), (cx - r, cy)],
        fill=color,
        outline=(0, 0, 0, 200),
    )


def draw_cell(draw: ImageDraw.ImageDraw, cell: CellDescriptor, cell_size: int) -> None:
    box = cell_box(cell.coordinate, cell_size)
    draw.rectangle(box, fill=cell.color)
    width = THICK_BORDER if cell.border.thick else THIN_BORDER
    draw.rectangle(box, outline=cell.border.color, width=width)
    if cell.is_poi:
        draw_poi_marker(draw, box, cell.text_color)


def draw_headers(
    draw: ImageDraw.ImageDraw,
    title: str,
    letters: str,
    rows: int,
    cell_size: int,
) -> None:
    x0, y0 = grid_origin(cell_size)
    half = cell_size // 2
    grid_right = x0 + len(letters) * cell_size - 1

    draw.rectangle((0, 0, grid_right, cell_size - 1), fill=TITLE_BACKGROUND)
    draw.text(
        ((grid_right + 1) // 2, cell_size // 2),
        title,
        fill=HEADER_TEXT,
        font=_font(cell_size // 2),
        anchor="mm",
    )

    header_font = _font(half - 4)
    draw.rectangle((0, cell_size, grid_right, y0 - 1), fill=HEADER_BACKGROUND)
    for col, letter in enumerate(letters):
        cx = x0 + col * cell_size + cell_size // 2
        draw.text(
            (cx, cell_size + half // 2),
            letter,
            fill=HEADER_TEXT,
            font=header_font,
            anchor="mm",
        )

    draw.rectangle((0, y0, x0 - 1, y0 + rows * cell_size - 1), fill=HEADER_BACKGROUND)
    for row in range(rows):
        cy = y0 + row * cell_size + cell_size // 2
        draw.text(
            (half // 2, cy),
            str(row + 1),
            fill=HEADER_TEXT,
            font=header_font,
            anchor="mm",
        )


def draw_legend(
    draw: ImageDraw.ImageDraw,
    legend: Tuple[LegendEntry, ...],
    cols: int,
    cell_size: int,
) -> None:
    x, y = legend_origin(cols, cell_size)
    row_height = cell_size // 2
    width = LEGEND_COLUMNS * cell_size
    font = _font(row_height - 6)

    draw.rectangle((x, y, x + width - 1, y + row_height - 1), fill=TITLE_BACKGROUND)
    draw.text(
        (x + width // 2, y + row_height // 2),
        "PLAYERS",
        fill=HEADER_TEXT,
        font=font,
        anchor="mm",
    )

    for index, entry in enumerate(legend):
        top = y + (index + 1) * row_height
        bottom = top + row_height - 1
        swatch = (x, top, x + row_height - 1, bottom)
        draw.rectangle(swatch, fill=entry.color, outline=entry.border_color)
        name_box = (x + row_height, top, x + width - 1, bottom)
        draw.rectangle(name_box, fill=LEGEND_NAME_BACKGROUND, outline=LEGEND_NAME_BORDER)
        draw.text(
            (x + row_height + 4, top + row_height // 2),
            entry.name,
            fill=LEGEND_TEXT,
            font=font,
            anchor="lm",
        )


def render_map(
    view: MapView,
    config: CampaignConfig = DEFAULT_CONFIG,
    cell_size: Optional[int] = None,
) -> Image.Image:
    """Render a map view as an RGBA image."""
    size = cell_size or config.grid.cell_size
    letters = config.grid.letters
    rows = len(view.grid)
    cols = len(view.grid[0]) if rows else 0

    img = Image.new("RGBA", image_size(view, size, cols, rows), CANVAS_BACKGROUND)
    draw = ImageDraw.Draw(img)

    draw_headers(draw, view.title, letters[:cols], rows, size)
    for cell in iter_cells(view.grid):
        draw_cell(draw, cell, size)
    draw_legend(draw, view.legend, cols, size)
    return img


class MapRenderer:
    config: CampaignConfig
    cell_size: Optional[int]

    def __init__(
        self,
        config: CampaignConfig = DEFAULT_CONFIG,
        cell_size: Optional[int] = None,
    ):
        self.config = config
        self.cell_size = cell_size

    def render(self, view: MapView) -> Image.Image:
        return render_map(view, config=self.config, cell_size=self.cell_size)
