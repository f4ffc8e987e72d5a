#
# PROJECT: braille-canvas
# MODULE: braille_canvas/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging

from .cells import Cell, CellStore
from .color import DEPTH_TRUECOLOR, colorize
from .config import RenderConfig
from .rasterizer import line_points, ellipse_points, ellipse_in_box

logger = logging.getLogger(__name__)

BRAILLE_OFFSET = 0x2800


class Canvas:
    """
    Pixel-addressed drawing surface rendered with Braille characters.

    Every character cell covers 2x4 pixels. The canvas has no upper bound:
    width and height (in cells) only set the minimum rendered area, and
    drawing past them grows the output.
    """
    __slots__ = ['width', 'height', 'config', 'cells']

    # Braille dot bit for each pixel of a 2x4 cell, indexed [y % 4][x % 2]
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    PIXEL_MAP = [[0x01, 0x08],
                 [0x02, 0x10],
                 [0x04, 0x20],
                 [0x40, 0x80]]

    def __init__(self, width: int, height: int, config: RenderConfig = None):
        self.width = width // 2
        self.height = height // 4
        self.config = config if config is not None else RenderConfig()
        self.cells = CellStore()

    def _locate(self, x, y):
        if x < 0 or y < 0:
            raise ValueError(f"pixel coordinates must be non-negative, got ({x}, {y})")
        return (x >> 1, y >> 2), self.PIXEL_MAP[y & 3][x & 1]

    def clear(self):
        """Removes everything drawn. The minimum size is kept."""
        logger.debug("clearing %d cells", len(self.cells))
        self.cells.clear()

    def set(self, x: int, y: int):
        """Turns the pixel on. The cell goes back to showing dots."""
        key, bit = self._locate(x, y)
        cell = self.cells.get_or_create(key)
        cell.mask |= bit
        cell.show_dots()

    def set_colored(self, x: int, y: int, color):
        """Like set(), and the whole cell is drawn in color."""
        key, bit = self._locate(x, y)
        cell = self.cells.get_or_create(key)
        cell.mask |= bit
        cell.show_dots(color)

    def set_char(self, x: int, y: int, c: str):
        """Shows c in the cell holding the pixel, instead of its dots."""
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        key, _ = self._locate(x, y)
        self.cells.get_or_create(key).show_char(c)

    def unset(self, x: int, y: int):
        key, bit = self._locate(x, y)
        self.cells.get_or_create(key).mask &= ~bit

    def toggle(self, x: int, y: int):
        key, bit = self._locate(x, y)
        self.cells.get_or_create(key).mask ^= bit

    def get(self, x: int, y: int) -> bool:
        key, bit = self._locate(x, y)
        cell = self.cells.lookup(key)
        return cell is not None and bool(cell.mask & bit)

    def text(self, x: int, y: int, max_width: int, s: str):
        """
        Writes s starting at pixel (x, y), one character per cell.
        Characters whose pixel offset would exceed max_width are not written.
        """
        for i, c in enumerate(s):
            offset = i * 2
            if offset > max_width:
                return
            self.set_char(x + offset, y, c)

    # --- Shapes ---

    def line(self, x1: int, y1: int, x2: int, y2: int):
        for x, y in line_points(x1, y1, x2, y2):
            self.set(x, y)

    def line_colored(self, x1: int, y1: int, x2: int, y2: int, color):
        for x, y in line_points(x1, y1, x2, y2):
            self.set_colored(x, y, color)

    def rectangle(self, x1: int, y1: int, x2: int, y2: int):
        """Outline of the box spanned by (x1, y1) and (x2, y2)."""
        self.line(x1, y1, x2, y1)
        self.line(x1, y1, x1, y2)
        self.line(x1, y2, x2, y2)
        self.line(x2, y1, x2, y2)

    def rectangle_colored(self, x1: int, y1: int, x2: int, y2: int, color):
        self.line_colored(x1, y1, x2, y1, color)
        self.line_colored(x1, y1, x1, y2, color)
        self.line_colored(x1, y2, x2, y2, color)
        self.line_colored(x2, y1, x2, y2, color)

    def ellipse_box(self, x1: int, y1: int, x2: int, y2: int):
        """Ellipse inscribed in the box spanned by (x1, y1) and (x2, y2)."""
        for x, y in ellipse_in_box(x1, y1, x2, y2):
            self.set(x, y)

    def ellipse_box_colored(self, x1: int, y1: int, x2: int, y2: int, color):
        for x, y in ellipse_in_box(x1, y1, x2, y2):
            self.set_colored(x, y, color)

    def ellipse_center(self, xm: int, ym: int, a: int, b: int):
        """Ellipse centred on (xm, ym) with horizontal radius a, vertical radius b."""
        for x, y in ellipse_points(xm, ym, a, b):
            self.set(x, y)

    def ellipse_center_colored(self, xm: int, ym: int, a: int, b: int, color):
        for x, y in ellipse_points(xm, ym, a, b):
            self.set_colored(x, y, color)

    # --- Output ---

    def rows(self):
        """
        Renders the canvas as a list of strings, one per row of cells
        (four pixels high). Always at least height + 1 rows of width + 1
        characters.
        """
        max_col, max_row = self.cells.extent()
        max_col = max(self.width, max_col)
        max_row = max(self.height, max_row)

        use_color = self.config.use_color
        depth = self.config.color_depth
        lookup = self.cells.lookup

        result = []
        for y in range(max_row + 1):
            row = []
            for x in range(max_col + 1):
                cell = lookup((x, y))
                row.append(' ' if cell is None else render_cell(cell, use_color, depth))
            result.append(''.join(row))
        return result

    def frame(self) -> str:
        """The whole canvas as one string, rows separated by newlines."""
        return '\n'.join(self.rows())

    def __str__(self):
        return self.frame()


def render_cell_braille(mask: int) -> str:
    """Renders a dot mask as a Unicode Braille character."""
    if not mask:
        return ' '
    return chr(BRAILLE_OFFSET + mask)

def render_cell(cell: Cell, use_color=True, depth=DEPTH_TRUECOLOR) -> str:
    """Renders one cell to exactly one visible character."""
    if cell.char is not None:
        return cell.char
    glyph = render_cell_braille(cell.mask)
    if cell.mask and cell.colored and use_color:
        return colorize(glyph, cell.color, depth)
    return glyph
