#
# PROJECT: braille-canvas
# MODULE: braille_canvas/cells.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple

CellKey = Tuple[int, int]


@dataclass
class Cell:
    """
    Content of one Braille character cell.

    A cell is either in dot mode (mask, optionally tagged with a color)
    or in character mode (char is set and the mask is ignored).
    """
    mask: int = 0
    char: Optional[str] = None
    color: Any = None
    colored: bool = False

    def show_dots(self, color=None):
        """Switch to dot mode. Drops any character override."""
        self.char = None
        self.color = color
        self.colored = color is not None

    def show_char(self, c: str):
        """Switch to character mode. Drops the accumulated dots."""
        self.mask = 0
        self.char = c
        self.color = None
        self.colored = False


class CellStore:
    """Sparse, unbounded mapping from cell coordinate to Cell."""
    __slots__ = ['_cells', '_max_col', '_max_row']

    def __init__(self):
        self._cells: Dict[CellKey, Cell] = {}
        self._max_col = 0
        self._max_row = 0

    def get_or_create(self, key: CellKey) -> Cell:
        cell = self._cells.get(key)
        if cell is None:
            cell = self._cells[key] = Cell()
            col, row = key
            if col > self._max_col: self._max_col = col
            if row > self._max_row: self._max_row = row
        return cell

    def lookup(self, key: CellKey) -> Optional[Cell]:
        return self._cells.get(key)

    def clear(self):
        self._cells.clear()
        self._max_col = 0
        self._max_row = 0

    def extent(self) -> CellKey:
        """Highest (col, row) created since the last clear, (0, 0) if empty."""
        return (self._max_col, self._max_row)

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, key) -> bool:
        return key in self._cells

    def __iter__(self) -> Iterator[CellKey]:
        return iter(self._cells)
