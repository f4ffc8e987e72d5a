#
# PROJECT: braille-canvas
# MODULE: braille_canvas/turtle.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
import math

from .canvas import Canvas

logger = logging.getLogger(__name__)


def _to_pixel(v: float) -> int:
    # Round half up, then clamp onto the canvas
    return math.floor(v + 0.5) if v > 0 else 0


class Turtle:
    """
    A cursor that walks around a canvas drawing lines.

    The pen (brush) decides whether moving draws at all; the brush color
    decides whether the drawn line is colored. Heading is in degrees,
    0 points along +x and positive angles turn clockwise on screen
    because y grows downward.
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, canvas: Canvas = None):
        self.x = x
        self.y = y
        self.brush = True
        self.brush_color = None
        self.rotation = 0.0
        self.canvas = canvas if canvas is not None else Canvas(0, 0)
        logger.debug("turtle at (%s, %s)", x, y)

    @classmethod
    def from_canvas(cls, x: float, y: float, canvas: Canvas) -> 'Turtle':
        return cls(x, y, canvas)

    def set_size(self, width: int = None, height: int = None):
        """Sets the minimum canvas size, in character cells."""
        if width is not None:
            self.canvas.width = width
        if height is not None:
            self.canvas.height = height

    # --- Pen ---

    def up(self):
        self.brush = False

    def down(self):
        self.brush = True

    def toggle(self):
        self.brush = not self.brush

    def color(self, color):
        """Draw following moves in color."""
        self.brush_color = color

    def clean_brush(self):
        """Go back to drawing uncolored lines."""
        self.brush_color = None

    # --- Movement ---

    def forward(self, dist: float):
        rad = math.radians(self.rotation)
        self.teleport(self.x + math.cos(rad) * dist,
                      self.y + math.sin(rad) * dist)

    def back(self, dist: float):
        self.forward(-dist)

    def teleport(self, x: float, y: float):
        """
        Jumps to (x, y), drawing a line from the old position when the
        brush is down. The position is kept unrounded either way.
        """
        if self.brush:
            x1, y1 = _to_pixel(self.x), _to_pixel(self.y)
            x2, y2 = _to_pixel(x), _to_pixel(y)
            if self.brush_color is None:
                self.canvas.line(x1, y1, x2, y2)
            else:
                self.canvas.line_colored(x1, y1, x2, y2, self.brush_color)

        self.x = x
        self.y = y

    def right(self, angle: float):
        self.rotation += angle

    def left(self, angle: float):
        self.rotation -= angle

    def frame(self) -> str:
        return self.canvas.frame()
