#
# PROJECT: braille-canvas
# MODULE: braille_canvas/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from .config import RenderConfig
from .color import PixelColor, TrueColor, parse_hex_color, colorize
from .cells import Cell, CellStore
from .rasterizer import line_points, ellipse_points, ellipse_in_box
from .canvas import Canvas
from .turtle import Turtle
