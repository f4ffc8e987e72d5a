#
# PROJECT: braille-canvas
# MODULE: braille_canvas/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from enum import Enum
from typing import NamedTuple

RESET = '\x1b[0m'

DEPTH_TRUECOLOR = 'truecolor'
DEPTH_256 = '256'
DEPTH_8 = '8'
COLOR_DEPTHS = (DEPTH_TRUECOLOR, DEPTH_256, DEPTH_8)


class PixelColor(Enum):
    """Named terminal colors. Values are ANSI palette indices 0-15."""
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    BRIGHT_BLACK = 8
    BRIGHT_RED = 9
    BRIGHT_GREEN = 10
    BRIGHT_YELLOW = 11
    BRIGHT_BLUE = 12
    BRIGHT_MAGENTA = 13
    BRIGHT_CYAN = 14
    BRIGHT_WHITE = 15


class TrueColor(NamedTuple):
    r: int
    g: int
    b: int


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None

# --- xterm-256 lookup for downgrading RGB colors ---

# The 6x6x6 color cube occupies indices 16-231.
# Each axis has values: 0, 95, 135, 175, 215, 255
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

# Grayscale ramp occupies indices 232-255 (24 shades).
# Values: 8, 18, 28, ..., 238

# ANSI 0-7 approximate RGB values
_ANSI8_RGB = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
]

def _rgb_to_nearest_xterm(r, g, b):
    """Find the nearest xterm-256 index for an (r, g, b) color.
    Searches the 6x6x6 cube and the grayscale ramp for best match."""

    def _nearest_cube_val(v):
        """Find nearest index in the 6-level cube axis."""
        best_i = 0
        best_d = abs(v - _CUBE_VALUES[0])
        for i in range(1, 6):
            d = abs(v - _CUBE_VALUES[i])
            if d < best_d:
                best_d = d
                best_i = i
        return best_i

    # Find best cube match
    ri = _nearest_cube_val(r)
    gi = _nearest_cube_val(g)
    bi = _nearest_cube_val(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cr, cg, cb = _CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]
    cube_dist = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2

    # Find best grayscale match
    gray_avg = (r + g + b) // 3
    gray_step = max(0, min(23, (gray_avg - 8 + 5) // 10))
    gray_idx = 232 + gray_step
    gv = 8 + gray_step * 10
    gray_dist = (r - gv) ** 2 + (g - gv) ** 2 + (b - gv) ** 2

    return gray_idx if gray_dist < cube_dist else cube_idx

def _rgb_to_nearest_ansi8(r, g, b):
    """Find the nearest basic ANSI color index (0-7) for an (r, g, b) color."""
    best_idx = 0
    best_dist = None
    for i, (ar, ag, ab) in enumerate(_ANSI8_RGB):
        d = (r - ar) ** 2 + (g - ag) ** 2 + (b - ab) ** 2
        if best_dist is None or d < best_dist:
            best_dist = d
            best_idx = i
    return best_idx

def _named_sgr(idx):
    # 0-7 normal foreground (30-37), 8-15 bright foreground (90-97)
    return str(30 + idx) if idx < 8 else str(90 + idx - 8)

def sgr_code(color, depth=DEPTH_TRUECOLOR):
    """
    Returns the SGR foreground parameters for a color, e.g. '31' or
    '38;2;255;0;0'.

    Accepts a PixelColor, a TrueColor or any (r, g, b) triple, or a hex
    string. RGB colors are reduced to the xterm-256 or basic 8-color
    palette when depth asks for it.
    """
    if isinstance(color, PixelColor):
        return _named_sgr(color.value)

    rgb = color
    if isinstance(color, str):
        rgb = parse_hex_color(color)
        if rgb is None:
            raise ValueError(f"not a hex color: {color!r}")
    elif not (isinstance(color, tuple) and len(color) == 3):
        raise TypeError(f"unsupported color value: {color!r}")

    r, g, b = (int(v) for v in rgb)
    if depth == DEPTH_TRUECOLOR:
        return f"38;2;{r};{g};{b}"
    if depth == DEPTH_256:
        return f"38;5;{_rgb_to_nearest_xterm(r, g, b)}"
    if depth == DEPTH_8:
        return _named_sgr(_rgb_to_nearest_ansi8(r, g, b))
    raise ValueError(f"unknown color depth: {depth!r}")

def colorize(glyph: str, color, depth=DEPTH_TRUECOLOR) -> str:
    """Wraps glyph in the escape sequence for color, followed by a reset."""
    return f"\x1b[{sgr_code(color, depth)}m{glyph}{RESET}"
