#
# PROJECT: braille-canvas
# MODULE: braille_canvas/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from typing import List, Tuple

Point = Tuple[int, int]


def line_points(x1: int, y1: int, x2: int, y2: int) -> List[Point]:
    """
    Digital line from (x1, y1) to (x2, y2), both endpoints included.

    One point per step along the dominant axis, so the result always holds
    max(|dx|, |dy|) + 1 points and consecutive points differ by at most 1
    on each axis. The minor axis advances by floor(i * delta / steps).
    """
    xdiff = abs(x2 - x1)
    ydiff = abs(y2 - y1)
    xdir = 1 if x1 <= x2 else -1
    ydir = 1 if y1 <= y2 else -1

    step = xdiff if xdiff > ydiff else ydiff

    points = []
    for i in range(step + 1):
        x, y = x1, y1
        if ydiff:
            y += (i * ydiff) // step * ydir
        if xdiff:
            x += (i * xdiff) // step * xdir
        # Pixel addresses are non-negative
        points.append((x if x > 0 else 0, y if y > 0 else 0))
    return points


def ellipse_points(cx: int, cy: int, rx: int, ry: int) -> List[Point]:
    """
    Boundary of the axis-aligned ellipse centred on (cx, cy).

    Walks the first quadrant from the top of the ellipse down to its right
    tip with an integer error term, stepping x while the boundary is flat
    and y once it gets steep, and mirrors every step into the other three
    quadrants. Mirrored points left of x=0 or above y=0 are dropped.
    Duplicates are removed; order follows the walk.
    """
    if rx == 0 and ry == 0:
        return [(cx, cy)]

    points = []

    def plot(dx, dy):
        points.append((cx + dx, cy + dy))
        if cx >= dx:
            points.append((cx - dx, cy + dy))
            if cy >= dy:
                points.append((cx - dx, cy - dy))
        if cy >= dy:
            points.append((cx + dx, cy - dy))

    a2 = rx * rx
    b2 = ry * ry
    dx, dy = 0, ry
    err = b2 - (2 * ry - 1) * a2

    while dy >= 0:
        plot(dx, dy)
        e2 = err + err
        if e2 < (2 * dx + 1) * b2:
            dx += 1
            err += (2 * dx + 1) * b2
        if e2 > -(2 * dy - 1) * a2:
            dy -= 1
            err -= (2 * dy - 1) * a2

    # Very flat ellipses stop early; finish the tips along the x axis
    while dx < rx:
        dx += 1
        points.append((cx + dx, cy))
        if cx >= dx:
            points.append((cx - dx, cy))

    return list(dict.fromkeys(points))


def _half(v: int) -> int:
    """Halve, truncating toward zero."""
    return -(-v // 2) if v < 0 else v // 2


def ellipse_in_box(x1: int, y1: int, x2: int, y2: int) -> List[Point]:
    """Ellipse inscribed in the box spanned by two opposite corners."""
    half_w = _half(x1 - x2)
    half_h = _half(y1 - y2)
    return ellipse_points(x2 + half_w, y2 + half_h, abs(half_w), abs(half_h))
