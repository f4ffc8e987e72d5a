import math

import pytest

from braille_canvas import Canvas, PixelColor, Turtle


def set_pixels(canvas: Canvas):
    """Every (x, y) currently on, read back through get()."""
    max_col, max_row = canvas.cells.extent()
    return {(x, y)
            for y in range((max_row + 1) * 4)
            for x in range((max_col + 1) * 2)
            if canvas.get(x, y)}


def test_new_turtle_defaults() -> None:
    turtle = Turtle(3.0, 4.0)
    assert (turtle.x, turtle.y) == (3.0, 4.0)
    assert turtle.brush
    assert turtle.brush_color is None
    assert turtle.rotation == 0.0
    assert (turtle.canvas.width, turtle.canvas.height) == (0, 0)


def test_from_canvas_uses_given_canvas() -> None:
    canvas = Canvas(20, 20)
    turtle = Turtle.from_canvas(1.0, 2.0, canvas)
    assert turtle.canvas is canvas


def test_forward_draws_along_heading() -> None:
    turtle = Turtle()
    turtle.forward(6)
    assert turtle.x == pytest.approx(6.0)
    assert turtle.y == pytest.approx(0.0)
    assert set_pixels(turtle.canvas) == {(x, 0) for x in range(7)}


def test_right_turns_clockwise_on_screen() -> None:
    turtle = Turtle(0.0, 0.0)
    turtle.right(90)
    turtle.forward(5)
    assert turtle.x == pytest.approx(0.0, abs=1e-9)
    assert turtle.y == pytest.approx(5.0)
    assert turtle.canvas.get(0, 5)


def test_forward_back_round_trip() -> None:
    turtle = Turtle(10.0, 10.0)
    turtle.right(37.5)
    turtle.forward(13.25)
    turtle.back(13.25)
    assert turtle.x == pytest.approx(10.0)
    assert turtle.y == pytest.approx(10.0)


def test_right_left_round_trip_is_exact() -> None:
    turtle = Turtle()
    turtle.right(123)
    turtle.left(123)
    assert turtle.rotation == 0.0

    turtle.left(725)
    assert turtle.rotation == -725


def test_pen_up_moves_without_drawing() -> None:
    turtle = Turtle(4.0, 4.0)
    turtle.forward(5)
    before = set_pixels(turtle.canvas)

    turtle.up()
    turtle.right(90)
    turtle.forward(20)
    assert set_pixels(turtle.canvas) == before
    assert turtle.y == pytest.approx(24.0)


def test_toggle_and_down() -> None:
    turtle = Turtle()
    turtle.toggle()
    assert not turtle.brush
    turtle.toggle()
    assert turtle.brush
    turtle.up()
    turtle.down()
    assert turtle.brush


def test_teleport_clamps_drawing_but_keeps_position() -> None:
    turtle = Turtle(2.0, 2.0)
    turtle.teleport(-5.0, 2.0)
    assert (turtle.x, turtle.y) == (-5.0, 2.0)
    assert set_pixels(turtle.canvas) == {(0, 2), (1, 2), (2, 2)}


def test_teleport_rounds_to_nearest_pixel() -> None:
    turtle = Turtle(0.4, 0.6)
    turtle.teleport(2.5, 0.6)
    assert set_pixels(turtle.canvas) == {(0, 1), (1, 1), (2, 1), (3, 1)}


def test_color_and_clean_brush() -> None:
    turtle = Turtle()
    turtle.color(PixelColor.RED)
    turtle.forward(1)
    assert turtle.frame() == "\x1b[31m⠉\x1b[0m"

    turtle.clean_brush()
    turtle.teleport(1.0, 0.0)
    assert turtle.frame() == "⠉"


def test_color_does_not_lower_pen() -> None:
    turtle = Turtle()
    turtle.up()
    turtle.color(PixelColor.GREEN)
    turtle.forward(10)
    assert len(turtle.canvas.cells) == 0


def test_set_size_sets_minimum_cells() -> None:
    turtle = Turtle()
    turtle.set_size(width=3, height=1)
    assert turtle.frame() == "    \n    "


def test_square_closes() -> None:
    turtle = Turtle(1.0, 1.0)
    for _ in range(4):
        turtle.forward(8)
        turtle.right(90)
    assert turtle.x == pytest.approx(1.0)
    assert turtle.y == pytest.approx(1.0)
    assert math.isclose(turtle.rotation, 360)
    pixels = set_pixels(turtle.canvas)
    assert {(1, 1), (9, 1), (9, 9), (1, 9)} <= pixels
