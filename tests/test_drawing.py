import pytest

from fdfview.drawing import (
    EDGE_COLOR,
    HEIGHT,
    WIDTH,
    Canvas,
    IsoPoint,
    draw_line,
    round_half_up,
)


@pytest.mark.parametrize("value", [0, 1, 7, 599, 800])
def test_round_half_up_keeps_integers(value):
    assert round_half_up(float(value)) == value


@pytest.mark.parametrize("value", [0.1, 0.49, 0.5, 2.5, 3.7, 123.45, 799.6])
def test_round_half_up_is_within_half(value):
    assert abs(round_half_up(value) - value) <= 0.5


def test_round_half_up_half_goes_up():
    assert round_half_up(2.5) == 3


def test_round_half_up_truncates_toward_zero_for_negatives():
    assert round_half_up(-1.2) == 0


def test_default_canvas_size():
    canvas = Canvas()
    assert (canvas.width, canvas.height) == (WIDTH, HEIGHT)
    assert len(canvas.pixels) == WIDTH * HEIGHT


def test_put_and_get_pixel():
    canvas = Canvas(10, 5)
    canvas.put_pixel(IsoPoint(3.2, 2.0), 0x123456)
    assert canvas.get_pixel(3, 2) == 0x123456


def test_put_pixel_rounds_coordinates():
    canvas = Canvas(10, 5)
    canvas.put_pixel(IsoPoint(4.6, 1.5), 0xABCDEF)
    assert canvas.get_pixel(5, 2) == 0xABCDEF


@pytest.mark.parametrize(
    "point",
    [IsoPoint(-1, 2), IsoPoint(2, -0.5), IsoPoint(2, 5), IsoPoint(9.6, 1), IsoPoint(100, 1)],
)
def test_put_pixel_off_canvas_is_ignored(point):
    canvas = Canvas(10, 5)
    canvas.put_pixel(point, 0xFFFFFF)
    assert set(canvas.pixels) == {0}


def test_get_pixel_outside_raises():
    canvas = Canvas(10, 5)
    with pytest.raises(IndexError):
        canvas.get_pixel(10, 0)


def test_invalid_canvas_size():
    with pytest.raises(ValueError):
        Canvas(0, 5)


def test_clear_fills_every_pixel():
    canvas = Canvas(6, 4)
    canvas.put_pixel(IsoPoint(1, 1), 0x00FF00)
    canvas.clear(0x112233)
    assert set(canvas.pixels) == {0x112233}
    canvas.clear()
    assert set(canvas.pixels) == {0}


def test_horizontal_line_skips_start_and_reaches_end():
    canvas = Canvas(10, 5)
    draw_line(canvas, IsoPoint(0, 1), IsoPoint(5, 1))
    assert canvas.get_pixel(0, 1) == 0
    assert [canvas.get_pixel(x, 1) for x in range(1, 6)] == [EDGE_COLOR] * 5
    assert canvas.get_pixel(6, 1) == 0


def test_diagonal_line():
    canvas = Canvas(10, 10)
    draw_line(canvas, IsoPoint(0, 0), IsoPoint(3, 3), 0xFF)
    painted = {(x, y) for y in range(10) for x in range(10) if canvas.get_pixel(x, y)}
    assert painted == {(1, 1), (2, 2), (3, 3)}


def test_line_backwards_steps_left():
    canvas = Canvas(10, 5)
    draw_line(canvas, IsoPoint(6, 2), IsoPoint(2, 2), 0x7)
    painted = {x for x in range(10) if canvas.get_pixel(x, 2)}
    assert painted == {2, 3, 4, 5}


def test_degenerate_line_draws_nothing():
    canvas = Canvas(10, 5)
    draw_line(canvas, IsoPoint(4, 4), IsoPoint(4, 4))
    assert set(canvas.pixels) == {0}


def test_line_leaves_endpoints_untouched():
    a = IsoPoint(1.0, 1.0)
    b = IsoPoint(7.0, 3.0)
    draw_line(Canvas(10, 5), a, b)
    assert a == IsoPoint(1.0, 1.0)
    assert b == IsoPoint(7.0, 3.0)


def test_steep_line_paints_one_pixel_per_row():
    canvas = Canvas(10, 10)
    draw_line(canvas, IsoPoint(2, 0), IsoPoint(4, 8), 0x1)
    rows = [y for y in range(10) for x in range(10) if canvas.get_pixel(x, y)]
    assert sorted(rows) == list(range(1, 9))