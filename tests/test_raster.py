import pytest

from fdfview.geometry import Point2D
from fdfview.raster import WIN_HEIGHT, WIN_WIDTH, FrameBuffer

COLOR = 0xCC6600


def _lit(fb):
    return {
        (x, y)
        for y, row in enumerate(fb.pixels)
        for x, value in enumerate(row)
        if value
    }


def test_default_size_matches_window():
    fb = FrameBuffer()
    assert (fb.width, fb.height) == (WIN_WIDTH, WIN_HEIGHT)
    assert WIN_WIDTH == 1000 and WIN_HEIGHT == 1000


def test_new_buffer_is_black():
    fb = FrameBuffer(8, 6)
    assert _lit(fb) == set()


def test_put_and_get_pixel():
    fb = FrameBuffer(10, 10)
    fb.put_pixel(3, 7, COLOR)
    assert fb.get_pixel(3, 7) == COLOR
    assert _lit(fb) == {(3, 7)}


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (10, 0), (0, 10)])
def test_put_pixel_outside_is_ignored(x, y):
    fb = FrameBuffer(10, 10)
    fb.put_pixel(x, y, COLOR)
    assert _lit(fb) == set()


def test_get_pixel_outside_raises():
    fb = FrameBuffer(4, 4)
    with pytest.raises(IndexError):
        fb.get_pixel(4, 0)


def test_invalid_dimensions_raise():
    with pytest.raises(ValueError):
        FrameBuffer(0, 5)


def test_clear_blackens_everything():
    fb = FrameBuffer(5, 5)
    fb.put_pixel(1, 1, COLOR)
    fb.put_pixel(4, 2, COLOR)
    fb.clear()
    assert _lit(fb) == set()


def test_horizontal_line():
    fb = FrameBuffer(20, 20)
    fb.draw_line(Point2D(2, 5), Point2D(6, 5), COLOR)
    assert _lit(fb) == {(x, 5) for x in range(2, 7)}
    assert fb.get_pixel(4, 5) == COLOR


def test_vertical_line():
    fb = FrameBuffer(20, 20)
    fb.draw_line(Point2D(3, 9), Point2D(3, 1), COLOR)
    assert _lit(fb) == {(3, y) for y in range(1, 10)}


def test_diagonal_line_contains_endpoints_and_is_continuous():
    fb = FrameBuffer(30, 30)
    start, end = Point2D(1, 2), Point2D(17, 25)
    fb.draw_line(start, end, COLOR)
    lit = _lit(fb)
    assert (start.x, start.y) in lit
    assert (end.x, end.y) in lit
    assert {y for _, y in lit} == set(range(2, 26))
    assert {x for x, _ in lit} == set(range(1, 18))


def test_single_point_draws_nothing():
    fb = FrameBuffer(10, 10)
    fb.draw_line(Point2D(4, 4), Point2D(4, 4), COLOR)
    assert _lit(fb) == set()


@pytest.mark.parametrize("hidden_first", [True, False])
def test_hidden_point_draws_nothing(hidden_first):
    fb = FrameBuffer(10, 10)
    hidden, visible = Point2D(-1, -1), Point2D(7, 8)
    a, b = (hidden, visible) if hidden_first else (visible, hidden)
    fb.draw_line(a, b, COLOR)
    assert _lit(fb) == set()


def test_line_is_clipped_to_buffer():
    fb = FrameBuffer(10, 10)
    fb.draw_line(Point2D(-5, 3), Point2D(30, 3), COLOR)
    assert _lit(fb) == {(x, 3) for x in range(10)}


def test_color_is_stored_as_unsigned_32_bit():
    fb = FrameBuffer(3, 3)
    fb.put_pixel(0, 0, -1)
    assert fb.get_pixel(0, 0) == 0xFFFFFFFF