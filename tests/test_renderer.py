from fdfview.geometry import BLUE
from fdfview.mapfile import parse_map
from fdfview.raster import FrameBuffer
from fdfview.renderer import (
    calc_color,
    column_order,
    draw_edges,
    draw_map,
    row_order,
)
from fdfview.view import CoordinateSystem, OrthographicType, Projection, View


def make_view(lines):
    view = View(parse_map(lines))
    view.orthographic_type = OrthographicType.PARALLEL
    view.reset()
    return view


def lit(framebuffer):
    return sum(1 for row in framebuffer.pixels for pixel in row if pixel)


FLAT = ["0 0 0", "0 0 0", "0 0 0"]


def test_calc_color_higher_end_wins():
    assert calc_color(5, 3, 1, 2) == 1
    assert calc_color(3, 5, 1, 2) == 2


def test_calc_color_tie_goes_to_first():
    assert calc_color(4, 4, 10, 20) == 10


def test_row_order_ascending_when_first_row_is_lower():
    assert row_order(make_view(["0 0", "10 10"])) == [0, 1]


def test_row_order_descending_when_first_row_is_higher():
    assert row_order(make_view(["10 10", "0 0"])) == [1, 0]


def test_column_order_follows_depth():
    assert column_order(make_view(["0 10", "0 10"])) == [0, 1]
    assert column_order(make_view(["10 0", "10 0"])) == [1, 0]


def test_column_order_descending_for_flat_map():
    assert column_order(make_view(FLAT)) == [2, 1, 0]


def test_row_order_is_permutation_in_isometric_view():
    view = View(parse_map(["0 3 1", "9 2 0", "4 4 8", "1 0 6"]))
    assert sorted(row_order(view)) == [0, 1, 2, 3]
    assert sorted(column_order(view)) == [0, 1, 2]


def test_draw_map_flat_grid():
    view = make_view(FLAT)
    fb = FrameBuffer()
    draw_map(view, fb)
    assert fb.get_pixel(500, 500) == BLUE
    assert fb.get_pixel(400, 500) == BLUE
    assert fb.get_pixel(500, 400) == BLUE
    assert fb.get_pixel(10, 10) == 0


def test_draw_edges_uses_first_colour_on_tie():
    view = make_view(["0,0xff0000 0"])
    fb = FrameBuffer()
    draw_edges(view, fb, 0, 0)
    assert fb.get_pixel(400, 500) == 0xFF0000


def test_draw_edges_uses_higher_end_colour():
    view = make_view(["0 5,0x00ff00"])
    fb = FrameBuffer()
    draw_edges(view, fb, 0, 0)
    assert fb.get_pixel(400, 500) == 0x00FF00


def test_last_cell_draws_nothing_on_plane():
    view = make_view(FLAT)
    fb = FrameBuffer()
    draw_edges(view, fb, 2, 2)
    assert lit(fb) == 0


def test_last_column_wraps_on_sphere():
    view = make_view(FLAT)
    view.coordinates = CoordinateSystem.SPHERICAL
    fb = FrameBuffer()
    draw_edges(view, fb, 2, 2)
    assert lit(fb) > 0


def test_hidden_points_draw_nothing():
    view = make_view(FLAT)
    view.projection = Projection.PERSPECTIVE
    view.z_offset = 100.0
    fb = FrameBuffer()
    draw_map(view, fb)
    assert lit(fb) == 0


def test_clear_after_draw_empties_buffer():
    view = make_view(FLAT)
    fb = FrameBuffer()
    draw_map(view, fb)
    assert lit(fb) > 0
    fb.clear()
    assert lit(fb) == 0