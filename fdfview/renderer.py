"""Drawing the wireframe of a view into a frame buffer."""

from __future__ import annotations

from fdfview.raster import FrameBuffer
from fdfview.view import CoordinateSystem, View


def calc_color(z1: int, z2: int, color1: int, color2: int) -> int:
    """Return the colour of the higher end of an edge; ties go to the first."""
    return color1 if z1 >= z2 else color2


def row_order(view: View) -> list[int]:
    """Rows in the order to draw them, farthest from the camera first."""
    height = view.heightmap.height
    if view.transformed_point(0, 0).z <= view.transformed_point(height - 1, 0).z:
        return list(range(height))
    return list(range(height - 1, -1, -1))


def column_order(view: View) -> list[int]:
    """Columns in the order to draw them, farthest from the camera first."""
    width = view.heightmap.width
    if view.transformed_point(0, 0).z < view.transformed_point(0, width - 1).z:
        return list(range(width))
    return list(range(width - 1, -1, -1))


def draw_edges(view: View, framebuffer: FrameBuffer, i: int, j: int) -> None:
    """Draw the edges from map point ``(i, j)`` to its lower and right neighbours.

    On a sphere the last column is also joined back to the first.
    """
    hm = view.heightmap
    here = hm[i, j]
    start = view.project_point(i, j)
    neighbours = []
    if i + 1 < hm.height:
        neighbours.append((i + 1, j))
    if j + 1 < hm.width:
        neighbours.append((i, j + 1))
    elif view.coordinates is CoordinateSystem.SPHERICAL:
        neighbours.append((i, 0))
    for k, l in neighbours:
        other = hm[k, l]
        color = calc_color(int(here.z), int(other.z), here.color, other.color)
        framebuffer.draw_line(start, view.project_point(k, l), color)


def draw_map(view: View, framebuffer: FrameBuffer) -> None:
    """Draw the whole wireframe of ``view``."""
    columns = column_order(view)
    for i in row_order(view):
        for j in columns:
            draw_edges(view, framebuffer, i, j)