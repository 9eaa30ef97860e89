"""A pixel buffer that the wireframe is drawn into."""

from __future__ import annotations

from fdfview.geometry import Point2D

WIN_WIDTH = 1000
WIN_HEIGHT = 1000


def _div_trunc(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def _is_hidden(point: Point2D) -> bool:
    return point.x == -1 and point.y == -1


class FrameBuffer:
    """A width by height grid of 32-bit colours, black when created."""

    def __init__(self, width: int = WIN_WIDTH, height: int = WIN_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("frame buffer dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = [[0] * width for _ in range(height)]

    def __contains__(self, xy: tuple[int, int]) -> bool:
        x, y = xy
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; positions outside the buffer are ignored."""
        if (x, y) in self:
            self.pixels[y][x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour at ``(x, y)``."""
        if (x, y) not in self:
            raise IndexError(f"pixel ({x}, {y}) is outside the buffer")
        return self.pixels[y][x]

    def clear(self) -> None:
        """Paint every pixel black."""
        for row in self.pixels:
            row[:] = [0] * self.width

    def draw_line(self, start: Point2D, end: Point2D, color: int) -> None:
        """Draw a line between two screen points.

        The line is sampled once per row and once per column so that steep
        and shallow segments are both continuous. A point at (-1, -1) marks
        one that could not be projected, and no line is drawn to it.
        """
        if _is_hidden(start) or _is_hidden(end):
            return
        dx = end.x - start.x
        dy = end.y - start.y
        if dy != 0:
            y = max(min(start.y, end.y), 0)
            last = min(max(start.y, end.y), self.height - 1)
            while y <= last:
                x = _div_trunc((y - start.y) * dx, dy) + start.x
                self.put_pixel(x, y, color)
                y += 1
        if dx != 0:
            x = max(min(start.x, end.x), 0)
            last = min(max(start.x, end.x), self.width - 1)
            while x <= last:
                y = _div_trunc(dy * (x - start.x), dx) + start.y
                self.put_pixel(x, y, color)
                x += 1