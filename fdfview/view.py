"""Camera state for a height map, and the projection of its points."""

from __future__ import annotations

import math
from enum import Enum

from fdfview.geometry import Point2D, Point3D, rotate_x, rotate_y, rotate_z
from fdfview.mapfile import HeightMap
from fdfview.raster import WIN_HEIGHT, WIN_WIDTH

ROTATION_ANGLE = (math.pi / 180.0) / 10
ZOOM_MIN = 0.5
ZOOM_MAX = 1000.0
_TAU = 2 * math.pi
_CENTER_X = WIN_WIDTH // 2
_CENTER_Y = WIN_HEIGHT // 2
_AXES = ("x", "y", "z")


class Projection(Enum):
    """How model space is flattened onto the screen."""

    ORTHOGRAPHIC = "o"
    PERSPECTIVE = "p"


class CoordinateSystem(Enum):
    """Whether the map is laid out flat or wrapped around a sphere."""

    CARTESIAN = "c"
    SPHERICAL = "s"


class OrthographicType(Enum):
    """The starting orientation used when the view is reset."""

    ISOMETRIC = "i"
    PARALLEL = "p"


def perspective_projection(point: Point3D, fov: float) -> Point2D:
    """Project ``point`` with a pinhole camera looking down negative z.

    Points at or behind the camera come back as (-1, -1), which the
    line drawing treats as hidden.
    """
    if point.z >= 0:
        return Point2D(-1, -1, point.color)
    x_proj = (point.x * -10) / point.z
    y_proj = (point.y * -10) / point.z
    return Point2D(
        int(x_proj * fov + _CENTER_X),
        int(y_proj * fov + _CENTER_Y),
        point.color,
    )


class View:
    """Orientation, position, zoom and display modes for one height map."""

    def __init__(self, heightmap: HeightMap) -> None:
        self.heightmap = heightmap
        self.orthographic_type = OrthographicType.ISOMETRIC
        self.rotating = dict.fromkeys(_AXES, 0)
        self.moving = dict.fromkeys(_AXES, 0)
        self.projection = Projection.ORTHOGRAPHIC
        self.coordinates = CoordinateSystem.CARTESIAN
        self.x_angle = self.y_angle = self.z_angle = 0.0
        self.x_offset = self.y_offset = self.z_offset = 0.0
        self.zoom = 1.0
        self.reset()

    @property
    def _extent(self) -> float:
        return float(max(self.heightmap.width, self.heightmap.height))

    def reset(self) -> None:
        """Return to the starting orientation of the current orthographic type."""
        self.projection = Projection.ORTHOGRAPHIC
        self.coordinates = CoordinateSystem.CARTESIAN
        if self.orthographic_type is OrthographicType.ISOMETRIC:
            self.x_angle = math.radians(90 - 35.264)
            self.y_angle = 0.0
            self.z_angle = math.radians(-45)
            self.zoom = 500.0 / max(self._extent, float(self.heightmap.top_z))
        else:
            self.x_angle = self.y_angle = self.z_angle = 0.0
            self.zoom = 500.0 / self._extent
        self.x_offset = 0.0
        self.y_offset = 0.0
        self.z_offset = -8 * ((self._extent / 13) + 1)

    def spherical_point(self, i: int, j: int) -> Point3D:
        """Place map point ``(i, j)`` on a sphere whose radius grows with z."""
        hm = self.heightmap
        point = hm[i, j]
        half = hm.height // 2
        radius = (point.z + max(self._extent, float(hm.top_z))) * 0.75
        alpha = math.radians(((point.x + half) * 360) / hm.width)
        beta = math.radians(((point.y + half) * 180) / hm.height)
        return Point3D(
            radius * math.sin(-beta) * math.cos(-alpha),
            radius * math.sin(-beta) * math.sin(-alpha),
            radius * math.cos(-beta),
            point.color,
        )

    def transformed_point(self, i: int, j: int) -> Point3D:
        """Return map point ``(i, j)`` rotated and moved into camera space."""
        original = self.heightmap[i, j]
        if self.coordinates is CoordinateSystem.SPHERICAL:
            point = self.spherical_point(i, j)
        else:
            point = original
        point = rotate_z(point, self.z_angle)
        point = rotate_x(point, self.x_angle)
        point = rotate_y(point, self.y_angle)
        return Point3D(
            point.x + self.x_offset,
            point.y + self.y_offset,
            point.z + self.z_offset,
            original.color,
        )

    def project_point(self, i: int, j: int) -> Point2D:
        """Return the screen position of map point ``(i, j)``."""
        point = self.transformed_point(i, j)
        if self.projection is Projection.PERSPECTIVE:
            return perspective_projection(point, self.zoom)
        return Point2D(
            int(point.x * self.zoom + _CENTER_X),
            int(point.y * self.zoom + _CENTER_Y),
            point.color,
        )

    def step(self) -> None:
        """Advance rotation and translation by one frame of held keys."""
        distance = min(self.heightmap.width, self.heightmap.height) / 200
        self.x_angle += self.rotating["x"] * ROTATION_ANGLE
        self.y_angle += self.rotating["y"] * ROTATION_ANGLE
        self.z_angle += self.rotating["z"] * ROTATION_ANGLE
        self.x_offset += self.moving["x"] * distance
        self.y_offset += self.moving["y"] * distance
        self.z_offset += self.moving["z"] * distance

    def normalise(self) -> None:
        """Clamp the zoom and bring each angle back within one turn."""
        if self.zoom <= 0:
            self.zoom = ZOOM_MIN
        if self.zoom > ZOOM_MAX:
            self.zoom = ZOOM_MAX
        self.x_angle = self._wrap(self.x_angle)
        self.y_angle = self._wrap(self.y_angle)
        self.z_angle = self._wrap(self.z_angle)

    @staticmethod
    def _wrap(angle: float) -> float:
        if angle >= _TAU:
            angle -= _TAU
        if angle <= -_TAU:
            angle += _TAU
        return angle