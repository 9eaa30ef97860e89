"""Points in model and screen space, and rotations about the three axes."""

from __future__ import annotations

import math
from dataclasses import dataclass

WHITE = 0xFFFFFF
BROWN = 0xCC6600
RED = 0xFF0000
GREEN = 0x009900
CYAN = 0x00FFFF
BLUE = 0x0000FF


@dataclass(frozen=True)
class Point3D:
    """A point of the wireframe in model space, with its colour."""

    x: float
    y: float
    z: float
    color: int = 0


@dataclass(frozen=True)
class Point2D:
    """A point on the screen in whole pixels, with its colour."""

    x: int
    y: int
    color: int = 0


def rotate_x(point: Point3D, angle: float) -> Point3D:
    """Rotate ``point`` by ``angle`` radians about the x axis."""
    s, c = math.sin(angle), math.cos(angle)
    return Point3D(
        point.x,
        point.y * c - point.z * s,
        point.y * s + point.z * c,
        point.color,
    )


def rotate_y(point: Point3D, angle: float) -> Point3D:
    """Rotate ``point`` by ``angle`` radians about the y axis."""
    s, c = math.sin(angle), math.cos(angle)
    return Point3D(
        point.x * c + point.z * s,
        point.y,
        -point.x * s + point.z * c,
        point.color,
    )


def rotate_z(point: Point3D, angle: float) -> Point3D:
    """Rotate ``point`` by ``angle`` radians about the z axis."""
    s, c = math.sin(angle), math.cos(angle)
    return Point3D(
        point.x * c - point.y * s,
        point.x * s + point.y * c,
        point.z,
        point.color,
    )