"""Keyboard handling: what each key does to a view."""

from __future__ import annotations

from enum import IntEnum

from fdfview.view import CoordinateSystem, OrthographicType, Projection, View


class Key(IntEnum):
    """Key codes the viewer reacts to (X11 key symbols)."""

    ESC = 65307
    Q = 113
    W = 119
    A = 97
    S = 115
    Z = 122
    X = 120
    E = 101
    R = 114
    D = 100
    F = 102
    C = 99
    V = 118
    UP_ARROW = 65362
    DOWN_ARROW = 65364
    SPACE = 32
    ENTER = 65293
    DELETE = 65288


_ROTATION_KEYS = {
    Key.Q: ("x", 1),
    Key.W: ("x", -1),
    Key.A: ("y", 1),
    Key.S: ("y", -1),
    Key.Z: ("z", 1),
    Key.X: ("z", -1),
}

_MOVEMENT_KEYS = {
    Key.E: ("x", 1),
    Key.R: ("x", -1),
    Key.D: ("y", 1),
    Key.F: ("y", -1),
    Key.C: ("z", 1),
    Key.V: ("z", -1),
}

_ZOOM_STEP = 0.5


def _as_key(key: int) -> Key | None:
    try:
        return Key(key)
    except ValueError:
        return None


def _toggle_display(view: View, key: Key) -> None:
    if key is Key.SPACE:
        view.projection = (
            Projection.PERSPECTIVE
            if view.projection is Projection.ORTHOGRAPHIC
            else Projection.ORTHOGRAPHIC
        )
    elif key is Key.ENTER:
        view.coordinates = (
            CoordinateSystem.SPHERICAL
            if view.coordinates is CoordinateSystem.CARTESIAN
            else CoordinateSystem.CARTESIAN
        )
        hm = view.heightmap
        view.zoom = 500.0 / max(float(max(hm.width, hm.height)), float(hm.top_z))
    elif key is Key.DELETE:
        view.orthographic_type = (
            OrthographicType.PARALLEL
            if view.orthographic_type is OrthographicType.ISOMETRIC
            else OrthographicType.ISOMETRIC
        )
        view.reset()


def key_press(view: View, key: int) -> bool:
    """Apply a pressed key to ``view``.

    Returns True when the key asks the viewer to close, False otherwise.
    Unknown key codes are ignored.
    """
    pressed = _as_key(key)
    if pressed is None:
        return False
    if pressed is Key.ESC:
        return True
    if pressed in _ROTATION_KEYS:
        axis, direction = _ROTATION_KEYS[pressed]
        view.rotating[axis] = direction
    elif pressed in _MOVEMENT_KEYS:
        axis, direction = _MOVEMENT_KEYS[pressed]
        view.moving[axis] = direction
    elif pressed is Key.UP_ARROW:
        view.zoom += _ZOOM_STEP
    elif pressed is Key.DOWN_ARROW:
        view.zoom -= _ZOOM_STEP
    else:
        _toggle_display(view, pressed)
    return False


def key_release(view: View, key: int) -> None:
    """Stop the rotation or movement that a released key was driving."""
    released = _as_key(key)
    if released in _ROTATION_KEYS:
        axis, _ = _ROTATION_KEYS[released]
        view.rotating[axis] = 0
    elif released in _MOVEMENT_KEYS:
        axis, _ = _MOVEMENT_KEYS[released]
        view.moving[axis] = 0