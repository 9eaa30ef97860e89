"""Reading and validating ``.fdf`` height maps."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from fdfview.geometry import BLUE, BROWN, GREEN, WHITE, Point3D

INT_MAX = 2**31 - 1
_LIMIT = 2**31
_HEX_DIGITS = frozenset("0123456789abcdef")
_INT_PATTERN = re.compile(r"([+-]?)([0-9]*)(.*)", re.DOTALL)


class MapError(ValueError):
    """Raised when a map file or one of its values is not valid."""


@dataclass(frozen=True)
class HeightMap:
    """A grid of points read from a map, centred on the origin."""

    height: int
    width: int
    rows: tuple[tuple[Point3D, ...], ...]
    top_z: int = 0

    def __getitem__(self, index: tuple[int, int]) -> Point3D:
        i, j = index
        return self.rows[i][j]


def parse_int(text: str) -> int:
    """Read the height at the start of a map token.

    Digits may be followed by anything; a token with no digits is read as 0
    when it is empty or continues with a comma. Values that do not fit in a
    32-bit signed integer are rejected.
    """
    match = _INT_PATTERN.match(text)
    sign_text, digits, rest = match.groups()
    if not digits and rest[:1] in ("+", "-"):
        raise MapError("invalide value in the map or may overflow")
    value = int(digits) if digits else 0
    negative = sign_text == "-"
    if value >= (_LIMIT + 1 if negative else _LIMIT):
        raise MapError("invalide value in the map or may overflow")
    if rest and not rest.startswith(",") and not digits:
        raise MapError("invalide value in the map or may overflow")
    return -value if negative else value


def parse_hex(text: str) -> int:
    """Read a hexadecimal number without prefix; it must be below 2**31."""
    lowered = text.lower()
    if not lowered or not set(lowered) <= _HEX_DIGITS:
        raise MapError(f"invalid hexadecimal number: {text!r}")
    value = int(lowered, 16)
    if value >= _LIMIT:
        raise MapError(f"hexadecimal number too large: {text!r}")
    return value


def color_for_height(z: int) -> int:
    """Pick the default colour of a point from its height."""
    if z > 100:
        return WHITE
    if z > 20:
        return BROWN
    if z > 0:
        return GREEN
    return BLUE


def parse_color(token: str, z: int) -> int:
    """Return the colour given after a comma in ``token``, or a default.

    The colour must be written as ``,0x`` followed by hexadecimal digits.
    """
    _, separator, suffix = token.partition(",")
    if not separator:
        return color_for_height(z)
    if not suffix.startswith("0x"):
        raise MapError("invalid color prototype 0xTTRRGGBB")
    try:
        return parse_hex(suffix[2:])
    except MapError as exc:
        raise MapError("invalid color prototype 0xTTRRGGBB") from exc


def _words(line: str) -> list[str]:
    return [word for word in line.split(" ") if word]


def count_words(line: str) -> int:
    """Count the space-separated words of a line."""
    return len(_words(line))


def check_file_name(path: str) -> str:
    """Check that ``path`` names a ``.fdf`` file and return it."""
    name = str(path)
    if len(name) <= 4 or not name.endswith(".fdf"):
        raise MapError("file name should end with .fdf")
    return name


def read_lines(path: str | Path) -> list[str]:
    """Return the non-empty lines of the file at ``path``."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise MapError("invalid file or permission") from exc
    text = data.decode("latin-1")
    return [line for line in text.split("\n") if line]


def check_dimensions(lines: list[str]) -> tuple[int, int]:
    """Return ``(height, width)`` of the map held in ``lines``.

    The width is taken from the first line; no line may be shorter.
    """
    width = count_words(lines[0]) if lines else 0
    height = len(lines)
    if any(count_words(line) < width for line in lines):
        raise MapError("wrong line length")
    if width <= 0 or height <= 0:
        raise MapError("no data found")
    return height, width


def _parse_point(i: int, j: int, token: str) -> Point3D:
    z = parse_int(token)
    if z > INT_MAX:
        raise MapError("invalide value in the map or may overflow")
    return Point3D(float(j), float(i), float(z), parse_color(token, z))


def parse_map(lines: list[str]) -> HeightMap:
    """Build a height map from the lines of a map file."""
    height, width = check_dimensions(lines)
    top_z = 0
    rows = []
    for i, line in enumerate(lines):
        row = []
        for j, token in enumerate(_words(line)[:width]):
            point = _parse_point(i - height // 2, j - width // 2, token)
            top_z = max(top_z, int(point.z))
            row.append(point)
        rows.append(tuple(row))
    return HeightMap(height=height, width=width, rows=tuple(rows), top_z=top_z)


def load_map(path: str | Path) -> HeightMap:
    """Read and parse the ``.fdf`` file at ``path``."""
    name = check_file_name(str(path))
    return parse_map(read_lines(name))