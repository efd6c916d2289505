"""Ray casting against the tile grid of a scene."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

PIE = 3.14
TILE = 64
DOF = 50
MAX_DISTANCE = 100000.0
SCREEN_SIZE = 800
_EPSILON = 0.0001
_SOLID = frozenset("12")

Grid = Sequence[Sequence[str]]


@dataclass(frozen=True)
class RayHit:
    """Where a ray stopped and how far it travelled.

    ``vertical`` is True when the ray stopped on a vertical grid line.
    ``distance`` is MAX_DISTANCE when nothing solid was hit.
    """

    x: float
    y: float
    distance: float
    vertical: bool


def deg2rad(degrees: float) -> float:
    """Convert degrees to radians using the game's value of pi (3.14)."""
    return degrees * (PIE / 180.0)


def distance(a: tuple[float, float], b: tuple[float, float]) -> float:
    """Return the Euclidean distance between two points."""
    return math.hypot(b[0] - a[0], b[1] - a[1])


def _tile(grid: Grid, row: int, col: int) -> str:
    if 0 <= row < len(grid):
        line = grid[row]
        if 0 <= col < len(line):
            return line[col]
    return ""


def is_solid(grid: Grid, width: int, height: int, x: float, y: float) -> bool:
    """Return True when world point ``(x, y)`` lies in a wall or closed door."""
    col = x / TILE
    row = y / TILE
    if not (0 <= row < height and 0 <= col < width):
        return False
    return _tile(grid, int(row), int(col)) in _SOLID


def _march(
    grid: Grid,
    width: int,
    height: int,
    origin: tuple[float, float],
    x: float,
    y: float,
    step_x: float,
    step_y: float,
) -> tuple[float, float, float]:
    for _ in range(DOF):
        if is_solid(grid, width, height, x, y):
            return x, y, distance(origin, (x, y))
        x += step_x
        y += step_y
    return x, y, MAX_DISTANCE


def cast_horizontal(
    grid: Grid, width: int, height: int, px: float, py: float, angle: float
) -> RayHit:
    """Follow a ray across horizontal grid lines until it hits a wall.

    The resulting coordinates are clamped so that neither is negative.
    """
    base = (int(py) >> 6) << 6
    if angle > 180:
        inv_tan = 1 / math.tan(deg2rad(angle))
        y = base - _EPSILON
        x = (py - y) * inv_tan + px
        x, y, dist = _march(grid, width, height, (px, py), x, y, TILE * inv_tan, -TILE)
    elif int(angle) in (0, 180):
        x, y, dist = px, py, MAX_DISTANCE
    else:
        inv_tan = 1 / math.tan(deg2rad(angle))
        y = base + TILE
        x = (py - y) * inv_tan + px
        x, y, dist = _march(grid, width, height, (px, py), x, y, -TILE * inv_tan, TILE)
    if x <= 0:
        x = 0.0
    if y <= 0:
        y = 0.0
    return RayHit(x, y, dist, False)


def cast_vertical(
    grid: Grid, width: int, height: int, px: float, py: float, angle: float
) -> RayHit:
    """Follow a ray across vertical grid lines until it hits a wall."""
    base = (int(px) >> 6) << 6
    if 90 < angle < 270:
        tan = math.tan(deg2rad(angle))
        x = base + TILE
        y = (px - x) * tan + py
        x, y, dist = _march(grid, width, height, (px, py), x, y, TILE, -TILE * tan)
    elif int(angle) in (90, 270):
        x, y, dist = px, py, MAX_DISTANCE
    else:
        tan = math.tan(deg2rad(angle))
        x = base - _EPSILON
        y = (px - x) * tan + py
        x, y, dist = _march(grid, width, height, (px, py), x, y, -TILE, TILE * tan)
    return RayHit(x, y, dist, True)


def cast_ray(
    grid: Grid, width: int, height: int, px: float, py: float, angle: float
) -> RayHit:
    """Cast one ray and return the nearer hit; ties go to the vertical one."""
    horizontal = cast_horizontal(grid, width, height, px, py, angle)
    vertical = cast_vertical(grid, width, height, px, py, angle)
    return vertical if vertical.distance <= horizontal.distance else horizontal


def in_view(x: float, y: float) -> bool:
    """Return True when ``(x, y)`` lies inside the 800x800 screen."""
    return 0 <= x < SCREEN_SIZE and 0 <= y < SCREEN_SIZE


def faces_west(angle: float) -> bool:
    """Return True for angles strictly between 90 and 270 degrees."""
    return 90 < angle < 270