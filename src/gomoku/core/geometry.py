# src/gomoku/core/geometry.py

from __future__ import annotations
from typing import Tuple

from gomoku.types import Coord

Direction = Tuple[int, int]  # (dcol, drow)

# All eight unit steps around a point.
DIRECTIONS: Tuple[Direction, ...] = tuple(
    (dc, dr) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dc, dr) != (0, 0)
)

# One representative per line through a point: horizontal, vertical, both diagonals.
AXES: Tuple[Direction, ...] = ((1, 0), (0, 1), (1, 1), (1, -1))


def step(coord: Coord, d: Direction, k: int = 1) -> Coord:
    return (coord[0] + d[0] * k, coord[1] + d[1] * k)


def neg(d: Direction) -> Direction:
    return (-d[0], -d[1])
