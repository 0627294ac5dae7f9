"""
Geometry - Direction vectors and straight-line paths on the grid.

Knows about coordinates and orientations only, never about rules.
"""

from __future__ import annotations

from .state import Board, Coord, Orientation


ORIENTATION_VECTORS: dict[Orientation, tuple[int, int]] = {
    Orientation.N: (0, 1),
    Orientation.NE: (1, 1),
    Orientation.E: (1, 0),
    Orientation.SE: (1, -1),
    Orientation.S: (0, -1),
    Orientation.SW: (-1, -1),
    Orientation.W: (-1, 0),
    Orientation.NW: (-1, 1),
    Orientation.UP: (0, 0),
}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def direction_vector(orientation: Orientation) -> tuple[int, int]:
    """Unit step for an orientation; UP does not move."""
    return ORIENTATION_VECTORS[orientation]


def matches_direction(start: Coord, end: Coord, orientation: Orientation) -> bool:
    """
    Can you get from `start` to `end` by stepping along `orientation`?

    Only straight lines count: horizontal, vertical or an exact diagonal.
    A zero displacement matches UP and nothing else.
    """
    diff_x = end[0] - start[0]
    diff_y = end[1] - start[1]

    if diff_x != 0 and diff_y != 0 and abs(diff_x) != abs(diff_y):
        # not a 1:1 diagonal
        return False

    dir_x, dir_y = direction_vector(orientation)
    return dir_x == _sign(diff_x) and dir_y == _sign(diff_y)


def path_between(start: Coord, end: Coord, orientation: Orientation) -> list[Coord]:
    """
    Cells strictly between `start` and `end` along `orientation`.

    Assumes matches_direction(start, end, orientation) holds.
    """
    dir_x, dir_y = direction_vector(orientation)
    steps = max(abs(end[0] - start[0]), abs(end[1] - start[1]))
    return [
        (start[0] + dir_x * k, start[1] + dir_y * k)
        for k in range(1, steps)
    ]


def is_obstructed(board: Board, start: Coord, end: Coord, orientation: Orientation) -> bool:
    """True if any cell between start and end is occupied (end excluded)."""
    return any(board[x][y] is not None for x, y in path_between(start, end, orientation))
