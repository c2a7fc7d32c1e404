from __future__ import annotations

from . import config

Cell = tuple[int, int]
# Directions are unit vectors in grid space; y grows downwards.
Direction = tuple[int, int]

UP: Direction = (0, -1)
DOWN: Direction = (0, 1)
LEFT: Direction = (-1, 0)
RIGHT: Direction = (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return (a[0] + b[0], a[1] + b[1])


def dot(a: tuple[int, int], b: tuple[int, int]) -> int:
    return a[0] * b[0] + a[1] * b[1]


def is_reversal(current: Direction, new: Direction) -> bool:
    """True when `new` points straight back along `current`."""
    return dot(current, new) == -1


def in_bounds(cell: Cell) -> bool:
    x, y = cell
    return 0 <= x < config.CELL_COUNT and 0 <= y < config.CELL_COUNT
