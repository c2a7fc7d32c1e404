from __future__ import annotations

import random
from typing import Callable, Iterable

from . import config
from .grid import Cell


class Food:
    """A single food cell, re-placed whenever it is eaten or a round ends.

    Placement is rejection sampling over the whole grid: draw a uniform cell
    until it misses every occupied cell. The caller guarantees at least one
    free cell.
    """

    def __init__(self, occupied: Iterable[Cell], rng: random.Random | None = None):
        self.rng = rng if rng is not None else random.Random()
        self.position: Cell = self.place_randomly(occupied)

    def place_randomly(self, occupied: Iterable[Cell]) -> Cell:
        taken = set(occupied)
        while True:
            pos = (
                self.rng.randint(0, config.CELL_COUNT - 1),
                self.rng.randint(0, config.CELL_COUNT - 1),
            )
            if pos not in taken:
                self.position = pos
                return pos

    def draw(self, paint: Callable[[Cell], None]) -> None:
        paint(self.position)
