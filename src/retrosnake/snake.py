from __future__ import annotations

from collections import deque
from typing import Callable

from . import config
from .grid import Cell, Direction, add_vectors


class Snake:
    def __init__(self):
        self.body: deque[Cell] = deque(config.START_BODY)
        self.direction: Direction = config.START_DIRECTION
        self.pending_growth = False

    @property
    def head(self) -> Cell:
        return self.body[0]

    def tail(self) -> list[Cell]:
        return list(self.body)[1:]

    def move(self) -> None:
        # Off-grid heads are allowed here; the game checks the walls.
        self.body.appendleft(add_vectors(self.head, self.direction))
        if self.pending_growth:
            self.pending_growth = False
        else:
            self.body.pop()

    def reset(self) -> None:
        self.body = deque(config.START_BODY)
        self.direction = config.START_DIRECTION
        self.pending_growth = False

    def draw(self, paint: Callable[[Cell], None]) -> None:
        for cell in self.body:
            paint(cell)

    def __repr__(self):
        return f"<Snake head={self.head} len={len(self.body)} dir={self.direction}>"
