from __future__ import annotations

import enum
import logging
import random
from typing import Callable

from .food import Food
from .grid import Cell, in_bounds
from .snake import Snake

logger = logging.getLogger(__name__)

FOOD_EATEN = "food-eaten"
ROUND_OVER = "round-over"
EVENTS = (FOOD_EATEN, ROUND_OVER)


class Stage(enum.Enum):
    RUNNING = "running"
    PAUSED = "paused"


class Game:
    """Round controller: owns the snake, the food, the score and the stage.

    The presentation layer calls `update()` once per gated tick and `draw()`
    once per frame. Input handlers write `stage` and `snake.direction`
    directly (see `retrosnake.controls`).

    Attributes:
        snake: the only snake, created once and reset between rounds
        food: the only food item, always placed off the snake body
        stage: RUNNING or PAUSED; PAUSED ticks change nothing
        score: food eaten in the current round
        high_score: best round score seen by this process
    """

    def __init__(self, rng: random.Random | None = None):
        self.snake = Snake()
        self.food = Food(self.snake.body, rng=rng)
        self.stage = Stage.RUNNING
        self.score = 0
        self.high_score = 0
        self._listeners: dict[str, list[Callable[[], None]]] = {name: [] for name in EVENTS}

    def subscribe(self, event: str, callback: Callable[[], None]) -> None:
        if event not in self._listeners:
            raise ValueError(f"unknown event: {event!r}")
        self._listeners[event].append(callback)

    def _emit(self, event: str) -> None:
        logger.debug("%s (score=%d)", event, self.score)
        for callback in self._listeners[event]:
            callback()

    def update(self) -> None:
        if self.stage is not Stage.RUNNING:
            return

        self.snake.move()
        self.check_collision_with_food()
        # A round-over resets the snake, so later checks would only see the
        # fresh body; stop at the first hit.
        if self.check_collision_with_edges() or self.check_collision_with_tail():
            self.game_over()

    def check_collision_with_food(self) -> bool:
        if self.snake.head != self.food.position:
            return False
        self.food.place_randomly(self.snake.body)
        self.snake.pending_growth = True
        self.score += 1
        self.high_score = max(self.high_score, self.score)
        self._emit(FOOD_EATEN)
        return True

    def check_collision_with_edges(self) -> bool:
        return not in_bounds(self.snake.head)

    def check_collision_with_tail(self) -> bool:
        return self.snake.head in self.snake.tail()

    def game_over(self) -> None:
        logger.debug("round over at %s, final score %d", self.snake.head, self.score)
        self.snake.reset()
        self.food.place_randomly(self.snake.body)
        self.stage = Stage.PAUSED
        self.score = 0
        self._emit(ROUND_OVER)

    def draw(self, paint_segment: Callable[[Cell], None], paint_food: Callable[[Cell], None]) -> None:
        self.food.draw(paint_food)
        self.snake.draw(paint_segment)

    def __repr__(self):
        return f"<Game stage={self.stage.name} score={self.score} snake={self.snake!r}>"
