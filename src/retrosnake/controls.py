from __future__ import annotations

import pygame

from .game import Game, Stage
from .grid import DOWN, LEFT, RIGHT, UP, Direction, is_reversal

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}
PAUSE_KEYS = (pygame.K_SPACE,)
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


def change_direction(game: Game, direction: Direction) -> None:
    # Turning straight back would run the head into the neck.
    if not is_reversal(game.snake.direction, direction):
        game.snake.direction = direction
    game.stage = Stage.RUNNING


def pause(game: Game) -> None:
    game.stage = Stage.PAUSED


def handle_events(game: Game, events) -> bool:
    """Apply keyboard events to the game. Returns False once a quit is requested."""
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type != pygame.KEYDOWN:
            continue
        if event.key in QUIT_KEYS:
            return False
        if event.key in PAUSE_KEYS:
            pause(game)
            continue
        new_dir = KEY_DIRECTIONS.get(event.key)
        if new_dir:
            change_direction(game, new_dir)
    return True
