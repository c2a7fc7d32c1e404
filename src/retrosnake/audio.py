from __future__ import annotations

import logging
from pathlib import Path

import pygame

from . import config
from .game import FOOD_EATEN, ROUND_OVER, Game

logger = logging.getLogger(__name__)


class Sounds:
    """Eat and wall sound effects. A sound that failed to load stays None and is skipped."""

    def __init__(self, eat: pygame.mixer.Sound | None = None, wall: pygame.mixer.Sound | None = None):
        self.eat = eat
        self.wall = wall

    @classmethod
    def load(cls, assets_dir: Path) -> Sounds:
        try:
            pygame.mixer.init()
        except pygame.error as e:
            logger.warning("audio disabled, mixer unavailable: %s", e)
            return cls()
        return cls(
            eat=_load_sound(assets_dir / config.EAT_SOUND),
            wall=_load_sound(assets_dir / config.WALL_SOUND),
        )

    def attach(self, game: Game) -> None:
        game.subscribe(FOOD_EATEN, self.play_eat)
        game.subscribe(ROUND_OVER, self.play_wall)

    def play_eat(self) -> None:
        if self.eat is not None:
            self.eat.play()

    def play_wall(self) -> None:
        if self.wall is not None:
            self.wall.play()


def _load_sound(path: Path) -> pygame.mixer.Sound | None:
    try:
        return pygame.mixer.Sound(str(path))
    except (pygame.error, FileNotFoundError) as e:
        logger.warning("could not load sound %s: %s", path, e)
        return None
