from __future__ import annotations

import logging
from pathlib import Path

import pygame

from . import config
from .game import Game
from .grid import Cell

logger = logging.getLogger(__name__)


def cell_rect(cell: Cell) -> pygame.Rect:
    x, y = cell
    return pygame.Rect(
        config.OFFSET + x * config.CELL_SIZE,
        config.OFFSET + y * config.CELL_SIZE,
        config.CELL_SIZE,
        config.CELL_SIZE,
    )


def load_texture(path: Path) -> pygame.Surface | None:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError) as e:
        logger.warning("could not load texture %s: %s", path, e)
        return None


def draw_frame(
    screen: pygame.Surface,
    game: Game,
    font: pygame.font.Font,
    food_texture: pygame.Surface | None = None,
) -> None:
    screen.fill(config.GREEN)

    border = pygame.Rect(config.OFFSET - 5, config.OFFSET - 5, config.WIDTH + 10, config.HEIGHT + 10)
    pygame.draw.rect(screen, config.DARK_GREEN, border, width=5)

    title = font.render(config.TITLE, True, config.DARK_GREEN)
    screen.blit(title, (config.OFFSET - 5, 20))
    score = font.render(f"Score: {game.score}", True, config.DARK_GREEN)
    screen.blit(score, (config.OFFSET - 5, config.OFFSET + config.HEIGHT + 10))

    def paint_segment(cell: Cell) -> None:
        pygame.draw.rect(screen, config.DARK_GREEN, cell_rect(cell), border_radius=config.CELL_SIZE // 4)

    def paint_food(cell: Cell) -> None:
        rect = cell_rect(cell)
        if food_texture is None:
            pygame.draw.rect(screen, config.FOOD_FALLBACK, rect)
        else:
            screen.blit(food_texture, rect.topleft)

    game.draw(paint_segment, paint_food)
