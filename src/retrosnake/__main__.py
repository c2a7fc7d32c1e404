from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path

import pygame

from . import config
from .audio import Sounds
from .controls import handle_events
from .game import Game
from .render import draw_frame, load_texture
from .timing import TickGate


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="retro-snake", add_help=True)
    parser.add_argument(
        "--assets",
        type=Path,
        default=Path("."),
        help="Directory holding Graphics/food.png and Sounds/*.mp3.",
    )
    parser.add_argument("--mute", action="store_true", help="Do not open the audio device.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode(config.WINDOW_SIZE)
    pygame.display.set_caption(config.TITLE)
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 40)

    game = Game(rng=random.Random(args.seed))
    if not args.mute:
        Sounds.load(args.assets).attach(game)
    food_texture = load_texture(args.assets / config.FOOD_IMAGE)
    gate = TickGate()

    running = True
    while running:
        running = handle_events(game, pygame.event.get())

        if gate.ready():
            game.update()

        draw_frame(screen, game, font, food_texture)
        pygame.display.flip()
        clock.tick(config.FPS)

    pygame.quit()
    print("Best score:", game.high_score)


if __name__ == "__main__":
    main()
