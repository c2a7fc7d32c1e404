from __future__ import annotations

from typing import Callable

import pygame

from . import config


def pygame_seconds() -> float:
    return pygame.time.get_ticks() / 1000.0


class TickGate:
    """Lets one simulation tick through every `interval` seconds.

    The frame loop runs faster than the simulation; `ready()` is polled once
    per frame and only returns True when enough time has passed. Pass a fake
    `clock` to drive it deterministically.
    """

    def __init__(self, interval: float = config.TICK_INTERVAL, clock: Callable[[], float] | None = None):
        self.interval = interval
        self.clock = clock if clock is not None else pygame_seconds
        self.last_tick = 0.0

    def ready(self) -> bool:
        now = self.clock()
        if now - self.last_tick >= self.interval:
            self.last_tick = now
            return True
        return False
