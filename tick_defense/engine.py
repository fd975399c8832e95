"""Engine - tick pipeline, pacing, and stop hooks."""

from __future__ import annotations

import os
import random
from typing import Callable

from loguru import logger

from tick_defense.clock import TICK_DURATION, Clock
from tick_defense.types import System, TickContext
from tick_defense.world import EntityStore


class Engine:
    def __init__(self, tick_duration: float = TICK_DURATION, seed: int | None = None) -> None:
        self._clock = Clock(tick_duration)
        self._store = EntityStore()
        self._systems: list[System] = []
        self._stop_hooks: list[Callable[[EntityStore, TickContext], None]] = []
        self._stop_requested: bool = False
        self._ticks_run = 0

        if seed is None:
            seed = int.from_bytes(os.urandom(8), "big")
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def store(self) -> EntityStore:
        return self._store

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def ticks_run(self) -> int:
        """Total ticks executed, unaffected by per-wave clock resets."""
        return self._ticks_run

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_stop(self, hook: Callable[[EntityStore, TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def step(self) -> None:
        """Advance the clock and run every system once, in registration order."""
        self._stop_requested = False
        self._clock.advance()
        self._ticks_run += 1
        ctx = self._clock.context(self._request_stop, self._rng)
        for system in self._systems:
            system(self._store, ctx)
            if self._stop_requested:
                logger.debug("stop requested during tick {}", ctx.tick_number)
                break

        if self._stop_requested:
            for hook in self._stop_hooks:
                hook(self._store, ctx)

    def reset(self) -> None:
        """Despawn everything and zero both tick counters. The RNG stream continues."""
        self._store.clear()
        self._clock.reset()
        self._ticks_run = 0
