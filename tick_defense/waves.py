"""Wave controller - spawn counts, pacing, and enemy mix per wave."""
from __future__ import annotations

import random
from dataclasses import dataclass

from tick_defense.catalog import enemy_type

BASE_WAVE_SIZE = 5
WAVE_SIZE_STEP = 2
BASE_SPAWN_INTERVAL = 4


@dataclass
class WaveState:
    """Progress of the wave in flight.

    A fresh state (``to_spawn == spawned == 0``) means no wave has been
    prepared yet; ``start`` prepares one in that case.
    """

    number: int = 1
    to_spawn: int = 0
    spawned: int = 0
    spawn_interval: int = BASE_SPAWN_INTERVAL

    @property
    def prepared(self) -> bool:
        return self.to_spawn > 0 or self.spawned > 0

    @property
    def fully_spawned(self) -> bool:
        return self.spawned >= self.to_spawn


def enemies_for_wave(n: int) -> int:
    return BASE_WAVE_SIZE + (n - 1) * WAVE_SIZE_STEP


def spawn_interval_for_wave(n: int) -> int:
    return max(BASE_SPAWN_INTERVAL - n // 3, 1)


def prepare_wave(state: WaveState, n: int) -> None:
    """Arm *state* for wave *n*. The caller resets the wave tick counter."""
    state.number = n
    state.spawned = 0
    state.to_spawn = enemies_for_wave(n)
    state.spawn_interval = spawn_interval_for_wave(n)


def should_spawn(state: WaveState, tick: int) -> bool:
    if state.fully_spawned:
        return False
    return tick == 1 or tick % state.spawn_interval == 0


def pick_enemy_type(wave: int, rng: random.Random) -> str:
    """Enemy mix: only small early on, then a coin flip, then 40/40/20."""
    if wave < 4:
        return "small"
    if wave < 7:
        return rng.choice(("small", "medium"))
    roll = rng.randrange(10)
    if roll <= 3:
        return "small"
    if roll <= 7:
        return "medium"
    return "large"


def spawn_health(kind: str, wave: int) -> int:
    return enemy_type(kind).base_health + max(wave - 1, 0)


def is_cleared(state: WaveState, enemies_alive: int) -> bool:
    return state.fully_spawned and enemies_alive == 0
