"""Runtime configuration."""
from __future__ import annotations

from dataclasses import dataclass

from tick_defense.clock import TICK_DURATION
from tick_defense.types import ConfigError


@dataclass(frozen=True)
class GameConfig:
    """Immutable settings for one Game instance.

    Attributes:
        tick_duration: Seconds between simulation ticks; also scales the
            seconds shown for cooldowns.
        seed: Seed for the enemy-mix RNG. None draws one from the OS.
        chronicle_size: Maximum retained chronicle events (0 for unbounded).
    """

    tick_duration: float = TICK_DURATION
    seed: int | None = None
    chronicle_size: int = 256

    def __post_init__(self) -> None:
        if self.tick_duration <= 0:
            raise ConfigError(f"tick_duration must be > 0, got {self.tick_duration}")
        if self.chronicle_size < 0:
            raise ConfigError(f"chronicle_size must be >= 0, got {self.chronicle_size}")
