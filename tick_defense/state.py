"""Mutable game state shared by the tick pipeline and the command surface."""
from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from tick_defense.economy import Economy
from tick_defense.signals import STATUS, SignalBus
from tick_defense.types import EntityId, Position
from tick_defense.waves import WaveState

HIT_MARKER_TTL = 3
INITIAL_STATUS = "Press start to defend!"


@dataclass
class GameState:
    """Everything the player can see besides the entities themselves.

    ``dirty`` is raised by any mutation of visible state and cleared once
    the owning Game has published its change notification.
    """

    economy: Economy = field(default_factory=Economy)
    wave: WaveState = field(default_factory=WaveState)
    hit_markers: dict[Position, int] = field(default_factory=dict)
    status: str = INITIAL_STATUS
    placing: bool = False
    selected: str = "archer"
    focused: EntityId | None = None
    dirty: bool = False


def announce(state: GameState, bus: SignalBus, message: str) -> None:
    """Replace the status line and publish it."""
    state.status = message
    state.dirty = True
    bus.publish(STATUS, message=message)
    logger.info("{}", message)
