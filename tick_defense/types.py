"""Shared type aliases, value types and errors for the defense engine."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

EntityId = int


@dataclass(frozen=True, slots=True)
class Position:
    row: int
    col: int


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]
    random: _random.Random


class DeadEntityError(KeyError):
    """Raised when operating on an entity that is not alive."""

    def __init__(self, entity_id: int, message: str) -> None:
        self.entity_id = entity_id
        super().__init__(message)


class CatalogError(KeyError):
    """Raised when a tower or enemy type name is not in the catalog."""


class ConfigError(ValueError):
    """Raised when a GameConfig value is out of range."""


if TYPE_CHECKING:
    from tick_defense.world import EntityStore

System = Callable[["EntityStore", TickContext], None]
