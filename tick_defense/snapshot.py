"""Read-only views of the game for renderers."""
from __future__ import annotations

from dataclasses import dataclass

from tick_defense.types import EntityId, Position


@dataclass(frozen=True)
class EnemyView:
    eid: EntityId
    kind: str
    position: Position | None
    health: int
    max_health: int
    slow_ticks: int


@dataclass(frozen=True)
class TowerView:
    eid: EntityId
    kind: str
    position: Position
    level: int
    cooldown: int


@dataclass(frozen=True)
class GameSnapshot:
    phase: str
    coins: int
    lives: int
    wave: int
    status: str
    placing: bool
    selected: str
    focused: EntityId | None
    enemies: tuple[EnemyView, ...]
    towers: tuple[TowerView, ...]
    hit_markers: frozenset[Position]

    @property
    def running(self) -> bool:
        return self.phase == "running"

    @property
    def game_over(self) -> bool:
        return self.phase == "game_over"

    def tower_at(self, pos: Position) -> TowerView | None:
        for tower in self.towers:
            if tower.position == pos:
                return tower
        return None

    def enemy_at(self, pos: Position) -> EnemyView | None:
        for enemy in self.enemies:
            if enemy.position == pos:
                return enemy
        return None
