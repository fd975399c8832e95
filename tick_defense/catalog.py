"""Static tower and enemy definitions."""
from __future__ import annotations

from dataclasses import dataclass

from tick_defense.types import CatalogError


@dataclass(frozen=True)
class TowerLevelStats:
    """Combat numbers for one tower level.

    Attributes:
        damage: Health removed from the target per hit (0 for pure slows).
        range: Maximum Manhattan distance to a target, in tiles.
        cooldown_ticks: Ticks the tower rests after firing.
        slow_ticks: Ticks the target is held in place (0 for no slow).
    """

    damage: int
    range: int
    cooldown_ticks: int
    slow_ticks: int = 0


@dataclass(frozen=True)
class TowerType:
    """Immutable tower definition with per-level stats and upgrade prices."""

    name: str
    display_name: str
    emoji: str
    build_cost: int
    levels: tuple[TowerLevelStats, ...]
    upgrade_costs: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("TowerType name must be non-empty")
        if self.build_cost <= 0:
            raise ValueError(f"build_cost must be > 0, got {self.build_cost}")
        if not self.levels:
            raise ValueError(f"{self.name} needs at least one level")
        if len(self.upgrade_costs) != len(self.levels) - 1:
            raise ValueError(
                f"{self.name} has {len(self.levels)} levels but "
                f"{len(self.upgrade_costs)} upgrade costs"
            )

    @property
    def max_level(self) -> int:
        return len(self.levels)

    def stats(self, level: int) -> TowerLevelStats:
        clamped = min(max(level, 1), self.max_level)
        return self.levels[clamped - 1]

    def upgrade_cost(self, level: int) -> int | None:
        """Price to go from *level* to the next one, or None at max level."""
        if level >= self.max_level:
            return None
        return self.upgrade_costs[max(level, 1) - 1]


@dataclass(frozen=True)
class EnemyType:
    name: str
    display_name: str
    emoji: str
    base_health: int


ARCHER = TowerType(
    name="archer",
    display_name="Archer Tower",
    emoji="🏹",
    build_cost=5,
    levels=(
        TowerLevelStats(damage=1, range=2, cooldown_ticks=2),
        TowerLevelStats(damage=2, range=2, cooldown_ticks=2),
        TowerLevelStats(damage=3, range=3, cooldown_ticks=1),
    ),
    upgrade_costs=(6, 8),
)

FROST = TowerType(
    name="frost",
    display_name="Frost Tower",
    emoji="❄️",
    build_cost=7,
    levels=(
        TowerLevelStats(damage=0, range=2, cooldown_ticks=2, slow_ticks=2),
        TowerLevelStats(damage=1, range=2, cooldown_ticks=2, slow_ticks=3),
        TowerLevelStats(damage=1, range=3, cooldown_ticks=1, slow_ticks=4),
    ),
    upgrade_costs=(7, 10),
)

BLAZE = TowerType(
    name="blaze",
    display_name="Blaze Tower",
    emoji="🔥",
    build_cost=9,
    levels=(
        TowerLevelStats(damage=3, range=2, cooldown_ticks=3),
        TowerLevelStats(damage=4, range=2, cooldown_ticks=3),
        TowerLevelStats(damage=6, range=3, cooldown_ticks=2),
    ),
    upgrade_costs=(10, 14),
)

SMALL = EnemyType(name="small", display_name="Small Enemy", emoji="👾", base_health=3)
MEDIUM = EnemyType(name="medium", display_name="Medium Enemy", emoji="👹", base_health=6)
LARGE = EnemyType(name="large", display_name="Large Enemy", emoji="🐲", base_health=10)

TOWER_TYPES: dict[str, TowerType] = {t.name: t for t in (ARCHER, FROST, BLAZE)}
ENEMY_TYPES: dict[str, EnemyType] = {e.name: e for e in (SMALL, MEDIUM, LARGE)}


def tower_type(name: str) -> TowerType:
    """Look up a tower definition. Raises CatalogError if unknown."""
    if name not in TOWER_TYPES:
        raise CatalogError(f"Unknown tower type: {name!r}")
    return TOWER_TYPES[name]


def enemy_type(name: str) -> EnemyType:
    """Look up an enemy definition. Raises CatalogError if unknown."""
    if name not in ENEMY_TYPES:
        raise CatalogError(f"Unknown enemy type: {name!r}")
    return ENEMY_TYPES[name]


def stats(name: str, level: int) -> TowerLevelStats:
    return tower_type(name).stats(level)


def upgrade_cost(name: str, level: int) -> int | None:
    return tower_type(name).upgrade_cost(level)
