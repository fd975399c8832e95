"""tick-defense - A tick-driven tower-defense simulation engine."""

from loguru import logger

from tick_defense.catalog import ENEMY_TYPES, TOWER_TYPES, EnemyType, TowerLevelStats, TowerType
from tick_defense.config import GameConfig
from tick_defense.game import Game
from tick_defense.grid import COLUMNS, PATH, ROWS, Board
from tick_defense.log import configure_logging
from tick_defense.snapshot import EnemyView, GameSnapshot, TowerView
from tick_defense.types import CatalogError, ConfigError, DeadEntityError, Position

logger.disable("tick_defense")

__all__ = [
    "Game",
    "GameConfig",
    "GameSnapshot",
    "EnemyView",
    "TowerView",
    "Board",
    "Position",
    "ROWS",
    "COLUMNS",
    "PATH",
    "TowerType",
    "TowerLevelStats",
    "EnemyType",
    "TOWER_TYPES",
    "ENEMY_TYPES",
    "CatalogError",
    "ConfigError",
    "DeadEntityError",
    "configure_logging",
]
