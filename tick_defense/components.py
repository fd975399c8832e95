"""Enemy and Tower components stored in the EntityStore."""
from __future__ import annotations

from dataclasses import dataclass

from tick_defense.types import Position


@dataclass
class Enemy:
    """A walker on the path.

    ``path_index`` is -1 until the first move puts the enemy on the road.
    ``health`` may dip below zero between the attack and cleanup stages.
    """

    kind: str
    path_index: int
    health: int
    max_health: int
    slow_ticks: int = 0


@dataclass
class Tower:
    kind: str
    position: Position
    level: int = 1
    cooldown: int = 0
