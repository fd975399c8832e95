"""Coins, lives, rewards and refunds."""
from __future__ import annotations

from dataclasses import dataclass

from tick_defense.catalog import tower_type

STARTING_COINS = 8
STARTING_LIVES = 10
KILL_REWARD = 2
WAVE_REWARD_BASE = 3
REFUND_RATE = 0.6


@dataclass
class Economy:
    coins: int = STARTING_COINS
    lives: int = STARTING_LIVES

    def can_afford(self, amount: int) -> bool:
        return self.coins >= amount

    def spend(self, amount: int) -> bool:
        """Deduct *amount* if affordable. Returns False and changes nothing otherwise."""
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        if not self.can_afford(amount):
            return False
        self.coins -= amount
        return True

    def earn(self, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        self.coins += amount

    def lose_lives(self, count: int) -> None:
        self.lives -= count

    @property
    def is_defeated(self) -> bool:
        return self.lives <= 0


def wave_reward(wave: int) -> int:
    return WAVE_REWARD_BASE + wave


def invested(kind: str, level: int) -> int:
    """Build cost plus every upgrade paid to reach *level*."""
    ttype = tower_type(kind)
    total = ttype.build_cost
    for lvl in range(1, level):
        cost = ttype.upgrade_cost(lvl)
        if cost is not None:
            total += cost
    return total


def refund_value(kind: str, level: int) -> int:
    return int(invested(kind, level) * REFUND_RATE)
