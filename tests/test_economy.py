"""Tests for coins, lives, rewards and refunds."""
from __future__ import annotations

import pytest

from tick_defense.economy import (
    STARTING_COINS,
    STARTING_LIVES,
    Economy,
    invested,
    refund_value,
    wave_reward,
)


class TestEconomy:
    def test_defaults(self):
        economy = Economy()
        assert (economy.coins, economy.lives) == (STARTING_COINS, STARTING_LIVES) == (8, 10)

    def test_spend_all_or_nothing(self):
        economy = Economy(coins=5)
        assert not economy.spend(6)
        assert economy.coins == 5
        assert economy.spend(5)
        assert economy.coins == 0

    def test_negative_amounts_rejected(self):
        economy = Economy()
        with pytest.raises(ValueError):
            economy.spend(-1)
        with pytest.raises(ValueError):
            economy.earn(-1)

    def test_earn(self):
        economy = Economy(coins=0)
        economy.earn(4)
        assert economy.coins == 4

    def test_defeat_at_zero_or_below(self):
        economy = Economy(lives=2)
        economy.lose_lives(1)
        assert not economy.is_defeated
        economy.lose_lives(2)
        assert economy.lives == -1
        assert economy.is_defeated


@pytest.mark.parametrize("wave, expected", [(1, 4), (2, 5), (10, 13)])
def test_wave_reward(wave, expected):
    assert wave_reward(wave) == expected


class TestRefund:
    @pytest.mark.parametrize("kind, level, total", [
        ("archer", 1, 5), ("archer", 2, 11), ("archer", 3, 19),
        ("frost", 1, 7), ("frost", 3, 24),
        ("blaze", 1, 9), ("blaze", 2, 19), ("blaze", 3, 33),
    ])
    def test_invested(self, kind, level, total):
        assert invested(kind, level) == total

    @pytest.mark.parametrize("kind, level, refund", [
        ("archer", 1, 3), ("archer", 2, 6), ("archer", 3, 11),
        ("frost", 1, 4), ("frost", 2, 8), ("frost", 3, 14),
        ("blaze", 1, 5), ("blaze", 2, 11), ("blaze", 3, 19),
    ])
    def test_refund_is_sixty_percent_floored(self, kind, level, refund):
        assert refund_value(kind, level) == refund
