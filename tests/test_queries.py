"""Tests for inspection, tooltips and read-only views."""
from __future__ import annotations

import dataclasses

import pytest

from tick_defense import Game, GameConfig, Position
from tick_defense.signals import CHANGED


class TestInspect:
    def test_tower_focuses_and_describes(self, game, build):
        build(game, "archer", Position(0, 0))
        game.inspect(Position(4, 0))
        assert game.focused_tower is None
        assert game.inspect(Position(0, 0))
        assert game.focused_tower.position == Position(0, 0)
        assert game.status == (
            "🏹 Archer Tower Lv1 | damage 1 | range 2 tiles | fires every 1.8s | cooldown 0.0s"
        )

    def test_timings_follow_tick_duration(self, build):
        game = Game(GameConfig(seed=1, tick_duration=1.0))
        build(game, "archer", Position(0, 0))
        game.inspect(Position(0, 0))
        assert "fires every 3.0s | cooldown 0.0s" in game.status
        assert "Fires every 3.0s" in game.help_text(Position(0, 0))

    def test_frost_mentions_slow(self, game, build):
        build(game, "frost", Position(0, 0))
        game.inspect(Position(0, 0))
        assert game.status.endswith("| cooldown 0.0s | slows 2 ticks")

    def test_cooldown_shown_in_seconds(self, running_game, build):
        build(running_game, "archer", Position(2, 0))
        running_game.step()
        running_game.inspect(Position(2, 0))
        assert running_game.status.endswith("cooldown 1.2s")

    def test_enemy(self, running_game):
        running_game.step()
        assert running_game.inspect(Position(3, 0))
        assert running_game.status == "👾 Small Enemy health 3/3"

    def test_frozen_enemy(self, running_game, build):
        build(running_game, "frost", Position(2, 0))
        running_game.step()
        running_game.inspect(Position(3, 0))
        assert running_game.status == "👾 Small Enemy health 3/3 | frozen for 2 ticks"
        assert running_game.focused_tower is None

    def test_empty_road(self, game):
        assert game.inspect(Position(1, 3))
        assert game.status == "This is the road enemies walk"

    def test_empty_grass(self, game):
        assert game.inspect(Position(6, 0))
        assert game.status == "Empty tile, press place to build: Archer Tower"

    def test_empty_grass_when_broke(self, game):
        game.select_tower_type("blaze")
        game.inspect(Position(6, 0))
        assert game.status == "Empty tile, but not enough coins to build"

    def test_out_of_bounds_ignored(self, game):
        assert not game.inspect(Position(0, 5))
        assert game.status == "Press start to defend!"

    def test_allowed_after_game_over(self, running_game):
        while running_game.step():
            pass
        assert running_game.inspect(Position(0, 0))


class TestHelpText:
    def test_tower(self, game, build):
        build(game, "archer", Position(0, 0))
        assert game.help_text(Position(0, 0)) == (
            "🏹 Archer Tower Lv1\n"
            "Damage: 1\n"
            "Range: 2 tiles\n"
            "Fires every 1.8s\n"
            "Cooldown left: 0.0s\n"
            "Upgrade cost: 6 coins"
        )

    def test_max_level_tower(self, game, build):
        game._state.economy.coins = 50
        build(game, "frost", Position(0, 0))
        game.upgrade_focused()
        game.upgrade_focused()
        text = game.help_text(Position(0, 0))
        assert "Slow: holds enemies for 4 ticks" in text
        assert "Fires every 1.2s" in text
        assert text.endswith("Max level reached")

    def test_enemy(self, running_game):
        running_game.step()
        assert running_game.help_text(Position(3, 0)) == "👾 Small Enemy\nHealth: 3/3"

    def test_road(self, game):
        assert game.help_text(Position(3, 2)) == "Enemy road"

    def test_grass(self, game):
        assert game.help_text(Position(0, 0)) == "Empty tile\nCan build: Archer Tower (5 coins)"
        game._state.economy.coins = 0
        assert game.help_text(Position(0, 0)) == "Empty tile\nNot enough coins to build"

    def test_does_not_mutate(self, game, build):
        build(game, "archer", Position(0, 0))
        seen = []
        game.bus.subscribe(CHANGED, lambda name, data: seen.append(name))
        status = game.status
        game.help_text(Position(0, 0))
        game.help_text(Position(3, 0))
        game.tile_symbol(Position(0, 0))
        game.snapshot()
        assert game.status == status
        assert seen == []
        assert game.bus.pending() == 0


class TestTileQueries:
    def test_symbols(self, running_game, build):
        build(running_game, "archer", Position(0, 0))
        running_game.step()
        assert running_game.tile_symbol(Position(0, 0)) == "🏹"
        assert running_game.tile_symbol(Position(3, 0)) == "👾"
        assert running_game.tile_symbol(Position(6, 0)) is None

    def test_levels_and_health(self, running_game, build):
        build(running_game, "archer", Position(2, 0))
        running_game.step()
        assert running_game.tower_level_at(Position(2, 0)) == 1
        assert running_game.tower_level_at(Position(3, 0)) is None
        assert running_game.enemy_health_at(Position(3, 0)) == 2
        assert running_game.enemy_health_at(Position(2, 0)) is None

    def test_can_place(self, game, build):
        assert game.can_place(Position(0, 0))
        assert not game.can_place(Position(3, 0))
        assert not game.can_place(Position(-1, 0))
        build(game, "archer", Position(0, 0))
        assert not game.can_place(Position(0, 0))


class TestFocusQueries:
    def test_nothing_focused(self, game):
        assert game.upgrade_button_label() == "Select a tower to upgrade"
        assert game.focused_summary() is None
        assert not game.can_upgrade_focused
        assert not game.can_remove_focused

    def test_focused_archer(self, game, build):
        build(game, "archer", Position(0, 0))
        assert game.upgrade_button_label() == "Upgrade to Lv2 (6 coins)"
        assert game.focused_summary() == "Selected: Archer Tower Lv1"
        assert not game.can_upgrade_focused
        assert game.can_remove_focused
        game._state.economy.coins = 6
        assert game.can_upgrade_focused

    def test_max_level(self, game, build):
        game._state.economy.coins = 50
        build(game, "blaze", Position(0, 0))
        game.upgrade_focused()
        game.upgrade_focused()
        assert game.upgrade_button_label() == "Max level"
        assert game.focused_summary() == "Selected: Blaze Tower Lv3"
        assert not game.can_upgrade_focused


class TestSnapshot:
    def test_contents(self, running_game, build):
        build(running_game, "archer", Position(2, 0))
        running_game.step()
        snap = running_game.snapshot()
        assert snap.running
        assert not snap.game_over
        assert (snap.coins, snap.lives, snap.wave) == (3, 10, 1)
        assert snap.selected == "archer"
        assert snap.focused == snap.towers[0].eid
        assert snap.hit_markers == frozenset({Position(3, 0)})
        assert snap.tower_at(Position(2, 0)).cooldown == 2
        assert snap.enemy_at(Position(3, 0)).health == 2
        assert snap.enemy_at(Position(0, 0)) is None

    def test_is_frozen(self, running_game):
        running_game.step()
        snap = running_game.snapshot()
        with pytest.raises(dataclasses.FrozenInstanceError):
            snap.coins = 100
        with pytest.raises(dataclasses.FrozenInstanceError):
            snap.enemies[0].health = 0

    def test_detached_from_later_ticks(self, running_game):
        running_game.step()
        snap = running_game.snapshot()
        running_game.step()
        assert snap.enemies[0].position == Position(3, 0)
        assert running_game.enemies()[0].position == Position(3, 1)
