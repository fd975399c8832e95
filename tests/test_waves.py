"""Tests for wave sizing, pacing and enemy mix."""
from __future__ import annotations

import random
from collections import Counter

import pytest

from tick_defense.waves import (
    WaveState,
    enemies_for_wave,
    is_cleared,
    pick_enemy_type,
    prepare_wave,
    should_spawn,
    spawn_health,
    spawn_interval_for_wave,
)


@pytest.mark.parametrize("n, expected", [(1, 5), (2, 7), (3, 9), (10, 23)])
def test_enemies_for_wave(n, expected):
    assert enemies_for_wave(n) == expected


@pytest.mark.parametrize("n, expected", [
    (1, 4), (2, 4), (3, 3), (5, 3), (6, 2), (9, 1), (12, 1), (30, 1),
])
def test_spawn_interval_for_wave(n, expected):
    assert spawn_interval_for_wave(n) == expected


def test_prepare_wave():
    state = WaveState()
    assert not state.prepared
    state.spawned = 3
    prepare_wave(state, 3)
    assert (state.number, state.to_spawn, state.spawned, state.spawn_interval) == (3, 9, 0, 3)
    assert state.prepared


class TestShouldSpawn:
    def test_first_tick_always_spawns(self):
        state = WaveState()
        prepare_wave(state, 1)
        assert should_spawn(state, 1)

    def test_interval_ticks(self):
        state = WaveState()
        prepare_wave(state, 1)
        due = [t for t in range(1, 21) if should_spawn(state, t)]
        assert due == [1, 4, 8, 12, 16, 20]

    def test_stops_when_fully_spawned(self):
        state = WaveState()
        prepare_wave(state, 1)
        state.spawned = state.to_spawn
        assert not should_spawn(state, 1)
        assert not should_spawn(state, 4)

    def test_unprepared_never_spawns(self):
        assert not should_spawn(WaveState(), 1)


class TestEnemyMix:
    def test_early_waves_only_small(self):
        rng = random.Random(0)
        for wave in (1, 2, 3):
            assert {pick_enemy_type(wave, rng) for _ in range(50)} == {"small"}

    def test_middle_waves_small_or_medium(self):
        rng = random.Random(0)
        kinds = Counter(pick_enemy_type(5, rng) for _ in range(400))
        assert set(kinds) == {"small", "medium"}

    def test_late_waves_weighted(self):
        rng = random.Random(0)
        kinds = Counter(pick_enemy_type(7, rng) for _ in range(5000))
        assert set(kinds) == {"small", "medium", "large"}
        assert 0.35 < kinds["small"] / 5000 < 0.45
        assert 0.35 < kinds["medium"] / 5000 < 0.45
        assert 0.15 < kinds["large"] / 5000 < 0.25

    def test_buckets(self):
        class Fixed:
            def __init__(self, value):
                self.value = value

            def randrange(self, stop):
                return self.value

        expected = ["small"] * 4 + ["medium"] * 4 + ["large"] * 2
        assert [pick_enemy_type(8, Fixed(roll)) for roll in range(10)] == expected

    def test_seeded_mix_is_reproducible(self):
        a = [pick_enemy_type(9, r) for r in [random.Random(3)] for _ in range(20)]
        b = [pick_enemy_type(9, r) for r in [random.Random(3)] for _ in range(20)]
        assert a == b


@pytest.mark.parametrize("kind, wave, expected", [
    ("small", 1, 3), ("small", 2, 4), ("medium", 4, 9), ("large", 7, 16), ("small", 0, 3),
])
def test_spawn_health(kind, wave, expected):
    assert spawn_health(kind, wave) == expected


def test_is_cleared():
    state = WaveState()
    prepare_wave(state, 1)
    assert not is_cleared(state, 0)
    state.spawned = 5
    assert not is_cleared(state, 1)
    assert is_cleared(state, 0)
