"""System factories for the per-tick pipeline.

Register them in this order: spawn, movement, attack, cleanup, effect
decay, wave check, loss check.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from loguru import logger

from tick_defense.catalog import stats
from tick_defense.clock import Clock
from tick_defense.components import Enemy, Tower
from tick_defense.economy import KILL_REWARD, wave_reward
from tick_defense.grid import Board
from tick_defense.lifecycle import DEFEAT, Lifecycle
from tick_defense.signals import (
    ENEMY_DEFEATED,
    ENEMY_ESCAPED,
    ENEMY_SPAWNED,
    GAME_OVER,
    TOWER_FIRED,
    WAVE_CLEARED,
    SignalBus,
)
from tick_defense.state import HIT_MARKER_TTL, GameState, announce
from tick_defense.targeting import enemy_position, find_target
from tick_defense.waves import is_cleared, pick_enemy_type, prepare_wave, should_spawn, spawn_health

if TYPE_CHECKING:
    from tick_defense.types import TickContext
    from tick_defense.world import EntityStore


def _count(n: int, singular: str, plural: str) -> str:
    return f"{n} {singular if n == 1 else plural}"


def make_spawn_system(
    state: GameState, bus: SignalBus,
) -> Callable[[EntityStore, TickContext], None]:
    """Return a system that releases at most one enemy per tick on the wave's cadence."""

    def spawn_system(store: EntityStore, ctx: TickContext) -> None:
        wave = state.wave
        if not should_spawn(wave, ctx.tick_number):
            return
        kind = pick_enemy_type(wave.number, ctx.random)
        health = spawn_health(kind, wave.number)
        eid = store.spawn()
        store.attach(eid, Enemy(kind=kind, path_index=-1, health=health, max_health=health))
        wave.spawned += 1
        state.dirty = True
        bus.publish(ENEMY_SPAWNED, eid=eid, kind=kind, health=health)
        logger.debug(
            "wave {} tick {}: spawned {} #{} ({}/{})",
            wave.number, ctx.tick_number, kind, eid, wave.spawned, wave.to_spawn,
        )

    return spawn_system


def make_movement_system(
    board: Board, state: GameState, bus: SignalBus,
) -> Callable[[EntityStore, TickContext], None]:
    """Return a system that walks enemies one tile, or burns a slow tick instead."""

    path_length = len(board.path)

    def movement_system(store: EntityStore, ctx: TickContext) -> None:
        escaped = 0
        for eid, enemy in store.query(Enemy):
            state.dirty = True
            if enemy.slow_ticks > 0:
                enemy.slow_ticks -= 1
                continue
            enemy.path_index += 1
            if enemy.path_index >= path_length:
                store.despawn(eid)
                escaped += 1
                bus.publish(ENEMY_ESCAPED, eid=eid, kind=enemy.kind, wave=state.wave.number)
        if escaped > 0:
            state.economy.lose_lives(escaped)
            announce(state, bus, f"{_count(escaped, 'enemy', 'enemies')} broke through!")

    return movement_system


def make_attack_system(
    board: Board, state: GameState, bus: SignalBus,
) -> Callable[[EntityStore, TickContext], None]:
    """Return a system that lets every ready tower hit its best target.

    Nothing happens while the field is empty: cooldowns only count down
    while at least one enemy is alive.
    """

    def attack_system(store: EntityStore, ctx: TickContext) -> None:
        if store.count(Enemy) == 0:
            return
        for tid, tower in store.query(Tower):
            if tower.cooldown > 0:
                tower.cooldown -= 1
                state.dirty = True
                continue
            level_stats = stats(tower.kind, tower.level)
            target = find_target(store, board, tower.position, level_stats.range)
            if target is None:
                continue
            eid, enemy = target
            enemy.health -= level_stats.damage
            if level_stats.slow_ticks > 0:
                enemy.slow_ticks = max(enemy.slow_ticks, level_stats.slow_ticks)
            pos = enemy_position(board, enemy)
            if pos is not None:
                state.hit_markers[pos] = HIT_MARKER_TTL
            tower.cooldown = level_stats.cooldown_ticks
            state.dirty = True
            bus.publish(
                TOWER_FIRED, tower=tid, target=eid, damage=level_stats.damage, wave=state.wave.number,
            )

    return attack_system


def make_cleanup_system(
    state: GameState, bus: SignalBus,
) -> Callable[[EntityStore, TickContext], None]:
    """Return a system that removes dead enemies and pays the bounty."""

    def cleanup_system(store: EntityStore, ctx: TickContext) -> None:
        defeated = [(eid, e) for eid, e in store.query(Enemy) if e.health <= 0]
        if not defeated:
            return
        for eid, enemy in defeated:
            store.despawn(eid)
            bus.publish(ENEMY_DEFEATED, eid=eid, kind=enemy.kind, wave=state.wave.number)
        reward = KILL_REWARD * len(defeated)
        state.economy.earn(reward)
        announce(
            state, bus,
            f"Defeated {_count(len(defeated), 'enemy', 'enemies')}, "
            f"earned {reward} coins!",
        )

    return cleanup_system


def make_effect_decay_system(
    state: GameState,
) -> Callable[[EntityStore, TickContext], None]:
    """Return a system that ages hit markers and drops expired ones."""

    def effect_decay_system(store: EntityStore, ctx: TickContext) -> None:
        markers = state.hit_markers
        if not markers:
            return
        for pos in list(markers):
            ttl = markers[pos] - 1
            if ttl > 0:
                markers[pos] = ttl
            else:
                del markers[pos]
        state.dirty = True

    return effect_decay_system


def make_wave_system(
    state: GameState, bus: SignalBus, clock: Clock,
) -> Callable[[EntityStore, TickContext], None]:
    """Return a system that pays out and arms the next wave once the field is clear."""

    def wave_system(store: EntityStore, ctx: TickContext) -> None:
        if not is_cleared(state.wave, store.count(Enemy)):
            return
        completed = state.wave.number
        reward = wave_reward(completed)
        state.economy.earn(reward)
        announce(state, bus, f"Wave {completed} held!")
        bus.publish(WAVE_CLEARED, wave=completed, reward=reward)
        prepare_wave(state.wave, completed + 1)
        clock.reset()
        logger.debug(
            "wave {} armed: {} enemies every {} ticks",
            state.wave.number, state.wave.to_spawn, state.wave.spawn_interval,
        )

    return wave_system


def make_loss_system(
    state: GameState, lifecycle: Lifecycle, bus: SignalBus,
) -> Callable[[EntityStore, TickContext], None]:
    """Return a system that ends the game when lives run out."""

    def loss_system(store: EntityStore, ctx: TickContext) -> None:
        if not state.economy.is_defeated:
            return
        lifecycle.fire(DEFEAT)
        cleared = max(state.wave.number - 1, 0)
        announce(state, bus, f"Game over! Held off {_count(cleared, 'wave', 'waves')}.")
        bus.publish(GAME_OVER, waves_cleared=cleared)
        ctx.request_stop()

    return loss_system
