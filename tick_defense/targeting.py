"""Enemy positions and tower target selection."""
from __future__ import annotations

from tick_defense.components import Enemy
from tick_defense.grid import Board, manhattan
from tick_defense.types import EntityId, Position
from tick_defense.world import EntityStore


def enemy_position(board: Board, enemy: Enemy) -> Position | None:
    return board.path_position(enemy.path_index)


def find_target(
    store: EntityStore,
    board: Board,
    origin: Position,
    reach: int,
) -> tuple[EntityId, Enemy] | None:
    """Pick the in-range enemy furthest along the road.

    Range is Manhattan distance. Ties go to the first enemy in store
    order, which is spawn order. Enemies already at or below zero health
    are still eligible until cleanup removes them.
    """
    best: tuple[EntityId, Enemy] | None = None
    best_progress = -1
    for eid, enemy in store.query(Enemy):
        pos = enemy_position(board, enemy)
        if pos is None:
            continue
        if manhattan(pos, origin) > reach:
            continue
        if enemy.path_index > best_progress:
            best_progress = enemy.path_index
            best = (eid, enemy)
    return best


def enemy_at(store: EntityStore, board: Board, pos: Position) -> tuple[EntityId, Enemy] | None:
    """First enemy (in spawn order) standing on *pos*."""
    for eid, enemy in store.query(Enemy):
        if enemy_position(board, enemy) == pos:
            return eid, enemy
    return None
