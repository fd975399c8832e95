from __future__ import annotations

from typing import Callable

import pytest

from tick_defense import Game, GameConfig, Position


@pytest.fixture
def game() -> Game:
    return Game(GameConfig(seed=42))


@pytest.fixture
def running_game(game: Game) -> Game:
    game.start()
    return game


@pytest.fixture
def build() -> Callable[[Game, str, Position], bool]:
    """Select a tower type, enter placement mode and place it."""

    def _build(game: Game, kind: str, pos: Position) -> bool:
        game.select_tower_type(kind)
        game.toggle_placement()
        return game.place_tower(pos)

    return _build
