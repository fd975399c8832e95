"""Headless runner: place towers, start, and watch the status line."""
from __future__ import annotations

import argparse
from typing import Sequence

from loguru import logger

from tick_defense.catalog import TOWER_TYPES
from tick_defense.config import GameConfig
from tick_defense.game import Game
from tick_defense.log import LOG_LEVELS, configure_logging
from tick_defense.signals import ENEMY_DEFEATED, ENEMY_ESCAPED, WAVE_CLEARED
from tick_defense.types import Position


def parse_placement(text: str) -> tuple[str, Position]:
    """Parse ``KIND@ROW,COL`` into a tower kind and position."""
    kind, sep, coords = text.partition("@")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected KIND@ROW,COL, got {text!r}")
    if kind not in TOWER_TYPES:
        choices = ", ".join(TOWER_TYPES)
        raise argparse.ArgumentTypeError(f"unknown tower {kind!r} (choose from {choices})")
    try:
        row, col = (int(part) for part in coords.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"bad coordinates in {text!r}") from None
    return kind, Position(row, col)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="tick-defense",
        description="Run a headless tower-defense game and print its status line.",
    )
    p.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    p.add_argument("--ticks", type=int, default=200, help="Ticks to simulate (default: 200)")
    p.add_argument(
        "--place", type=parse_placement, action="append", default=[],
        metavar="KIND@ROW,COL", help="Build a tower before starting (repeatable)",
    )
    p.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=None,
        help="Enable loguru output at this level",
    )
    args = p.parse_args(argv)
    args.ticks = max(0, args.ticks)
    return args


def run(args: argparse.Namespace) -> Game:
    if args.log_level:
        # Replace loguru's default stderr handler.
        logger.remove()
        configure_logging(args.log_level)
    config = GameConfig(seed=args.seed, chronicle_size=0)

    game = Game(config)
    for kind, pos in args.place:
        game.select_tower_type(kind)
        if game.toggle_placement():
            game.place_tower(pos)
        print(f"[setup] {game.status}")

    game.start()
    print(f"[tick 0] {game.status}")
    last = game.status
    for _ in range(args.ticks):
        if not game.step():
            break
        if game.status != last:
            last = game.status
            print(f"[tick {game.engine.ticks_run}] {last}")
    return game


def main(argv: Sequence[str] | None = None) -> int:
    game = run(parse_args(argv))
    chronicle = game.chronicle
    print(
        f"phase={game.phase} wave={game.wave} coins={game.coins} lives={game.lives} "
        f"defeated={len(chronicle.query(ENEMY_DEFEATED))} "
        f"escaped={len(chronicle.query(ENEMY_ESCAPED))} "
        f"waves_cleared={len(chronicle.query(WAVE_CLEARED))}"
    )
    return 0
