"""Human-readable text for status lines, tooltips and buttons."""
from __future__ import annotations

from tick_defense.catalog import enemy_type, tower_type
from tick_defense.clock import Clock
from tick_defense.components import Enemy, Tower


def format_seconds(value: float) -> str:
    return f"{value:.1f}"


def _timing(tower: Tower, clock: Clock) -> tuple[str, str]:
    # A tower fires, rests cooldown_ticks, then fires on the following tick.
    level_stats = tower_type(tower.kind).stats(tower.level)
    interval = format_seconds(clock.seconds(level_stats.cooldown_ticks + 1))
    remaining = format_seconds(clock.seconds(tower.cooldown))
    return interval, remaining


def tower_status(tower: Tower, clock: Clock) -> str:
    ttype = tower_type(tower.kind)
    level_stats = ttype.stats(tower.level)
    interval, remaining = _timing(tower, clock)
    text = (
        f"{ttype.emoji} {ttype.display_name} Lv{tower.level} | damage {level_stats.damage}"
        f" | range {level_stats.range} tiles | fires every {interval}s"
        f" | cooldown {remaining}s"
    )
    if level_stats.slow_ticks > 0:
        text += f" | slows {level_stats.slow_ticks} ticks"
    return text


def tower_help(tower: Tower, clock: Clock) -> str:
    ttype = tower_type(tower.kind)
    level_stats = ttype.stats(tower.level)
    interval, remaining = _timing(tower, clock)
    lines = [
        f"{ttype.emoji} {ttype.display_name} Lv{tower.level}",
        f"Damage: {level_stats.damage}",
        f"Range: {level_stats.range} tiles",
        f"Fires every {interval}s",
        f"Cooldown left: {remaining}s",
    ]
    if level_stats.slow_ticks > 0:
        lines.append(f"Slow: holds enemies for {level_stats.slow_ticks} ticks")
    cost = ttype.upgrade_cost(tower.level)
    if cost is not None:
        lines.append(f"Upgrade cost: {cost} coins")
    else:
        lines.append("Max level reached")
    return "\n".join(lines)


def enemy_status(enemy: Enemy) -> str:
    etype = enemy_type(enemy.kind)
    text = f"{etype.emoji} {etype.display_name} health {enemy.health}/{enemy.max_health}"
    if enemy.slow_ticks > 0:
        text += f" | frozen for {enemy.slow_ticks} ticks"
    return text


def enemy_help(enemy: Enemy) -> str:
    etype = enemy_type(enemy.kind)
    text = f"{etype.emoji} {etype.display_name}\nHealth: {enemy.health}/{enemy.max_health}"
    if enemy.slow_ticks > 0:
        text += f"\nStatus: frozen for {enemy.slow_ticks} ticks"
    return text


def empty_tile_status(selected: str, coins: int) -> str:
    ttype = tower_type(selected)
    if coins >= ttype.build_cost:
        return f"Empty tile, press place to build: {ttype.display_name}"
    return "Empty tile, but not enough coins to build"


def empty_tile_help(selected: str, coins: int) -> str:
    ttype = tower_type(selected)
    if coins >= ttype.build_cost:
        return f"Empty tile\nCan build: {ttype.display_name} ({ttype.build_cost} coins)"
    return "Empty tile\nNot enough coins to build"


def upgrade_label(tower: Tower | None) -> str:
    if tower is None:
        return "Select a tower to upgrade"
    cost = tower_type(tower.kind).upgrade_cost(tower.level)
    if cost is None:
        return "Max level"
    return f"Upgrade to Lv{tower.level + 1} ({cost} coins)"


def tower_summary(tower: Tower) -> str:
    return f"Selected: {tower_type(tower.kind).display_name} Lv{tower.level}"
