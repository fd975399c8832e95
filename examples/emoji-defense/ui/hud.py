"""Sidebar with game counters and controls, plus the bottom status bar."""
from __future__ import annotations

import pygame

from tick_defense import TOWER_TYPES, Game

from ui.constants import DIM, FOCUS, GRID_H, GRID_W, SCREEN_W, SIDEBAR_W, STATUS_H, TEXT

KEY_HELP = (
    "1-3  select tower",
    "P    toggle placement",
    "U    upgrade focused",
    "X    remove focused",
    "SPACE start / pause",
    "R    reset",
    "ESC  quit",
)


class Hud:
    def __init__(self) -> None:
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 14)
        return self._font

    def draw_sidebar(self, surface: pygame.Surface, game: Game) -> None:
        pygame.draw.rect(surface, (25, 25, 35), pygame.Rect(GRID_W, 0, SIDEBAR_W, GRID_H))
        font = self._get_font()
        x, y = GRID_W + 12, 12

        def line(text: str, color: tuple[int, int, int] = TEXT) -> None:
            nonlocal y
            surface.blit(font.render(text, True, color), (x, y))
            y += 20

        spawned, to_spawn = game.wave_progress
        line(f"Coins {game.coins}   Lives {game.lives}")
        line(f"Wave {game.wave}  ({spawned}/{to_spawn})")
        line(f"Phase: {game.phase}")
        y += 10

        for idx, ttype in enumerate(TOWER_TYPES.values(), start=1):
            selected = ttype.name == game.selected_type
            marker = ">" if selected else " "
            color = FOCUS if selected else (TEXT if game.coins >= ttype.build_cost else DIM)
            line(f"{marker}{idx} {ttype.display_name} ({ttype.build_cost})", color)
        if game.is_placing:
            line("  placing...", FOCUS)
        y += 10

        summary = game.focused_summary()
        line(summary if summary is not None else "No tower selected", TEXT if summary else DIM)
        line(game.upgrade_button_label(), TEXT if game.can_upgrade_focused else DIM)
        y += 10

        for text in KEY_HELP:
            line(text, DIM)

    def draw_status(self, surface: pygame.Surface, message: str) -> None:
        pygame.draw.rect(surface, (30, 30, 40), pygame.Rect(0, GRID_H, SCREEN_W, STATUS_H))
        if message:
            text = self._get_font().render(message, True, TEXT)
            surface.blit(text, (8, GRID_H + 12))
