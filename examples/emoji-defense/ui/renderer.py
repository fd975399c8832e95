"""Board, tower and enemy rendering."""
from __future__ import annotations

import pygame

from tick_defense import Board, GameSnapshot, Position
from tick_defense.catalog import enemy_type, tower_type

from ui.constants import (
    ENEMY_COLORS, FOCUS, GRASS, GRID_H, GRID_LINE, GRID_W, HIT_FLASH,
    PREVIEW_BAD, PREVIEW_OK, ROAD, TEXT, TILE_SIZE, TOWER_COLORS,
)

_fonts: dict[int, pygame.font.Font] = {}


def _font(size: int) -> pygame.font.Font:
    if size not in _fonts:
        _fonts[size] = pygame.font.SysFont("notocoloremoji,segoeuiemoji,applecoloremoji,monospace", size)
    return _fonts[size]


def _tile_rect(pos: Position, inset: int = 0) -> pygame.Rect:
    return pygame.Rect(
        pos.col * TILE_SIZE + inset,
        pos.row * TILE_SIZE + inset,
        TILE_SIZE - 2 * inset,
        TILE_SIZE - 2 * inset,
    )


def draw_board(surface: pygame.Surface, board: Board) -> None:
    """Draw grass, the road and grid lines."""
    for pos in board.cells():
        pygame.draw.rect(surface, ROAD if board.is_path(pos) else GRASS, _tile_rect(pos))

    for col in range(board.columns + 1):
        pygame.draw.line(surface, GRID_LINE, (col * TILE_SIZE, 0), (col * TILE_SIZE, GRID_H))
    for row in range(board.rows + 1):
        pygame.draw.line(surface, GRID_LINE, (0, row * TILE_SIZE), (GRID_W, row * TILE_SIZE))


def _glyph(surface: pygame.Surface, text: str, rect: pygame.Rect) -> None:
    label = _font(TILE_SIZE // 2).render(text, True, TEXT)
    surface.blit(label, label.get_rect(center=rect.center))


def draw_entities(surface: pygame.Surface, snap: GameSnapshot) -> None:
    """Draw hit flashes, towers (with level) and enemies (with health)."""
    for pos in snap.hit_markers:
        pygame.draw.rect(surface, HIT_FLASH, _tile_rect(pos, 2), 3)

    small = _font(14)
    for tower in snap.towers:
        rect = _tile_rect(tower.position, 8)
        pygame.draw.rect(surface, TOWER_COLORS.get(tower.kind, TEXT), rect, border_radius=6)
        _glyph(surface, tower_type(tower.kind).emoji, rect)
        level = small.render(f"Lv{tower.level}", True, TEXT)
        surface.blit(level, (rect.x + 2, rect.bottom - level.get_height()))
        if tower.eid == snap.focused:
            pygame.draw.rect(surface, FOCUS, _tile_rect(tower.position, 1), 3)

    for enemy in snap.enemies:
        if enemy.position is None:
            continue
        rect = _tile_rect(enemy.position, 14)
        pygame.draw.ellipse(surface, ENEMY_COLORS.get(enemy.kind, TEXT), rect)
        _glyph(surface, enemy_type(enemy.kind).emoji, rect)
        hp = small.render(str(enemy.health), True, TEXT)
        surface.blit(hp, (rect.right - hp.get_width(), rect.y - 4))


def draw_hover_preview(surface: pygame.Surface, pos: Position, valid: bool) -> None:
    pygame.draw.rect(surface, PREVIEW_OK if valid else PREVIEW_BAD, _tile_rect(pos), 2)
