"""Emoji Defense - play the tick-defense engine with pygame."""
from __future__ import annotations

import argparse
import sys

import pygame

from tick_defense import TOWER_TYPES, Game, GameConfig, Position, configure_logging
from tick_defense.log import LOG_LEVELS

from ui.constants import FPS, GRID_H, GRID_W, SCREEN_H, SCREEN_W, TILE_SIZE
from ui.hud import Hud
from ui.renderer import draw_board, draw_entities, draw_hover_preview

TOWER_KEYS = {
    pygame.K_1: 0,
    pygame.K_2: 1,
    pygame.K_3: 2,
}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Emoji Defense")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=None,
        help="Print engine logs at this level",
    )
    return p.parse_args()


def tile_under(pixel: tuple[int, int]) -> Position | None:
    px, py = pixel
    if not (0 <= px < GRID_W and 0 <= py < GRID_H):
        return None
    return Position(py // TILE_SIZE, px // TILE_SIZE)


def handle_key(game: Game, key: int) -> bool:
    """Forward a key press to the game. Returns False to quit."""
    if key == pygame.K_ESCAPE:
        return False
    if key in TOWER_KEYS:
        kind = list(TOWER_TYPES)[TOWER_KEYS[key]]
        game.select_tower_type(kind)
    elif key == pygame.K_p:
        game.toggle_placement()
    elif key == pygame.K_u:
        game.upgrade_focused()
    elif key == pygame.K_x:
        game.remove_focused()
    elif key == pygame.K_SPACE:
        if game.is_running:
            game.pause()
        else:
            game.start()
    elif key == pygame.K_r:
        game.reset()
    return True


def handle_click(game: Game, pos: Position) -> None:
    if game.is_placing:
        game.place_tower(pos)
    else:
        game.inspect(pos)


def main() -> None:
    args = parse_args()
    if args.log_level:
        configure_logging(args.log_level)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Emoji Defense")
    clock = pygame.time.Clock()

    game = Game(GameConfig(seed=args.seed))
    hud = Hud()

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                running = handle_key(game, event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                pos = tile_under(event.pos)
                if pos is not None:
                    handle_click(game, pos)

        # --- Tick at the game's fixed period ---
        game.advance(dt)

        # --- Render ---
        snap = game.snapshot()
        screen.fill((20, 20, 30))
        draw_board(screen, game.board)
        draw_entities(screen, snap)

        hover = tile_under(pygame.mouse.get_pos())
        if hover is not None and snap.placing:
            draw_hover_preview(screen, hover, game.can_place(hover))

        hud.draw_sidebar(screen, game)
        hud.draw_status(screen, snap.status)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
