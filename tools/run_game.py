# tools/run_game.py
# Interactive pygame runner: arrow keys / WASD move, R starts a new maze,
# Esc quits. The window reads the session after every input; the session is
# the only thing that mutates the board.

from __future__ import annotations

import argparse
import logging
from typing import Optional

import pygame

# Project imports
try:
    from mazegame.config import DEFAULT
    from mazegame.engine.state import GameSession
    from mazegame.render.tileset import Tileset
    from mazegame.ui.status_bar import render_status_bar
except Exception as e:  # pragma: no cover
    print("[run_game] Failed to import project modules:", e)
    print("Ensure you installed the package in editable mode: pip install -e .")
    raise

logger = logging.getLogger("run_game")

_KEYS = {
    pygame.K_UP: "up",
    pygame.K_w: "up",
    pygame.K_DOWN: "down",
    pygame.K_s: "down",
    pygame.K_LEFT: "left",
    pygame.K_a: "left",
    pygame.K_RIGHT: "right",
    pygame.K_d: "right",
}


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Maze runtime")
    parser.add_argument("--width", type=int, default=None, help=f"maze width in cells (default {DEFAULT.width})")
    parser.add_argument("--height", type=int, default=None, help=f"maze height in cells (default {DEFAULT.height})")
    parser.add_argument("--tile", type=int, default=None, dest="tile_px", help="tile size in pixels")
    parser.add_argument("--fps", type=int, default=None)
    parser.add_argument("--log-level", type=str, default=None, help="DEBUG, INFO, WARNING ...")
    args = parser.parse_args(argv)

    try:
        config = DEFAULT.with_overrides(
            width=args.width, height=args.height, tile_px=args.tile_px,
            fps=args.fps, log_level=args.log_level,
        )
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(level=config.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    logger.info("starting app")

    session = GameSession(config=config)
    tile = config.tile_px
    bar_h = max(18, tile + 6)

    pygame.init()
    screen = pygame.display.set_mode((session.width * tile, session.height * tile + bar_h))
    pygame.display.set_caption(f"Maze {session.width}x{session.height}")
    clock = pygame.time.Clock()
    tileset = Tileset(tile)

    def draw_board():
        for y in range(session.height):
            for x in range(session.width):
                screen.blit(tileset.get(session.get(x, y)), (x * tile, y * tile))
        px, py = session.player.x, session.player.y
        screen.blit(tileset.player(), (px * tile, py * tile))

    running = True
    while running:
        # --- Input ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    session = GameSession(config=config)
                elif event.key in _KEYS:
                    session.move(_KEYS[event.key])

        # --- Rendering ---
        screen.fill((0, 0, 0))
        draw_board()
        render_status_bar(
            screen, (0, session.height * tile), session.width * tile, bar_h,
            session, session.moves,
        )
        pygame.display.flip()
        clock.tick(config.fps)

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
