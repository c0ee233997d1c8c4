# tools/run_game.py
# Pygame window for the pipe puzzle.
# - Click a tile to rotate it (start/goal are fixed)
# - N: new game, Esc: quit
# - One timer event per --tick-ms drives the game clock

from __future__ import annotations

import argparse
import logging
from typing import Optional

import pygame

# Project imports
try:
    from pipepuzzle.config import DEFAULTS, GameConfig
    from pipepuzzle.engine.state import GameSession
    from pipepuzzle.render.tileset import PipeTileset
    from pipepuzzle.ui.status_bar import render_status_bar, status_from_session
except Exception as e:  # pragma: no cover
    print("[run_game] Failed to import project modules:", e)
    print("Ensure you installed the package in editable mode: pip install -e .")
    raise

TICK_EVENT = pygame.USEREVENT + 1
BAR_PX = 40


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Pipe puzzle")
    parser.add_argument("--size", type=int, default=DEFAULTS.grid_size, help="grid is size x size")
    parser.add_argument("--tile", type=int, default=DEFAULTS.tile_px, help="tile size in pixels")
    parser.add_argument("--tick-ms", type=int, default=DEFAULTS.tick_ms)
    parser.add_argument("--seed", type=int, default=None, help="fixed layout seed")
    parser.add_argument("--labels", action="store_true", help="paint S1/E0/... debug labels")
    parser.add_argument("--fps", type=int, default=30)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    cfg = GameConfig(grid_size=args.size, tick_ms=args.tick_ms, seed=args.seed, tile_px=args.tile)
    session = GameSession(cfg)

    if not pygame.get_init():
        pygame.init()
    if not pygame.font.get_init():
        pygame.font.init()

    side = cfg.grid_size * cfg.tile_px
    screen = pygame.display.set_mode((side, side + BAR_PX))
    pygame.display.set_caption(f"Pipe puzzle — {cfg.grid_size}x{cfg.grid_size}")
    clock = pygame.time.Clock()
    tileset = PipeTileset(cfg.tile_px)

    def new_game():
        # Single owned periodic timer: cancel, then re-arm for the new game.
        pygame.time.set_timer(TICK_EVENT, 0)
        session.new_game()
        pygame.time.set_timer(TICK_EVENT, cfg.tick_ms)

    def draw():
        grid = session.grid
        lit = set(session.last_result.path) if session.last_result and session.last_result.reachable else set()
        for r, c in grid.cells():
            t = grid.get(r, c)
            x, y = c * cfg.tile_px, r * cfg.tile_px
            screen.blit(tileset.get(t.shape, t.rotation, (r, c) in lit), (x, y))
            if args.labels:
                screen.blit(tileset.label(t.label()), (x + 4, y + 4))
        render_status_bar(screen, (0, side), side, BAR_PX, status_from_session(session))

    new_game()
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_n:
                    new_game()
            elif event.type == TICK_EVENT:
                session.tick()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, my = event.pos
                out = session.rotate(my // cfg.tile_px, mx // cfg.tile_px)
                if out.solved:
                    pygame.time.set_timer(TICK_EVENT, 0)

        screen.fill((0, 0, 0))
        draw()
        pygame.display.flip()
        clock.tick(args.fps)

    pygame.time.set_timer(TICK_EVENT, 0)
    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
