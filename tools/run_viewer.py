#!/usr/bin/env python3
# Minimal interactive host loop for a GridSurface.
# - Arrow keys set the scroll velocity, SPACE stops it
# - Left mouse / touch is routed through assign_touch_event
# - Clicking a cell logs its tile and obstacle status
# - 60 Hz fixed loop

import argparse, logging
import pygame

from tilegrid.config import SurfaceConfig
from tilegrid.coords import Vec
from tilegrid.engine.hooks import SurfaceHooks
from tilegrid.engine.overlay import OverlayTile
from tilegrid.engine.surface import GridSurface
from tilegrid.engine.touch import touch_from_pygame_event
from tilegrid.grid import read_tsv

log = logging.getLogger("viewer")

SCROLL_SPEED = 2

def demo_grid(w=40, h=24):
    # walls (0) on the rim, floor (1) inside, a few pillars
    g = [[1] * w for _ in range(h)]
    for x in range(w):
        g[0][x] = g[h - 1][x] = 0
    for y in range(h):
        g[y][0] = g[y][w - 1] = 0
    for y in range(4, h - 4, 6):
        for x in range(4, w - 4, 8):
            g[y][x] = 0
    return g

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--sheet", required=True, help="sprite sheet PNG")
    ap.add_argument("--grid", type=str, default=None, help="TSV grid (default: built-in demo map)")
    ap.add_argument("--tile", type=int, default=None, help="tile size in pixels (default 32)")
    ap.add_argument("--obstacles", type=str, default="0", help="comma-separated obstacle tile indices")
    ap.add_argument("--size", type=str, default="640x384", help="window size WxH")
    ap.add_argument("--marker", type=int, default=None, help="tile index for a synchronized marker overlay")
    args = ap.parse_args()
    logging.basicConfig(level=logging.INFO, format="[%(name)s] %(message)s")

    pygame.init()
    pygame.display.set_caption("tilegrid viewer")
    clock = pygame.time.Clock()
    W, H = (int(v) for v in args.size.lower().split("x"))
    screen = pygame.display.set_mode((W, H))

    def on_touch_start(surface, x, y):
        cx, cy = int(x // surface.tile_size), int(y // surface.tile_size)
        try:
            blocked = surface.has_obstacle(cx, cy)
        except IndexError as e:
            log.info("touch at (%.0f, %.0f): %s", x, y, e)
            return
        log.info("cell (%d, %d) tile=%d obstacle=%s", cx, cy, surface.tile_at(cx, cy), blocked)

    config = SurfaceConfig(
        tile_size=args.tile,
        obstacle_indices=frozenset(int(v) for v in args.obstacles.split(",") if v),
    )
    surface = GridSurface(args.sheet, config=config, hooks=SurfaceHooks(on_touch_start=on_touch_start))
    surface.grid = read_tsv(args.grid) if args.grid else demo_grid()

    if args.marker is not None:
        def on_marker_touch(overlay, event_type, pos):
            log.info("marker %s at map cell (%.2f, %.2f)", event_type, overlay.map_cell.x, overlay.map_cell.y)
        s = surface.tile_size
        surface.add_overlay(OverlayTile(surface.sheet, args.marker, Vec(2 * s, 2 * s), on_touch=on_marker_touch))

    keys = {
        pygame.K_LEFT: (SCROLL_SPEED, 0),
        pygame.K_RIGHT: (-SCROLL_SPEED, 0),
        pygame.K_UP: (0, SCROLL_SPEED),
        pygame.K_DOWN: (0, -SCROLL_SPEED),
    }

    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key in keys:
                    surface.velocity = Vec.of(keys[ev.key])
                elif ev.key == pygame.K_SPACE:
                    surface.velocity = Vec(0, 0)
            else:
                touch = touch_from_pygame_event(ev, (W, H))
                if touch is not None:
                    surface.assign_touch_event(*touch)

        screen.fill((0, 0, 0))
        surface.update(screen)
        pygame.display.set_caption(
            f"tilegrid viewer | pos ({surface.position.x:.0f}, {surface.position.y:.0f})"
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
