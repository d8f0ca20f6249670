#!/usr/bin/env python3
# Render a TSV tile grid to a PNG through GridSurface + PillowCanvas (no display).
# Sheet frames are read left-to-right, top-to-bottom at --tile pixels.

import argparse, logging, os
from PIL import Image

from tilegrid.engine.surface import GridSurface
from tilegrid.grid import read_tsv
from tilegrid.render.pillow_canvas import PillowCanvas

log = logging.getLogger("render_grid")

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("grid", help="TSV file of tile indices")
    ap.add_argument("--sheet", required=True, help="sprite sheet PNG")
    ap.add_argument("--tile", type=int, default=None, help="tile size in pixels (default 32)")
    ap.add_argument("--offset", type=str, default="0,0", help="grid position as x,y")
    ap.add_argument("--size", type=str, default=None, help="canvas size as WxH (default: whole grid)")
    ap.add_argument("--out", type=str, default=None)
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="[%(name)s] %(message)s")

    sheet_img = Image.open(args.sheet).convert("RGBA")
    surface = GridSurface(sheet_img, args.tile)
    surface.grid = read_tsv(args.grid)
    ox, oy = (int(v) for v in args.offset.split(","))
    surface.position.x, surface.position.y = ox, oy

    if args.size:
        w, h = (int(v) for v in args.size.lower().split("x"))
    else:
        w = surface.tile_size * max(len(r) for r in surface.grid.rows)
        h = surface.tile_size * surface.grid.height

    canvas = PillowCanvas(w, h)
    surface.render(canvas)

    out = args.out or os.path.splitext(args.grid)[0] + ".png"
    canvas.save(out)
    log.info("Wrote %s (%dx%d)", out, w, h)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
