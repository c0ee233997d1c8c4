#!/usr/bin/env python3
# Render a generated board to PNG using Pillow.
# Path tiles can be tinted (--show-path) to eyeball the hidden route.

import argparse, os
from PIL import Image, ImageDraw, ImageFont
from pipepuzzle.engine.solver import solve
from pipepuzzle.mapgen.generator import generate_grid
from pipepuzzle.rng import make_rng
from pipepuzzle.tiles import DIRECTIONS

PIPE = (176, 176, 176, 255)
EDGE = (136, 136, 136, 255)
FLOW = (90, 170, 255, 255)
HINT = (255, 236, 170, 255)
CELL = (245, 245, 245, 255)

def tile_image(tile, tile_size, flowing=False, hint=False, labels=False):
    img = Image.new("RGBA", (tile_size, tile_size), color=HINT if hint else CELL)
    draw = ImageDraw.Draw(img)
    s, w = tile_size, max(4, tile_size // 3)
    lo, hi = (s - w) // 2, (s + w) // 2
    arms = {
        0: (lo, 0, hi, hi),      # up
        1: (lo, lo, s - 1, hi),  # right
        2: (lo, lo, hi, s - 1),  # down
        3: (0, lo, hi, hi),      # left
    }
    fill = FLOW if flowing else PIPE
    ports = tile.ports
    for d in DIRECTIONS:
        if ports[d]:
            draw.rounded_rectangle(arms[d], radius=w // 2, fill=fill, outline=EDGE, width=2)
    draw.rectangle((0, 0, s - 1, s - 1), outline=(200, 200, 200, 255))
    if labels:
        try:
            font = ImageFont.load_default()
            draw.text((4, 4), tile.label(), fill=(0, 0, 0, 255), font=font)
        except Exception:
            pass
    return img

def render_grid(grid, out_png, tile_size=64, show_path=False, labels=False, margin=0):
    res = solve(grid)
    lit = set(res.path)
    side = grid.size * tile_size + 2 * margin
    canvas = Image.new("RGBA", (side, side), (0, 0, 0, 0))
    for r, c in grid.cells():
        t = grid.get(r, c)
        img = tile_image(t, tile_size, flowing=(r, c) in lit, hint=show_path and t.on_path, labels=labels)
        x0 = margin + c * tile_size
        y0 = margin + r * tile_size
        canvas.paste(img, (x0, y0, x0 + tile_size, y0 + tile_size), img)
    d = os.path.dirname(out_png)
    if d:
        os.makedirs(d, exist_ok=True)
    canvas.save(out_png)
    return res

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--size", type=int, default=3)
    ap.add_argument("--seed", type=int, required=True)
    ap.add_argument("--out", type=str, default="out/png/board.png")
    ap.add_argument("--tile", type=int, default=64, help="Tile size in pixels")
    ap.add_argument("--show-path", action="store_true", help="Tint the generated path cells")
    ap.add_argument("--labels", action="store_true")
    args = ap.parse_args()

    grid = generate_grid(args.size, make_rng(args.seed))
    res = render_grid(grid, args.out, tile_size=args.tile, show_path=args.show_path, labels=args.labels)
    print(f"Wrote {args.out} (solved: {res.reachable})")

if __name__ == "__main__":
    main()
