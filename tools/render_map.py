#!/usr/bin/env python3
# Render generated maps to PNGs using Pillow.
# Floor/wall tiles are flat colors; rooms get their index drawn in the corner.

import argparse, os
from PIL import Image, ImageDraw, ImageFont

from roguegen import config
from roguegen.mapgen.generator import generate_map, marked_matrix
from roguegen.tiles import WALL, FLOOR, ENTRANCE, EXIT
from roguegen.components import MainHallComponent

COLORS = {
    WALL:     (40, 40, 48, 255),
    FLOOR:    (200, 190, 160, 255),
    ENTRANCE: (80, 200, 255, 255),
    EXIT:     (255, 220, 0, 255),
}
MAIN_HALL_TINT = (230, 170, 120, 255)

def render_map(ctx, out_png, tile_size=12, margin=0, labels=True):
    grid = marked_matrix(ctx)
    h, w = len(grid), len(grid[0])
    canvas = Image.new("RGBA", (w * tile_size + 2*margin, h * tile_size + 2*margin), (0, 0, 0, 255))
    draw = ImageDraw.Draw(canvas)

    hall_tiles = set()
    plan = ctx.room_plan
    for ii in range(plan.room_count):
        if plan.get_room_plan(ii).components.contains(MainHallComponent):
            hall_tiles.update(l.as_tuple() for l in plan.get_room(ii).draw.iter_locs())

    for y in range(h):
        for x in range(w):
            tid = grid[y][x]
            color = COLORS.get(tid, (255, 0, 255, 255))
            if tid == FLOOR and (x, y) in hall_tiles:
                color = MAIN_HALL_TINT
            x0 = margin + x * tile_size
            y0 = margin + y * tile_size
            draw.rectangle((x0, y0, x0 + tile_size - 1, y0 + tile_size - 1), fill=color)

    if labels:
        font = ImageFont.load_default()
        for ii in range(plan.room_count):
            r = plan.get_room(ii).draw
            draw.text((margin + r.x * tile_size + 2, margin + r.y * tile_size + 1),
                      str(ii), fill=(0, 0, 0, 255), font=font)

    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=None, help="Generation seed (omit for a time-based one)")
    ap.add_argument("--count", type=int, default=1, help="Render this many consecutive seeds")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=12, help="Tile size in pixels")
    ap.add_argument("--no-labels", action="store_true", help="Skip room index labels")
    args = ap.parse_args()
    config.load_env_flags()

    first = generate_map(args.seed)
    seeds = [first.seed + i for i in range(args.count)]
    for seed in seeds:
        ctx = first if seed == first.seed else generate_map(seed)
        png = os.path.join(args.outdir, f"{seed}.png")
        render_map(ctx, png, tile_size=args.tile, labels=not args.no_labels)
    print(f"Wrote {len(seeds)} PNG(s) to {args.outdir}")

if __name__ == "__main__":
    main()
