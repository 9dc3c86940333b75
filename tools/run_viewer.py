#!/usr/bin/env python3
# Minimal interactive viewer for generated maps (no gameplay).
# - RIGHT/LEFT: next/previous seed
# - R: random (time-based) seed
# - L: toggle room index labels
# - P: toggle progress-marker printing
# - 60 Hz fixed loop

import argparse, logging
import pygame

from roguegen import config
from roguegen.components import MainHallComponent
from roguegen.mapgen.generator import generate_map, marked_matrix
from roguegen.progress import add_progress_hook
from roguegen.tiles import WALL, FLOOR, ENTRANCE, EXIT

COLORS = {
    WALL:     (40, 40, 48),
    FLOOR:    (200, 190, 160),
    ENTRANCE: (80, 200, 255),
    EXIT:     (255, 220, 0),
}
MAIN_HALL_TINT = (230, 170, 120)

def draw_map(screen, font, ctx, tile, labels):
    grid = marked_matrix(ctx)
    plan = ctx.room_plan
    screen.fill((0, 0, 0))
    for y, row in enumerate(grid):
        for x, tid in enumerate(row):
            pygame.draw.rect(screen, COLORS.get(tid, (255, 0, 255)),
                             pygame.Rect(x * tile, y * tile, tile, tile))
    for ii in range(plan.room_count):
        room = plan.get_room_plan(ii)
        r = room.room_gen.draw
        if room.components.contains(MainHallComponent):
            pygame.draw.rect(screen, MAIN_HALL_TINT,
                             pygame.Rect(r.x * tile, r.y * tile, r.width * tile, r.height * tile), 2)
        if labels:
            img = font.render(str(ii), True, (0, 0, 0))
            screen.blit(img, (r.x * tile + 2, r.y * tile + 1))

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=1, help="Initial seed")
    ap.add_argument("--tile", type=int, default=12, help="Tile size in pixels")
    ap.add_argument("--progress", action="store_true", help="Print step progress markers")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    config.load_env_flags()
    if args.progress:
        config.set_flags(debug_progress=True)
    add_progress_hook(lambda label: print(f"[viewer] {label}"))

    pygame.init()
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, max(10, args.tile))

    seed = args.seed
    ctx = generate_map(seed)
    screen = pygame.display.set_mode((ctx.width * args.tile, ctx.height * args.tile))
    labels = True

    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_RIGHT:
                    seed += 1
                    ctx = generate_map(seed)
                elif ev.key == pygame.K_LEFT:
                    seed = max(0, seed - 1)
                    ctx = generate_map(seed)
                elif ev.key == pygame.K_r:
                    ctx = generate_map(None)
                    seed = ctx.seed
                elif ev.key == pygame.K_l:
                    labels = not labels
                elif ev.key == pygame.K_p:
                    config.set_flags(debug_progress=not config.FLAGS.debug_progress)

        draw_map(screen, font, ctx, args.tile, labels)
        pygame.display.set_caption(
            f"roguegen viewer - seed {seed}  rooms {ctx.room_plan.room_count}  halls {ctx.room_plan.hall_count}"
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
