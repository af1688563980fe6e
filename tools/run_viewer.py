#!/usr/bin/env python3
# Minimal interactive maze viewer.
# - Seed step: LEFT/RIGHT (PAGEDOWN/PAGEUP jump by 100)
# - Size: UP/DOWN
# - Solution path overlay toggle: S
# - Print the text diagram to stdout: D
# - Save current maze as PNG: P
# - 60 Hz fixed loop

import argparse, os
import pygame
from glyphmaze.config import DEFAULTS
from glyphmaze.glyphs import pattern_key
from glyphmaze.mapgen.checks import solve
from glyphmaze.mapgen.generator import Maze
from glyphmaze.render.image import save_png
from glyphmaze.render.tileset import Tileset

PATH_COLOR = (220, 60, 60)

def draw_path(screen, path, tile):
    if len(path) < 2:
        return
    pts = [(x * tile + tile // 2, y * tile + tile // 2) for x, y in path]
    pygame.draw.lines(screen, PATH_COLOR, False, pts, max(1, tile // 6))

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--size", type=int, default=DEFAULTS.size, help="Grid dimension")
    ap.add_argument("--seed", type=int, default=1, help="Starting seed")
    ap.add_argument("--tile", type=int, default=DEFAULTS.tile * 2, help="Tile size in pixels")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where P saves PNGs")
    args = ap.parse_args()
    if args.size < 1:
        raise SystemExit("--size must be >= 1")

    pygame.init()
    clock = pygame.time.Clock()
    tiles = Tileset(args.tile)

    size, seed = args.size, args.seed
    show_path = False

    def load():
        m = Maze(size, seed)
        return m, solve(m)

    def window():
        return pygame.display.set_mode((size * args.tile, size * args.tile))

    maze, path = load()
    screen = window()
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
                    maze, path = load()
                elif ev.key == pygame.K_LEFT:
                    seed -= 1
                    maze, path = load()
                elif ev.key == pygame.K_PAGEUP:
                    seed += 100
                    maze, path = load()
                elif ev.key == pygame.K_PAGEDOWN:
                    seed -= 100
                    maze, path = load()
                elif ev.key == pygame.K_UP:
                    size += 1
                    maze, path = load()
                    screen = window()
                elif ev.key == pygame.K_DOWN:
                    size = max(1, size - 1)
                    maze, path = load()
                    screen = window()
                elif ev.key == pygame.K_s:
                    show_path = not show_path
                elif ev.key == pygame.K_d:
                    print(maze.diagram())
                elif ev.key == pygame.K_p:
                    out = os.path.join(args.outdir, f"maze_{size}_{seed}.png")
                    save_png(maze, out, tile_size=args.tile)
                    print(f"[viewer] wrote {out}")

        screen.fill((0, 0, 0))
        for y in range(size):
            for x in range(size):
                key = pattern_key(maze.get_cell(x, y))
                screen.blit(tiles.view(key, args.tile), (x * args.tile, y * args.tile))
        if show_path:
            draw_path(screen, path, args.tile)

        pygame.display.set_caption(
            f"glyphmaze — size {size}  seed {seed}  PATH:{show_path}"
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
