#!/usr/bin/env python3
# Render a run of seeds (or diagram .txt files) to PNGs using Pillow.

import argparse, os
from glyphmaze.config import DEFAULTS
from glyphmaze.mapgen.checks import parse_diagram
from glyphmaze.mapgen.generator import Maze
from glyphmaze.render.image import save_png

def read_diagram(path):
    with open(path, encoding="utf-8") as f:
        try:
            return parse_diagram(f.read())
        except ValueError as e:
            raise SystemExit(f"{path}: {e}")

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--size", type=int, default=DEFAULTS.size, help="Grid dimension")
    ap.add_argument("--first", type=int, default=1, help="First seed")
    ap.add_argument("--count", type=int, default=25, help="Number of seeds")
    ap.add_argument("--indir", type=str, default=None,
                    help="Render every .txt diagram in this directory instead of generating")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=DEFAULTS.tile, help="Tile size in pixels")
    ap.add_argument("--margin", type=int, default=4, help="Border in pixels")
    args = ap.parse_args()

    if args.indir:
        for name in sorted(os.listdir(args.indir)):
            if not name.endswith(".txt"):
                continue
            board = read_diagram(os.path.join(args.indir, name))
            png = os.path.join(args.outdir, name[:-4] + ".png")
            save_png(board, png, tile_size=args.tile, margin=args.margin)
    else:
        for seed in range(args.first, args.first + args.count):
            png = os.path.join(args.outdir, str(args.size), f"seed_{seed:04d}.png")
            save_png(Maze(args.size, seed), png, tile_size=args.tile, margin=args.margin)
    print(f"Wrote PNGs to {args.outdir}")

if __name__ == "__main__":
    main()
