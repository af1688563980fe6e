# glyphmaze command line: emit / check / png / golden.
# Size and seed fall back to GLYPHMAZE_SIZE / GLYPHMAZE_SEED, then to defaults.

import argparse, os, sys

from .config import DEFAULTS, env_seed, env_size, parse_seed
from .mapgen.checks import is_perfect, parse_diagram
from .mapgen.generator import Maze
from .render.image import save_png

def positive_int(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value

def seed_value(text):
    try:
        return parse_seed(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")

def build_maze(p, args):
    try:
        size = args.size if args.size is not None else env_size()
        seed = args.seed if args.seed is not None else env_seed()
        return Maze(DEFAULTS.size if size is None else size, seed)
    except ValueError as e:
        p.error(str(e))

def write_text(text, path):
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)

def cmd_emit(p, args):
    maze = build_maze(p, args)
    if args.out:
        write_text(maze.diagram(), args.out)
        print(f"Wrote {args.out} (size {maze.size}, seed {maze.seed})")
    else:
        sys.stdout.write(maze.diagram() + "\n")
    return 0

def cmd_check(p, args):
    try:
        with open(args.path, encoding="utf-8") as f:
            board = parse_diagram(f.read())
    except (OSError, ValueError) as e:
        print(f"{args.path}: {e}", file=sys.stderr)
        return 1
    if not is_perfect(board):
        print(f"{args.path}: not a perfect maze", file=sys.stderr)
        return 1
    print(f"{args.path}: ok ({board.size}x{board.size})")
    return 0

def cmd_png(p, args):
    maze = build_maze(p, args)
    try:
        save_png(maze, args.out, tile_size=args.tile, margin=args.margin)
    except ValueError as e:
        p.error(str(e))
    print(f"Wrote {args.out}")
    return 0

def cmd_golden(p, args):
    size = args.size if args.size is not None else DEFAULTS.size
    os.makedirs(args.outdir, exist_ok=True)
    for seed in range(args.first, args.first + args.count):
        path = os.path.join(args.outdir, f"seed_{seed:04d}.txt")
        write_text(Maze(size, seed).diagram(), path)
    print(f"Wrote golden pack to {args.outdir}")
    return 0

def make_parser():
    p = argparse.ArgumentParser(prog="glyphmaze", description="Deterministic perfect-maze generator")
    sub = p.add_subparsers(dest='cmd', required=True)

    def size_seed(sp):
        sp.add_argument('--size', type=positive_int, default=None,
                        help=f"Grid dimension (default $GLYPHMAZE_SIZE or {DEFAULTS.size})")
        sp.add_argument('--seed', type=seed_value, default=None,
                        help="PRNG seed (default $GLYPHMAZE_SEED or a random one)")

    p1 = sub.add_parser('emit', help="Print the maze diagram")
    size_seed(p1)
    p1.add_argument('--out', type=str, default=None, help="Write to a file instead of stdout")
    p1.set_defaults(func=cmd_emit)

    p2 = sub.add_parser('check', help="Verify a diagram file is a perfect maze")
    p2.add_argument('path', type=str)
    p2.set_defaults(func=cmd_check)

    p3 = sub.add_parser('png', help="Render the maze to a PNG")
    size_seed(p3)
    p3.add_argument('--out', type=str, required=True)
    p3.add_argument('--tile', type=positive_int, default=DEFAULTS.tile, help="Pixels per cell")
    p3.add_argument('--margin', type=int, default=0)
    p3.set_defaults(func=cmd_png)

    p4 = sub.add_parser('golden', help="Write diagrams for a run of seeds")
    p4.add_argument('--outdir', type=str, required=True)
    p4.add_argument('--size', type=positive_int, default=None)
    p4.add_argument('--first', type=int, default=1)
    p4.add_argument('--count', type=positive_int, default=25)
    p4.set_defaults(func=cmd_golden)
    return p

def main(argv=None):
    p = make_parser()
    args = p.parse_args(argv)
    return args.func(p, args)

if __name__ == '__main__':
    sys.exit(main())
