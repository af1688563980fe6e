# src/glyphmaze/mapgen/carve.py
# Randomized depth-first carve (recursive backtracker) over a fully walled grid.
# The recursion is unrolled onto an explicit stack; each frame owns the
# direction list drawn when its cell was entered, so PRNG consumption and
# visiting order match the recursive form exactly.

from typing import List, Tuple
from ..grid import Grid, DIRECTIONS, STEP
from ..rng import PMRandom

Frame = Tuple[int, int, List[int]]

def random_directions(rng: PMRandom) -> List[int]:
    """
    Draw N/E/S/W without replacement. Each draw removes
    directions[floor(f * remaining)], so four directions cost four PRNG draws.
    """
    directions = list(DIRECTIONS)
    shuffled = []
    while directions:
        shuffled.append(directions.pop(rng.index(len(directions))))
    return shuffled

def carve_backtracker(grid: Grid, rng: PMRandom, start: Tuple[int, int] = (0, 0)) -> int:
    """
    Carve a perfect maze into `grid` starting at `start`.
    Returns the number of cells visited (size*size for a fresh grid).
    """
    x, y = start
    grid.idx(x, y)  # reject an off-grid start up front
    grid.update(x, y, visited=True)
    stack: List[Frame] = [(x, y, random_directions(rng))]
    visited = 1

    while stack:
        x, y, pending = stack[-1]
        if not pending:
            stack.pop()
            continue
        d = pending.pop(0)
        dx, dy = STEP[d][0], STEP[d][1]
        if grid.is_visited(x + dx, y + dy):
            continue
        nx, ny = grid.open_wall(x, y, d)
        grid.update(nx, ny, visited=True)
        visited += 1
        stack.append((nx, ny, random_directions(rng)))

    return visited
