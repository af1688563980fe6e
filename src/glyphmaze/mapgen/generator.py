# src/glyphmaze/mapgen/generator.py
# Maze engine: owns the grid and PRNG, generates everything at construction.

from typing import List, Optional, Tuple

from ..config import DEFAULTS, SeedSource, default_seed
from ..glyphs import glyph_for
from ..grid import Cell, Grid
from ..rng import PMRandom, Seed
from .carve import carve_backtracker


def validate_size(size) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise ValueError(f"maze size must be an integer, got {size!r}")
    if size < 1:
        raise ValueError(f"maze size must be >= 1, got {size}")
    return size


class Maze:
    """
    Square perfect maze generated deterministically from (size, seed).

    The grid is fully carved by the time the constructor returns. Cells are
    frozen snapshots and `cells` is a tuple, so callers only ever read.
    """

    def __init__(
        self,
        size: int = DEFAULTS.size,
        seed: Optional[Seed] = None,
        seed_source: SeedSource = default_seed,
    ):
        self._size = validate_size(size)
        if seed is None:
            seed = seed_source()
        self._rng = PMRandom(seed)
        self._seed = self._rng.state
        self._grid = Grid.empty(self._size)
        carve_backtracker(self._grid, self._rng, (0, 0))

    @property
    def size(self) -> int:
        return self._size

    @property
    def seed(self) -> Seed:
        """Normalized seed the PRNG started from."""
        return self._seed

    @property
    def cells(self) -> Tuple[Cell, ...]:
        # Row-major: index = y * size + x
        return tuple(self._grid.buf)

    def get_cell(self, x: int, y: int) -> Cell:
        return self._grid.get_cell(x, y)

    def rows(self) -> List[str]:
        return ["".join(glyph_for(c) for c in row) for row in self._grid.as_rows()]

    def diagram(self) -> str:
        return "\n".join(self.rows())

    def __str__(self) -> str:
        return self.diagram()

    def __repr__(self) -> str:
        return f"Maze(size={self._size}, seed={self._seed!r})"


def generate_diagram(size: int = DEFAULTS.size, seed: Optional[Seed] = None) -> str:
    return Maze(size, seed).diagram()
