from dataclasses import dataclass, replace
from typing import List, Tuple

@dataclass(frozen=True)
class Cell:
    # True = wall present
    n: bool = True
    e: bool = True
    s: bool = True
    w: bool = True
    visited: bool = False

    def walls(self) -> Tuple[bool, bool, bool, bool]:
        return (self.n, self.e, self.s, self.w)

# Direction -> (dx, dy, own wall, neighbour's facing wall)
NORTH, EAST, SOUTH, WEST = 0, 1, 2, 3
DIRECTIONS = (NORTH, EAST, SOUTH, WEST)
STEP = {
    NORTH: ( 0, -1, "n", "s"),
    EAST:  ( 1,  0, "e", "w"),
    SOUTH: ( 0,  1, "s", "n"),
    WEST:  (-1,  0, "w", "e"),
}

@dataclass
class Grid:
    size: int
    buf: List[Cell]

    @classmethod
    def empty(cls, size: int) -> "Grid":
        # Every cell starts fully walled and unvisited.
        return cls(size=size, buf=[Cell()] * (size * size))

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def idx(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.size}x{self.size} grid")
        return y * self.size + x

    def get_cell(self, x: int, y: int) -> Cell:
        return self.buf[self.idx(x, y)]

    def update(self, x: int, y: int, **changes: bool) -> None:
        i = self.idx(x, y)
        self.buf[i] = replace(self.buf[i], **changes)

    def is_visited(self, x: int, y: int) -> bool:
        # Off-grid counts as visited so the carve never leaves the board.
        if not self.in_bounds(x, y):
            return True
        return self.buf[y * self.size + x].visited

    def open_wall(self, x: int, y: int, direction: int) -> Tuple[int, int]:
        """Clear the shared wall between (x, y) and its neighbour; return the neighbour."""
        dx, dy, mine, theirs = STEP[direction]
        nx, ny = x + dx, y + dy
        self.idx(nx, ny)  # raise before touching either cell
        self.update(x, y, **{mine: False})
        self.update(nx, ny, **{theirs: False})
        return nx, ny

    def as_rows(self) -> List[List[Cell]]:
        return [self.buf[y * self.size:(y + 1) * self.size] for y in range(self.size)]
