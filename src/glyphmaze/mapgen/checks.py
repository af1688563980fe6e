# src/glyphmaze/mapgen/checks.py
# Read-only structural queries over a carved board (a Maze or a parsed Grid).

from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Protocol, Set, Tuple

from ..glyphs import walls_for_glyph
from ..grid import Cell, Grid, DIRECTIONS, STEP

XY = Tuple[int, int]


class Board(Protocol):
    size: int

    def get_cell(self, x: int, y: int) -> Cell: ...


def neighbors_open(board: Board, x: int, y: int) -> List[XY]:
    """Neighbours reachable from (x, y) through an open wall, in N,E,S,W order."""
    cell = board.get_cell(x, y)
    out = []
    for d in DIRECTIONS:
        dx, dy, mine, _ = STEP[d]
        nx, ny = x + dx, y + dy
        if not getattr(cell, mine) and 0 <= nx < board.size and 0 <= ny < board.size:
            out.append((nx, ny))
    return out


def open_passages(board: Board) -> int:
    # Count each adjacent pair once: only look east and south.
    n = board.size
    count = 0
    for y in range(n):
        for x in range(n):
            cell = board.get_cell(x, y)
            if x + 1 < n and not cell.e:
                count += 1
            if y + 1 < n and not cell.s:
                count += 1
    return count


def reachable_from(board: Board, x: int = 0, y: int = 0) -> Set[XY]:
    seen = {(x, y)}
    todo = deque([(x, y)])
    while todo:
        cx, cy = todo.popleft()
        for nxt in neighbors_open(board, cx, cy):
            if nxt not in seen:
                seen.add(nxt)
                todo.append(nxt)
    return seen


def walls_symmetric(board: Board) -> bool:
    n = board.size
    for y in range(n):
        for x in range(n):
            cell = board.get_cell(x, y)
            if x + 1 < n and cell.e != board.get_cell(x + 1, y).w:
                return False
            if y + 1 < n and cell.s != board.get_cell(x, y + 1).n:
                return False
    return True


def boundary_closed(board: Board) -> bool:
    n = board.size
    for i in range(n):
        if not board.get_cell(i, 0).n or not board.get_cell(i, n - 1).s:
            return False
        if not board.get_cell(0, i).w or not board.get_cell(n - 1, i).e:
            return False
    return True


def is_perfect(board: Board) -> bool:
    """Connected, closed at the rim, symmetric walls, and exactly n*n-1 passages."""
    n = board.size
    return (
        walls_symmetric(board)
        and boundary_closed(board)
        and open_passages(board) == n * n - 1
        and len(reachable_from(board)) == n * n
    )


def solve(board: Board, start: XY = (0, 0), goal: Optional[XY] = None) -> List[XY]:
    """
    Path from start to goal (default: the far corner) through open walls.
    In a perfect maze this path is unique. Raises ValueError if unreachable.
    """
    if goal is None:
        goal = (board.size - 1, board.size - 1)
    board.get_cell(*start)
    board.get_cell(*goal)

    parent: Dict[XY, Optional[XY]] = {start: None}
    todo = deque([start])
    while todo:
        cur = todo.popleft()
        if cur == goal:
            break
        for nxt in neighbors_open(board, *cur):
            if nxt not in parent:
                parent[nxt] = cur
                todo.append(nxt)
    if goal not in parent:
        raise ValueError(f"{goal} is not reachable from {start}")

    path = [goal]
    while parent[path[-1]] is not None:
        path.append(parent[path[-1]])
    path.reverse()
    return path


def parse_diagram(text: str) -> Grid:
    """
    Rebuild wall flags from a rendered diagram. The text must be a square
    block of known glyphs; a single trailing newline is tolerated.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    n = len(lines)
    if n == 0:
        raise ValueError("empty diagram")
    cells = []
    for row, line in enumerate(lines):
        if len(line) != n:
            raise ValueError(f"row {row}: expected {n} glyphs, got {len(line)}")
        for glyph in line:
            north, east, south, west = walls_for_glyph(glyph)
            cells.append(Cell(n=north, e=east, s=south, w=west, visited=True))
    return Grid(size=n, buf=cells)
