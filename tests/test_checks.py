import pytest

from glyphmaze.grid import Grid
from glyphmaze.mapgen.checks import (
    boundary_closed, is_perfect, neighbors_open, open_passages,
    parse_diagram, reachable_from, solve, walls_symmetric,
)
from glyphmaze.mapgen.generator import Maze

def test_walled_grid_is_not_perfect():
    g = Grid.empty(3)
    assert open_passages(g) == 0
    assert reachable_from(g) == {(0, 0)}
    assert walls_symmetric(g)
    assert boundary_closed(g)
    assert not is_perfect(g)
    with pytest.raises(ValueError):
        solve(g)

def test_single_cell_is_perfect():
    assert is_perfect(Grid.empty(1))
    assert solve(Grid.empty(1)) == [(0, 0)]

def test_asymmetric_wall_detected():
    g = Grid.empty(2)
    g.update(0, 0, e=False)
    assert not walls_symmetric(g)

def test_open_rim_detected():
    g = Grid.empty(2)
    g.update(1, 1, s=False)
    assert not boundary_closed(g)
    # an open rim wall never leads off the grid
    assert neighbors_open(g, 1, 1) == []

def test_loop_is_not_perfect():
    g = Grid.empty(2)
    g.open_wall(0, 0, 1)
    g.open_wall(1, 0, 2)
    g.open_wall(1, 1, 3)
    assert is_perfect(g)
    g.open_wall(0, 1, 0)
    assert open_passages(g) == 4
    assert not is_perfect(g)

def test_solve_path_is_connected_and_unique():
    m = Maze(12, 8)
    path = solve(m)
    assert path[0] == (0, 0)
    assert path[-1] == (11, 11)
    assert len(set(path)) == len(path)
    for a, b in zip(path, path[1:]):
        assert b in neighbors_open(m, *a)
    assert solve(m, (11, 11), (0, 0)) == list(reversed(path))

def test_solve_rejects_off_grid_endpoints():
    with pytest.raises(IndexError):
        solve(Maze(3, 1), (0, 0), (3, 3))

def test_parse_diagram_round_trip():
    m = Maze(9, 4242)
    board = parse_diagram(m.diagram())
    assert board.size == 9
    for y in range(9):
        for x in range(9):
            assert board.get_cell(x, y).walls() == m.get_cell(x, y).walls()
    assert is_perfect(board)

def test_parse_diagram_tolerates_one_trailing_newline():
    assert parse_diagram("⫍┐\n⫍┘\n").size == 2

@pytest.mark.parametrize("text", ["", "⫍┐\n⫍", "⫍┐\n⫍x", "⫍┐⫍\n⫍┘"])
def test_parse_diagram_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_diagram(text)
