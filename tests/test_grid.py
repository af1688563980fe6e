import dataclasses

import pytest

from glyphmaze.grid import Cell, Grid, NORTH, EAST, SOUTH, WEST

def test_empty_grid_is_fully_walled():
    g = Grid.empty(3)
    assert len(g.buf) == 9
    for cell in g.buf:
        assert cell.walls() == (True, True, True, True)
        assert not cell.visited

def test_row_major_indexing():
    g = Grid.empty(4)
    assert g.idx(0, 0) == 0
    assert g.idx(3, 0) == 3
    assert g.idx(0, 1) == 4
    assert g.idx(2, 3) == 14

def test_out_of_bounds_is_an_error():
    g = Grid.empty(2)
    for x, y in ((-1, 0), (0, -1), (2, 0), (0, 2)):
        with pytest.raises(IndexError):
            g.get_cell(x, y)
    assert g.is_visited(-1, 0)
    assert g.is_visited(0, 2)

def test_update_rebuilds_only_one_cell():
    g = Grid.empty(2)
    g.update(1, 0, visited=True)
    assert g.get_cell(1, 0).visited
    assert not g.get_cell(0, 0).visited
    assert not g.get_cell(0, 1).visited

def test_cells_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Cell().n = False

def test_open_wall_clears_both_sides():
    g = Grid.empty(2)
    assert g.open_wall(0, 0, EAST) == (1, 0)
    assert not g.get_cell(0, 0).e and not g.get_cell(1, 0).w
    assert g.open_wall(1, 0, SOUTH) == (1, 1)
    assert not g.get_cell(1, 0).s and not g.get_cell(1, 1).n
    assert g.open_wall(1, 1, WEST) == (0, 1)
    assert not g.get_cell(1, 1).w and not g.get_cell(0, 1).e
    assert g.open_wall(0, 1, NORTH) == (0, 0)
    assert not g.get_cell(0, 1).n and not g.get_cell(0, 0).s

def test_open_wall_refuses_to_leave_grid():
    g = Grid.empty(2)
    with pytest.raises(IndexError):
        g.open_wall(0, 0, NORTH)
