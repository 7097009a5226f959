import pytest

from space_shooter.entities import Cell
from space_shooter.grid import Grid, GridBoundsError


def test_new_grid_is_empty():
    grid = Grid()
    assert (grid.rows, grid.cols) == (23, 15)
    assert all(cell is Cell.EMPTY for _, _, cell in grid)


def test_write_then_read():
    grid = Grid()
    grid.write(3, 4, Cell.ENEMY)
    assert grid.read(3, 4) is Cell.ENEMY
    assert grid.count(Cell.ENEMY) == 1


@pytest.mark.parametrize("row, col", [(-1, 0), (23, 0), (0, -1), (0, 15)])
def test_out_of_bounds_access_fails(row, col):
    grid = Grid()
    with pytest.raises(GridBoundsError):
        grid.read(row, col)
    with pytest.raises(IndexError):
        grid.write(row, col, Cell.METEOR)


def test_clear_where_keeps_unmatched_cells():
    grid = Grid()
    grid.write(22, 7, Cell.PLAYER)
    grid.write(0, 0, Cell.METEOR)
    grid.write(5, 5, Cell.BOSS_BULLET)

    cleared = grid.clear_where(lambda cell: cell is not Cell.PLAYER)

    assert cleared == 2
    assert list(grid.positions_of(Cell.PLAYER)) == [(22, 7)]
    assert grid.count(Cell.METEOR) == 0
    assert grid.count(Cell.BOSS_BULLET) == 0


def test_positions_of_runs_top_to_bottom():
    grid = Grid()
    grid.write(9, 1, Cell.BOSS)
    grid.write(2, 6, Cell.BOSS)
    assert list(grid.positions_of(Cell.BOSS)) == [(2, 6), (9, 1)]
