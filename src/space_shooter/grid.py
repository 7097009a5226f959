"""
Play field grid
"""

from __future__ import annotations

from typing import Callable, Iterator

from space_shooter.constants import COLS, ROWS
from space_shooter.entities import Cell


class GridBoundsError(IndexError):
    """Raised on a read or write outside the grid."""


class Grid:
    """
    Dense rows x cols array of cells, row 0 at the top.

    The grid is the only record of where entities are.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS):
        """
        :param rows: Number of rows
        :type rows: int

        :param cols: Number of columns
        :type cols: int
        """
        self.rows = rows
        self.cols = cols
        self._cells = [[Cell.EMPTY] * cols for _ in range(rows)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check(self, row: int, col: int):
        if not self.in_bounds(row, col):
            raise GridBoundsError(
                f"Cell ({row}, {col}) is outside the "
                f"{self.rows}x{self.cols} grid"
            )

    def read(self, row: int, col: int) -> Cell:
        """
        Read the cell at (row, col)

        :raise GridBoundsError: If the position is outside the grid
        """
        self._check(row, col)
        return self._cells[row][col]

    def write(self, row: int, col: int, cell: Cell):
        """
        Write a cell at (row, col)

        :raise GridBoundsError: If the position is outside the grid
        """
        self._check(row, col)
        self._cells[row][col] = cell

    def clear_where(self, predicate: Callable[[Cell], bool]) -> int:
        """
        Empty every cell matching the predicate

        :param predicate: Selects the cells to clear
        :type predicate: Callable[[Cell], bool]

        :return: Number of cells cleared
        :rtype: int
        """
        cleared = 0
        for row in self._cells:
            for c, cell in enumerate(row):
                if cell is not Cell.EMPTY and predicate(cell):
                    row[c] = Cell.EMPTY
                    cleared += 1
        return cleared

    def clear(self) -> int:
        return self.clear_where(lambda cell: True)

    def positions_of(self, kind: Cell) -> Iterator[tuple[int, int]]:
        """Yield (row, col) of every cell holding `kind`, top to bottom."""
        for r, row in enumerate(self._cells):
            for c, cell in enumerate(row):
                if cell is kind:
                    yield r, c

    def count(self, kind: Cell) -> int:
        return sum(row.count(kind) for row in self._cells)

    def __iter__(self) -> Iterator[tuple[int, int, Cell]]:
        for r, row in enumerate(self._cells):
            for c, cell in enumerate(row):
                yield r, c, cell

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols})"
