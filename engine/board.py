# engine/board.py

from dataclasses import dataclass, replace
from enum import Enum
from numbers import Integral
from typing import Iterator, NamedTuple

from .exceptions import InvalidConfiguration, OutOfBounds


class CellStatus(Enum):
    HIDDEN = "hidden"
    VISIBLE = "visible"
    MARKED = "marked"


@dataclass(frozen=True)
class Cell:
    """
    A single square of the grid.

    adjacent_bomb_count is the number of bombs in the 3x3 block centred on
    the cell, the cell itself included. Only bomb cells are affected by the
    self-inclusion and their count is never displayed.
    """
    is_bomb: bool = False
    status: CellStatus = CellStatus.HIDDEN
    adjacent_bomb_count: int = 0

    def with_status(self, status: CellStatus) -> "Cell":
        return replace(self, status=status)


class Coordinate(NamedTuple):
    row: int
    col: int


class Board:
    """
    Immutable rectangular grid of cells.

    Rows are stored as tuples; mutators build a new Board that shares every
    row they did not touch.
    """

    __slots__ = ("_grid",)

    def __init__(self, grid):
        grid = tuple(tuple(row) for row in grid)
        if not grid or not grid[0]:
            raise InvalidConfiguration("A board needs at least one row and one column")
        width = len(grid[0])
        if any(len(row) != width for row in grid):
            raise InvalidConfiguration("Every row of a board must have the same length")
        self._grid = grid

    @property
    def rows(self) -> int:
        return len(self._grid)

    @property
    def cols(self) -> int:
        return len(self._grid[0])

    @property
    def grid(self) -> tuple[tuple[Cell, ...], ...]:
        return self._grid

    def in_bounds(self, row, col) -> bool:
        if not isinstance(row, Integral) or not isinstance(col, Integral):
            return False
        if isinstance(row, bool) or isinstance(col, bool):
            return False
        return 0 <= row < self.rows and 0 <= col < self.cols

    def check_bounds(self, row, col):
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.rows, self.cols)

    def cell(self, row: int, col: int) -> Cell:
        self.check_bounds(row, col)
        return self._grid[row][col]

    def __iter__(self) -> Iterator[tuple[Coordinate, Cell]]:
        for r, row in enumerate(self._grid):
            for c, cell in enumerate(row):
                yield Coordinate(r, c), cell

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __hash__(self):
        return hash(self._grid)

    def __repr__(self):
        return f"Board(rows={self.rows}, cols={self.cols}, bombs={self.bomb_count()})"

    def bomb_count(self) -> int:
        return sum(1 for _, cell in self if cell.is_bomb)

    def count_status(self, status: CellStatus) -> int:
        return sum(1 for _, cell in self if cell.status is status)


# --- BoardQuery -------------------------------------------------------------

def neighborhood(board: Board, row: int, col: int) -> tuple[tuple[Cell, ...], ...]:
    """
    Return the 3x3 sub-grid centred on (row, col), clipped to the board.
    Edge and corner cells get fewer than 9 cells back.
    """
    board.check_bounds(row, col)
    rows = board.grid[max(row - 1, 0):row + 2]
    return tuple(r[max(col - 1, 0):col + 2] for r in rows)


def neighbor_coordinates(board: Board, row: int, col: int) -> list[Coordinate]:
    """Coordinates of the clipped 3x3 block around (row, col), centre included."""
    board.check_bounds(row, col)
    coords = []
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            nr, nc = row + dr, col + dc
            if 0 <= nr < board.rows and 0 <= nc < board.cols:
                coords.append(Coordinate(nr, nc))
    return coords


def adjacent_bomb_count(board: Board, row: int, col: int) -> int:
    return sum(cell.is_bomb for near_row in neighborhood(board, row, col) for cell in near_row)


# --- BoardMutators ----------------------------------------------------------

def set_status(board: Board, row: int, col: int, status: CellStatus) -> Board:
    """
    Return a new board identical to `board` except for the status of the cell
    at (row, col). No game-rule validation happens here.
    """
    board.check_bounds(row, col)
    grid = board.grid
    changed = grid[row][:col] + (grid[row][col].with_status(status),) + grid[row][col + 1:]
    return Board(grid[:row] + (changed,) + grid[row + 1:])


def show_cell(board: Board, row: int, col: int) -> Board:
    return set_status(board, row, col, CellStatus.VISIBLE)


def mark_cell(board: Board, row: int, col: int) -> Board:
    return set_status(board, row, col, CellStatus.MARKED)


def hide_cell(board: Board, row: int, col: int) -> Board:
    return set_status(board, row, col, CellStatus.HIDDEN)


def is_win(board: Board) -> bool:
    """True once no safe cell is left hidden. Bombs may stay hidden or marked."""
    for _, cell in board:
        if cell.status is CellStatus.HIDDEN and not cell.is_bomb:
            return False
    return True
