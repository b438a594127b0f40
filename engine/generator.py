# engine/generator.py

import logging
import random
from typing import Callable

from .board import Board, Cell, CellStatus, Coordinate, adjacent_bomb_count
from .exceptions import InvalidConfiguration, OutOfBounds

logger = logging.getLogger(__name__)

RandomInt = Callable[[int], int]


def default_random_int(max_value: int) -> int:
    return random.randrange(max_value)


def _check_dimensions(rows, cols):
    if rows <= 0 or cols <= 0:
        raise InvalidConfiguration(f"Board dimensions must be positive, got {rows}x{cols}")


def empty_board(rows: int, cols: int) -> Board:
    """
    A board with no bombs and every cell hidden.
    Each cell is its own value; no row or cell object is shared.
    """
    _check_dimensions(rows, cols)
    return Board([[Cell() for _ in range(cols)] for _ in range(rows)])


def generate(
    rows: int,
    cols: int,
    bomb_count: int,
    safe_coord,
    random_int: RandomInt = default_random_int,
) -> Board:
    """
    Build a populated board whose `safe_coord` is guaranteed bomb-free.

    Bombs are placed by rejection sampling over linear indices
    (row * cols + col): a drawn index is redrawn while it already holds a
    bomb or is the safe cell. The safe cell comes back VISIBLE; every other
    cell is HIDDEN. Adjacency counts are computed over the final layout.
    """
    _check_dimensions(rows, cols)
    size = rows * cols
    if bomb_count < 0 or bomb_count >= size:
        raise InvalidConfiguration(
            f"Cannot place {bomb_count} bombs on a {rows}x{cols} board "
            f"while keeping one cell safe."
        )

    safe_row, safe_col = safe_coord
    if not (0 <= safe_row < rows and 0 <= safe_col < cols):
        raise OutOfBounds(safe_row, safe_col, rows, cols)
    safe_index = safe_row * cols + safe_col

    bombs = [False] * size
    for _ in range(bomb_count):
        index = random_int(size)
        while bombs[index] or index == safe_index:
            index = random_int(size)
        bombs[index] = True

    layout = Board(
        [Cell(is_bomb=bombs[r * cols + c]) for c in range(cols)]
        for r in range(rows)
    )

    grid = []
    for r in range(rows):
        row_cells = []
        for c in range(cols):
            status = CellStatus.VISIBLE if (r, c) == (safe_row, safe_col) else CellStatus.HIDDEN
            row_cells.append(Cell(
                is_bomb=bombs[r * cols + c],
                status=status,
                adjacent_bomb_count=adjacent_bomb_count(layout, r, c),
            ))
        grid.append(row_cells)

    logger.debug(
        "Generated %dx%d board with %d bombs, safe cell %s",
        rows, cols, bomb_count, Coordinate(safe_row, safe_col),
    )
    return Board(grid)
