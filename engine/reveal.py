# engine/reveal.py

import logging
from collections import deque

from .board import Board, CellStatus, Coordinate, neighbor_coordinates

logger = logging.getLogger(__name__)


def reveal_cascade(board: Board, seed) -> Board:
    """
    Open the connected zero-count region around `seed`.

    Every visit makes the whole clipped 3x3 block around the visited cell
    VISIBLE and schedules the zero-count neighbours for their own visit.
    Non-zero cells on the border are opened but not visited, so the cascade
    stops there. A coordinate is scheduled at most once.

    Must not be called with a bomb as seed; a bomb's own count is never 0.
    """
    seed = Coordinate(*seed)
    board.check_bounds(*seed)

    grid = [list(row) for row in board.grid]
    pending = deque([seed])
    scheduled = {seed}
    opened = 0

    while pending:
        current = pending.popleft()
        for near in neighbor_coordinates(board, *current):
            cell = grid[near.row][near.col]
            if cell.status is not CellStatus.VISIBLE:
                grid[near.row][near.col] = cell.with_status(CellStatus.VISIBLE)
                opened += 1
            if near != current and cell.adjacent_bomb_count == 0 and near not in scheduled:
                scheduled.add(near)
                pending.append(near)

    logger.debug("Cascade from %s opened %d cells over %d visits", seed, opened, len(scheduled))
    return Board(grid)
