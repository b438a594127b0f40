# engine/utils.py

from typing import List, Optional, Union

import numpy as np

from .board import Board, CellStatus

HIDDEN_CODE = -3
MARKED_CODE = -2
BOMB_CODE = -1

VisibleCell = Optional[Union[int, str]]


def get_visible_state(board: Board, game_over: bool = False) -> List[List[VisibleCell]]:
    """
    What a renderer may show for each cell, as JSON-safe values:
        None  hidden cell
        "F"   marked cell
        0-8   visible safe cell and its bomb count
        "*"   visible bomb (the one that lost the game)
        "M"   hidden or marked bomb, only shown once the game is over
    """
    state = []
    for row in board.grid:
        row_cells = []
        for cell in row:
            if cell.status is CellStatus.VISIBLE:
                row_cells.append("*" if cell.is_bomb else cell.adjacent_bomb_count)
            elif game_over and cell.is_bomb:
                row_cells.append("M")
            elif cell.status is CellStatus.MARKED:
                row_cells.append("F")
            else:
                row_cells.append(None)
        state.append(row_cells)
    return state


def encode_board(board: Board) -> np.ndarray:
    """
    Encode the player's view as an int array:
    -3 hidden, -2 marked, -1 visible bomb, 0-8 visible count.
    """
    encoded = np.full((board.rows, board.cols), HIDDEN_CODE, dtype=int)
    for (r, c), cell in board:
        if cell.status is CellStatus.MARKED:
            encoded[r, c] = MARKED_CODE
        elif cell.status is CellStatus.VISIBLE:
            encoded[r, c] = BOMB_CODE if cell.is_bomb else cell.adjacent_bomb_count
    return encoded


def bomb_mask(board: Board) -> np.ndarray:
    return np.array([[cell.is_bomb for cell in row] for row in board.grid], dtype=bool)


def format_board_debug(board: Board) -> str:
    """
    Full board dump for debugging: '*' bomb, digits for counts,
    lower-case markers for what the player sees ('.' hidden, 'f' marked).
    """
    lines = []
    for row in board.grid:
        row_str = ""
        for cell in row:
            if cell.status is CellStatus.MARKED:
                row_str += " f "
            elif cell.status is CellStatus.HIDDEN and not cell.is_bomb:
                row_str += " . "
            elif cell.is_bomb:
                row_str += " * "
            else:
                row_str += f" {cell.adjacent_bomb_count} "
        lines.append(row_str)
    return "\n".join(lines)
