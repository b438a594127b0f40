# tests/helpers.py

from engine.board import Board, Cell, CellStatus, adjacent_bomb_count


class ScriptedRandom:
    """random_int stand-in that returns a fixed sequence of draws."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def __call__(self, max_value):
        self.calls.append(max_value)
        value = self.values.pop(0)
        assert 0 <= value < max_value
        return value


def board_from_layout(layout, visible=(), marked=()):
    """
    Build a board from strings, '*' for a bomb and '.' for a safe cell.
    Counts are computed the same way the generator does it.
    """
    bombs = Board([[Cell(is_bomb=ch == "*") for ch in line] for line in layout])
    grid = []
    for r, line in enumerate(layout):
        row = []
        for c, ch in enumerate(line):
            if (r, c) in visible:
                status = CellStatus.VISIBLE
            elif (r, c) in marked:
                status = CellStatus.MARKED
            else:
                status = CellStatus.HIDDEN
            row.append(Cell(is_bomb=ch == "*", status=status,
                            adjacent_bomb_count=adjacent_bomb_count(bombs, r, c)))
        grid.append(row)
    return Board(grid)


def statuses(board):
    return [[cell.status for cell in row] for row in board.grid]
