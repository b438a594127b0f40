# engine/game.py

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .board import Board, CellStatus, hide_cell, is_win, mark_cell, show_cell
from .config import GameSettings
from .generator import RandomInt, default_random_int, empty_board, generate
from .reveal import reveal_cascade
from .utils import format_board_debug, get_visible_state

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    NOT_STARTED = "not_started"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self in (GamePhase.WON, GamePhase.LOST)


@dataclass(frozen=True)
class Session:
    board: Board
    phase: GamePhase = GamePhase.NOT_STARTED


@dataclass(frozen=True)
class Reveal:
    row: int
    col: int


@dataclass(frozen=True)
class ToggleMark:
    row: int
    col: int


@dataclass(frozen=True)
class Reset:
    pass


Action = Union[Reveal, ToggleMark, Reset]


def new_session(rows: int, cols: int) -> Session:
    return Session(board=empty_board(rows, cols), phase=GamePhase.NOT_STARTED)


def _reveal(session: Session, row: int, col: int, bomb_count: int, random_int: RandomInt) -> Session:
    if session.phase.is_terminal:
        return session

    # Loss is decided on the board as it was before this action. On the
    # first reveal that board is empty, so the opening click never loses.
    prior = session.board.cell(row, col)
    if prior.status is not CellStatus.HIDDEN:
        return session

    if session.phase is GamePhase.NOT_STARTED:
        board = generate(session.board.rows, session.board.cols, bomb_count, (row, col), random_int)
    else:
        board = session.board

    if board.cell(row, col).adjacent_bomb_count == 0:
        board = reveal_cascade(board, (row, col))
    else:
        board = show_cell(board, row, col)

    if prior.is_bomb:
        phase = GamePhase.LOST
    elif is_win(board):
        phase = GamePhase.WON
    else:
        phase = GamePhase.PLAYING
    return Session(board=board, phase=phase)


def _toggle_mark(session: Session, row: int, col: int) -> Session:
    if session.phase is GamePhase.NOT_STARTED or session.phase.is_terminal:
        return session

    status = session.board.cell(row, col).status
    if status is CellStatus.MARKED:
        return Session(board=hide_cell(session.board, row, col), phase=session.phase)
    if status is CellStatus.HIDDEN:
        return Session(board=mark_cell(session.board, row, col), phase=session.phase)
    return session


def reduce(
    session: Session,
    action: Action,
    bomb_count: int,
    random_int: RandomInt = default_random_int,
) -> Session:
    """
    Apply one player action and return the next session.

    The input session is never modified. Reveal and ToggleMark are ignored
    once the game is won or lost; Reset is always accepted. Anything that is
    not a known action leaves the session as it is.
    """
    if isinstance(action, Reveal):
        result = _reveal(session, action.row, action.col, bomb_count, random_int)
    elif isinstance(action, ToggleMark):
        result = _toggle_mark(session, action.row, action.col)
    elif isinstance(action, Reset):
        result = new_session(session.board.rows, session.board.cols)
    else:
        logger.warning("Ignoring unknown action %r", action)
        return session

    if result.phase is not session.phase:
        logger.info("Game phase %s -> %s after %r", session.phase.name, result.phase.name, action)
        if result.phase.is_terminal:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Final board:\n%s", format_board_debug(result.board))
    return result


class Game:
    """
    Holds the current session for a host (HTTP handler, script, test) and
    feeds actions through `reduce` one at a time.
    """

    ACTIONS = {
        "reveal": Reveal,
        "flag": ToggleMark,
        "mark": ToggleMark,
    }

    def __init__(self, settings: Optional[GameSettings] = None, random_int: Optional[RandomInt] = None):
        self.settings = (settings or GameSettings()).validate()
        self.random_int = random_int or self.settings.random_source()
        self.reset()

    @property
    def rows(self) -> int:
        return self.settings.rows

    @property
    def cols(self) -> int:
        return self.settings.cols

    @property
    def board(self) -> Board:
        return self.session.board

    @property
    def phase(self) -> GamePhase:
        return self.session.phase

    def dispatch(self, action: Action) -> Session:
        previous = self.session
        self.session = reduce(previous, action, self.settings.bomb_count, self.random_int)
        if isinstance(action, Reset):
            self.moves_made = 0
        elif self.session is not previous:
            self.moves_made += 1
        return self.session

    def reveal(self, row: int, col: int) -> Session:
        return self.dispatch(Reveal(row, col))

    def toggle_mark(self, row: int, col: int) -> Session:
        return self.dispatch(ToggleMark(row, col))

    def reset(self) -> Session:
        self.session = new_session(self.settings.rows, self.settings.cols)
        self.moves_made = 0
        return self.session

    def step(self, action: str, row: int, col: int) -> dict:
        """
        Apply a named action ("reveal", or "flag"/"mark") at (row, col).
        Returns the state dict after the action.
        """
        try:
            action_cls = self.ACTIONS[action]
        except KeyError:
            raise ValueError(f"Unknown action {action!r}") from None
        self.dispatch(action_cls(row, col))
        return self.get_state()

    def get_state(self) -> dict:
        return {
            "board": get_visible_state(self.board, game_over=self.is_game_over()),
            "phase": self.phase.value,
            "game_over": self.is_game_over(),
            "won": self.is_win(),
            "moves_made": self.moves_made,
            "dimensions": (self.rows, self.cols),
            "num_mines": self.settings.bomb_count,
        }

    def is_game_over(self) -> bool:
        return self.phase.is_terminal

    def is_win(self) -> bool:
        return self.phase is GamePhase.WON

    def get_score(self) -> float:
        """Fraction of the board that is visible."""
        return self.board.count_status(CellStatus.VISIBLE) / (self.rows * self.cols)
