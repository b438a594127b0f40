from .board import (
    Board,
    Cell,
    CellStatus,
    Coordinate,
    adjacent_bomb_count,
    hide_cell,
    is_win,
    mark_cell,
    neighbor_coordinates,
    neighborhood,
    set_status,
    show_cell,
)
from .config import GameSettings, load_settings
from .exceptions import EngineError, InvalidConfiguration, OutOfBounds
from .game import Game, GamePhase, Reset, Reveal, Session, ToggleMark, new_session, reduce
from .generator import empty_board, generate
from .reveal import reveal_cascade

__all__ = [
    "Board", "Cell", "CellStatus", "Coordinate",
    "adjacent_bomb_count", "neighborhood", "neighbor_coordinates",
    "set_status", "show_cell", "mark_cell", "hide_cell", "is_win",
    "empty_board", "generate", "reveal_cascade",
    "Game", "GamePhase", "Session", "Reveal", "ToggleMark", "Reset", "new_session", "reduce",
    "GameSettings", "load_settings",
    "EngineError", "InvalidConfiguration", "OutOfBounds",
]
