# engine/exceptions.py


class EngineError(Exception):
    """Base class for errors raised by the game engine."""


class InvalidConfiguration(EngineError, ValueError):
    """
    Board dimensions or bomb count cannot produce a valid board.
    Fatal to session creation.
    """


class OutOfBounds(EngineError, IndexError):
    """A coordinate outside [0, rows) x [0, cols) was passed to the engine."""

    def __init__(self, row, col, rows, cols):
        super().__init__(f"({row}, {col}) is outside a {rows}x{cols} board")
        self.row = row
        self.col = col
