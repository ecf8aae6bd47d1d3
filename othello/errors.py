class OthelloError(Exception):
    """Base exception for the app."""

class IllegalMoveError(OthelloError):
    """Move not legal under current board state."""

class CellOccupiedError(IllegalMoveError):
    """Placement attempted on a cell that already holds a piece."""

class NotationError(OthelloError):
    """Move text that is not a row/column pair on the board."""

class ConfigError(OthelloError):
    """Invalid setting supplied at the prompt or command line."""

class SearchTimeout(OthelloError):
    """Search deadline passed before the tree was fully examined."""
