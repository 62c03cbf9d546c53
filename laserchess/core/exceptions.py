"""
Custom exceptions shared by all layers.

Everything derives from LaserChessError, so a caller (the service layer, or the legality check in the GameState)
can catch the whole family in one go without accidentally swallowing programming errors.
"""


class LaserChessError(Exception):
    """Top-level exception for anything raised on purpose by this package."""


# --- STRUCTURAL ERRORS: always fatal to the call ---
class InvalidNotationError(LaserChessError):
    """A board, position or action string could not be parsed."""


class OutOfBoundsError(LaserChessError):
    """Accessing a position that does not exist on the board."""


class DirectionError(LaserChessError):
    """Operation that makes no sense for the direction family (ex. decomposing a cardinal direction)."""


class PieceError(LaserChessError):
    """Operation that requires an actual piece, called on an empty square."""


class InvalidActionError(LaserChessError):
    """The action cannot be applied to the given board."""


# --- LEGALITY ---
class IllegalActionError(LaserChessError):
    """Structurally fine, but playing it would result in an illegal turn."""


# --- PROTOCOL MISUSE ---
class GameStateError(LaserChessError):
    """The game is not in a state that allows the requested operation."""


class HistoryError(GameStateError):
    """Navigating the history beyond what has been recorded."""


# --- BOUNDARY LAYERS ---
class InvalidRequestError(LaserChessError):
    """Request sent to the service did not pass validation."""


class RepositoryError(LaserChessError):
    """Game record not found / could not be stored."""
