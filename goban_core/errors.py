from __future__ import annotations


class GobanError(Exception):
    """Base class for all errors raised by goban_core."""


class BoardSizeError(GobanError, ValueError):
    """Raised when a board dimension is outside the supported range."""


class BoardTooLargeError(BoardSizeError):
    """Raised when either board dimension exceeds the 19-line maximum."""


class InvalidTokenError(GobanError, ValueError):
    """Raised when a state token cannot be parsed into a board."""


class InvalidMoveError(GobanError, ValueError):
    """Raised for malformed move identifiers and button ids."""


class GameOverError(GobanError):
    """Raised when an action is applied after a player has resigned."""


class InvalidTransitionError(GobanError):
    """Raised when an action is not valid in the current selection phase."""
