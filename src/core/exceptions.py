"""
Custom errors raised across layers.

All rejections of a request derive from GameError, so callers can catch a single type.
None of them are raised after a partial update: the game is unchanged when one is raised
(the exception being a move requested after checkmate, which moves the game to GAME_OVER first).
"""


class GameError(Exception):
    """Base class of everything the chess engine rejects."""


class GameStateError(GameError):
    """The game is not in a state that accepts the request (ex. it has already ended)."""


class PromotionPendingError(GameStateError):
    """A pawn reached the final rank. The player has to pick a piece before anything else can move."""


class NotYourPieceError(GameError):
    """The selected square is empty or holds a piece of the player who is not on turn."""


class IllegalMoveError(GameError):
    """The requested destination is not among the legal moves of the selected piece."""


class InvalidRequestError(GameError):
    """The request could not be interpreted (ex. a square name like 'z9')."""


class GameNotFoundError(GameError):
    """No game is registered under the requested id."""


class BoardIndexError(GameError, IndexError):
    """A square outside the 8x8 board was used to read or write the board. Indicates a bug in the caller."""
