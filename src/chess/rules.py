"""
Whole-board rules built on top of the movement rules:

* check detection: is a king in the line of sight of any opposing piece?
* legal move filter: candidate moves that do not leave your own king in check
* checkmate detection: in check, and no legal move left.

Hypothetical moves are played on the real board and always reverted (see `simulated_move`),
so none of the queries in this module change the position as seen by the caller.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from src.chess.board import Board
from src.chess.moves import candidate_moves
from src.chess.pieces import Color
from src.chess.square import Square

logger = logging.getLogger(__name__)


# --- CHECK DETECTION ---
def is_in_check(color: Color, board: Board) -> bool:
    """
    Is the king of the given color attacked?

    Scans every piece of the opponent and asks for its candidate moves. Calls the movement rules directly
    (never the legal move filter): whether the attacker would expose its own king does not matter for giving check.
    """
    king_square = board.locate_king(color)
    if king_square is None:
        return False

    for square in board.locate_color(color.opponent):
        if king_square in available_moves(square, board, with_check_filtering=False):
            return True
    return False


# --- LEGAL MOVE FILTER ---
@contextmanager
def simulated_move(board: Board, from_square: Square, to_square: Square) -> Iterator[Board]:
    """
    Play the move on the board for the duration of the with-block.

    The two squares involved are remembered and put back on exit, whichever way the block is left.
    """
    moving_piece = board.piece(from_square)
    captured_piece = board.piece(to_square)
    board.move_piece(from_square, to_square)
    try:
        yield board
    finally:
        board.place_piece(moving_piece, from_square)
        board.place_piece(captured_piece, to_square)


def is_putting_yourself_in_check(
    from_square: Square, to_square: Square, board: Board
) -> bool:
    """Return True if the move would leave the mover's king attacked"""
    player_color = board.piece(from_square).color
    with simulated_move(board, from_square, to_square):
        return is_in_check(player_color, board)


def available_moves(
    square: Square, board: Board, with_check_filtering: bool = True
) -> list[Square]:
    """
    Destinations for the piece standing on the square. Empty list if nothing stands there.

    with_check_filtering=False gives the raw candidate moves. Check detection uses those,
    which keeps it from recursing back into this filter.
    """
    piece = board.piece(square)
    if piece is None:
        return []

    candidates = candidate_moves(piece.type, square, board)
    if not with_check_filtering:
        return candidates

    legal = [
        target
        for target in candidates
        if not is_putting_yourself_in_check(square, target, board)
    ]
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "%s on %s: candidates=%s legal=%s",
            piece.type.name,
            square.to_algebraic(),
            [target.to_algebraic() for target in candidates],
            [target.to_algebraic() for target in legal],
        )
    return legal


def legal_moves(square: Square, board: Board) -> list[Square]:
    """Candidate moves that survive the self-check filter"""
    return available_moves(square, board, with_check_filtering=True)


def has_legal_move(color: Color, board: Board) -> bool:
    return any(legal_moves(square, board) for square in board.locate_color(color))


# --- CHECKMATE ---
def is_checkmate(color: Color, board: Board) -> bool:
    """
    In check, and none of your pieces has a legal move.

    NOTE: having no legal move while NOT in check (stalemate) is not detected and simply returns False.
    """
    return is_in_check(color, board) and not has_legal_move(color, board)
