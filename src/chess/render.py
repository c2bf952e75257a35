"""Text drawing of the board. Handy in logs and terminals, the engine itself never needs it."""

from typing import Iterable, Optional

from src.chess.board import Board
from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import BOARD_DIMENSIONS, FILE_NAMES, Square

UNICODE_PIECES: dict[Color, dict[PieceType, str]] = {
    Color.WHITE: {
        PieceType.KING: "♔",
        PieceType.QUEEN: "♕",
        PieceType.ROOK: "♖",
        PieceType.BISHOP: "♗",
        PieceType.KNIGHT: "♘",
        PieceType.PAWN: "♙",
    },
    Color.BLACK: {
        PieceType.KING: "♚",
        PieceType.QUEEN: "♛",
        PieceType.ROOK: "♜",
        PieceType.BISHOP: "♝",
        PieceType.KNIGHT: "♞",
        PieceType.PAWN: "♟",
    },
}

EMPTY_MARK = "*"
MOVE_MARK = "x"
CAPTURE_MARK = "X"


def piece_symbol(piece: Piece, unicode_pieces: bool = True) -> str:
    if unicode_pieces:
        return UNICODE_PIECES[piece.color][piece.type]
    return piece.to_fen()


def render_board(
    board: Board,
    highlights: Optional[Iterable[Square]] = None,
    unicode_pieces: bool = True,
) -> str:
    """
    Draw the board, 8th rank on top.

    Highlighted squares (ex. the possible moves of a selected piece) show an 'x' when empty, and an 'X' when
    a piece would be captured there. Other empty squares show a '*'.
    """
    marked = set(highlights or [])
    lines = [". " + " ".join(FILE_NAMES)]
    for rank in range(BOARD_DIMENSIONS[1] - 1, -1, -1):
        cells: list[str] = []
        for file in range(BOARD_DIMENSIONS[0]):
            square = Square(file, rank)
            piece = board.piece(square)
            if square in marked:
                cells.append(MOVE_MARK if piece is None else CAPTURE_MARK)
            elif piece is None:
                cells.append(EMPTY_MARK)
            else:
                cells.append(piece_symbol(piece, unicode_pieces))
        lines.append(f"{rank + 1} " + " ".join(cells))
    return "\n".join(lines)
