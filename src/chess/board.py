"""The Game board: a raw 8x8 grid of optional pieces. Knows nothing about the rules, only where pieces stand."""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import BOARD_DIMENSIONS, Square, all_squares
from src.core.exceptions import BoardIndexError

# Order of the pieces on the back rank, from the a-file to the h-file
BACK_RANK: list[PieceType] = [
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
]

# (back rank, pawn rank) per color, zero-based
HOME_RANKS: dict[Color, tuple[int, int]] = {
    Color.WHITE: (0, 1),
    Color.BLACK: (7, 6),
}


@dataclass
class Board:
    # Only occupied squares are stored. A missing key is an empty square.
    position: dict[Square, Piece] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> Self:
        return cls()

    @classmethod
    def starting_position(cls) -> Self:
        """Standard opening setup: white on ranks 1-2, black on ranks 7-8"""
        board = cls()
        for color, (back_rank, pawn_rank) in HOME_RANKS.items():
            for file, piece_type in enumerate(BACK_RANK):
                board.place_piece(Piece(piece_type, color), Square(file, back_rank))
                board.place_piece(Piece(PieceType.PAWN, color), Square(file, pawn_rank))
        return board

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank, reading from the a-file to the h-file
        * pawns cover 7th rank entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        * 1st rank are the white pieces.
        """
        board = cls()
        fen_by_ranks = fen_str.split("/")
        for rank_idx, fen_one_rank in enumerate(fen_by_ranks):
            # FEN string is read from top rank (8th) to bottom rank (1st)
            rank = BOARD_DIMENSIONS[1] - 1 - rank_idx
            file = 0
            for character in fen_one_rank:
                if character.isalpha():
                    board.place_piece(Piece.from_fen(character), Square(file, rank))
                    file += 1
                else:
                    # A number denotes the amount of empty squares after each other
                    file += int(character)
        return board

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(
            self._rank_to_fen(rank) for rank in range(BOARD_DIMENSIONS[1] - 1, -1, -1)
        )

    def _rank_to_fen(self, rank: int) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for file in range(BOARD_DIMENSIONS[0]):
            piece = self.piece(Square(file, rank))

            if piece is not None:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    # --- RAW ACCESS ---
    def piece(self, square: Square) -> Optional[Piece]:
        self._assert_within_bounds(square)
        return self.position.get(square)

    def is_empty(self, square: Square) -> bool:
        return self.piece(square) is None

    def place_piece(self, piece: Optional[Piece], square: Square) -> None:
        """Put a piece on the square (replacing whatever stood there). Placing None clears the square."""
        self._assert_within_bounds(square)
        if piece is None:
            self.position.pop(square, None)
        else:
            self.position[square] = piece

    def remove_piece(self, square: Square) -> Optional[Piece]:
        """Clear the square and return what stood there"""
        self._assert_within_bounds(square)
        return self.position.pop(square, None)

    def move_piece(self, from_square: Square, to_square: Square) -> Optional[Piece]:
        """Update the position on the board. Returns the captured piece (if any)."""
        piece_that_moved = self.remove_piece(from_square)
        captured = self.remove_piece(to_square)
        self.place_piece(piece_that_moved, to_square)
        return captured

    # --- LOOKUPS ---
    def locate_color(self, color: Color) -> list[Square]:
        """All squares occupied by the given color, in scan order (a1, b1, ..., h8)"""
        return [
            square
            for square in all_squares()
            if (piece := self.position.get(square)) is not None
            and piece.color == color
        ]

    def locate_pieces(self, piece_type: PieceType, color: Color) -> list[Square]:
        return [
            square
            for square in self.locate_color(color)
            if self.position[square].type == piece_type
        ]

    def locate_king(self, color: Color) -> Optional[Square]:
        kings = self.locate_pieces(PieceType.KING, color)
        return kings[0] if kings else None

    def copy(self) -> Self:
        return type(self)(dict(self.position))

    def _assert_within_bounds(self, square: Square) -> None:
        if not square.is_within_bounds():
            raise BoardIndexError(f"Square {square} lies outside of the board.")
