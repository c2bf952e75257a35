"""Defines the types of chess pieces"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Self


class PieceType(Enum):
    KING = auto()
    QUEEN = auto()
    ROOK = auto()
    KNIGHT = auto()
    BISHOP = auto()
    PAWN = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self == Color.WHITE else Color.WHITE


FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}

# A pawn reaching the far rank may only turn into one of these
PROMOTION_OPTIONS: list[PieceType] = [
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
]


@dataclass(frozen=True)
class Piece:
    type: PieceType
    color: Color

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        piece_type = FEN_TO_PIECE[character.lower()]
        return cls(piece_type, color)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.type].upper()
            if self.color == Color.WHITE
            else PIECE_TO_FEN[self.type].lower()
        )


def parse_promotion_choice(choice: "str | PieceType") -> Optional[PieceType]:
    """
    Interpret the piece a pawn should promote into.

    Accepts the PieceType itself, its name in any casing ("Queen", "queen") or its FEN letter ("q").
    Returns None for anything that is not a valid promotion option (kings and pawns included).
    """
    if isinstance(choice, PieceType):
        return choice if choice in PROMOTION_OPTIONS else None

    name = choice.strip()
    if len(name) == 1:
        piece_type = FEN_TO_PIECE.get(name.lower())
    else:
        piece_type = PieceType.__members__.get(name.upper())
    return piece_type if piece_type in PROMOTION_OPTIONS else None
