"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.exceptions import InvalidRequestError

# Chess board is always 8x8. Files and ranks are zero-based: (0, 0) is a1, (7, 7) is h8
BOARD_DIMENSIONS = (8, 8)
FILE_NAMES = "abcdefgh"
RANK_NAMES = "12345678"


@dataclass(frozen=True)
class Square:
    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7)"""
        if len(sq) != 2 or sq[0].lower() not in FILE_NAMES or sq[1] not in RANK_NAMES:
            raise InvalidRequestError(f"Cannot interpret {sq!r} as a square name (a1 - h8).")
        file = FILE_NAMES.index(sq[0].lower())
        rank = RANK_NAMES.index(sq[1])
        return cls(file, rank)

    def to_algebraic(self) -> str:
        return f"{FILE_NAMES[self.file]}{self.rank + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.file < BOARD_DIMENSIONS[0]) and (
            0 <= self.rank < BOARD_DIMENSIONS[1]
        )

    def offset(self, df: int, dr: int) -> Square:
        """The square shifted by the given vector. May land off the board, so check bounds before using it."""
        return Square(self.file + df, self.rank + dr)


def all_squares() -> list[Square]:
    """Every square of the board in scan order: a1, b1, ..., h1, a2, ..., h8"""
    return [
        Square(file, rank)
        for rank in range(BOARD_DIMENSIONS[1])
        for file in range(BOARD_DIMENSIONS[0])
    ]
