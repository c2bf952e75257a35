"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define candidate move sets for each piece type.
A candidate move ignores whether it leaves the mover's own king in check.

Legality is checked later in rules.py
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Self

from src.chess.pieces import FEN_TO_PIECE, PIECE_TO_FEN, Color, Piece, PieceType
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import InvalidRequestError


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece(self, square: Square) -> Optional[Piece]: ...


Vector = tuple[int, int]


@dataclass
class Move:
    """basic definition of a move that was made"""

    from_square: Square
    to_square: Square
    promote_to: Optional[PieceType] = None

    @classmethod
    def from_uci(cls, uci: str) -> Self:
        """
        Universal Chess Interface notation:

        * "e2e4": move the piece that was on e2 to e4
        * "e7e8q" : (pawn) moves from e7 to e8 and promotes to a queen (the q)
        """
        if len(uci) not in (4, 5) or (len(uci) == 5 and uci[4] not in FEN_TO_PIECE):
            raise InvalidRequestError(f"Cannot interpret {uci!r} as a UCI move.")
        from_sq = Square.from_algebraic(uci[:2])
        to_sq = Square.from_algebraic(uci[2:4])
        move = cls(from_sq, to_sq)
        if len(uci) == 5:
            move.promote_to = FEN_TO_PIECE[uci[4]]
        return move

    def to_uci(self) -> str:
        piece_char = PIECE_TO_FEN[self.promote_to] if self.promote_to else ""
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}{piece_char}"


# --- DIRECTIONS ---
# Order matters: rays are walked in this order, so candidate lists come out left, right, down, up.
STRAIGHTS: list[Vector] = [(-1, 0), (1, 0), (0, -1), (0, 1)]
DIAGONALS: list[Vector] = [(-1, 1), (1, 1), (-1, -1), (1, -1)]
KING_DELTAS: list[Vector] = [
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
]
KNIGHT_DELTAS: list[Vector] = [
    (-2, 1),
    (-1, 2),
    (1, 2),
    (2, 1),
    (2, -1),
    (1, -2),
    (-1, -2),
    (-2, -1),
]

# (home rank for the double step, direction of travel along the ranks)
PAWN_RULES: dict[Color, tuple[int, int]] = {
    Color.WHITE: (1, 1),
    Color.BLACK: (6, -1),
}


def distance_to_edge(square: Square, direction: Vector) -> int:
    """
    How many steps fit along the direction before leaving the board.

    For a diagonal this is the minimum of the distances to the two edges the ray is heading for.
    """
    limits: list[int] = []
    for coordinate, step, size in zip(
        (square.file, square.rank), direction, BOARD_DIMENSIONS
    ):
        if step > 0:
            limits.append(size - 1 - coordinate)
        elif step < 0:
            limits.append(coordinate)
    return min(limits) if limits else 0


# --- MOVEMENT RULES ---
def raycasting_move(
    square: Square, board: Board, directions: list[Vector]
) -> list[Square]:
    """
    Raycasting algorithm
    -----

    ---
    The main trick we use to check the 'line of sight of a piece'.
    We define move directions and move along them until we hit another piece or
    the edge of the board.

    The length of every ray is computed up front, so a square off the board is never looked at.
    """
    player_color = board.piece(square).color

    targets: list[Square] = []
    for df, dr in directions:
        for steps in range(1, distance_to_edge(square, (df, dr)) + 1):
            target_square = square.offset(df * steps, dr * steps)
            piece_found = board.piece(target_square)
            if piece_found is None:
                targets.append(target_square)
                continue

            # only the first occupied square counts, and only if it can be captured.
            if piece_found.color != player_color:
                targets.append(target_square)
            break
    return targets


def single_step_move(
    square: Square, board: Board, deltas: list[Vector]
) -> list[Square]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that just jump a single step along a direction"""
    player_color = board.piece(square).color

    targets: list[Square] = []
    for df, dr in deltas:
        target_square = square.offset(df, dr)
        if not target_square.is_within_bounds():
            continue

        piece_found = board.piece(target_square)
        if piece_found is None or piece_found.color != player_color:
            targets.append(target_square)
    return targets


def candidate_pawn_moves(square: Square, board: Board) -> list[Square]:
    """
    A pawn:
    - moves by a single square forward, onto an empty square only.
    - takes diagonally forward, onto an opponent's piece only.
    - can move by two from its starting rank, if the square in between is free as well.
    """
    player_color = board.piece(square).color
    home_rank, direction = PAWN_RULES[player_color]

    targets: list[Square] = []
    one_step = square.offset(0, direction)
    if not one_step.is_within_bounds():
        return targets

    forward_is_free = board.piece(one_step) is None
    if forward_is_free:
        targets.append(one_step)

    # pawns take diagonally:
    for df in (-1, 1):
        capture_square = square.offset(df, direction)
        if not capture_square.is_within_bounds():
            continue
        piece_found = board.piece(capture_square)
        if piece_found is not None and piece_found.color != player_color:
            targets.append(capture_square)

    if forward_is_free and square.rank == home_rank:
        two_steps = square.offset(0, 2 * direction)
        if two_steps.is_within_bounds() and board.piece(two_steps) is None:
            targets.append(two_steps)
    return targets


def candidate_knight_moves(square: Square, board: Board) -> list[Square]:
    """Knights always jump such that |delta_rank| + |delta_file| = 3"""
    return single_step_move(square, board, KNIGHT_DELTAS)


def candidate_bishop_moves(square: Square, board: Board) -> list[Square]:
    """Bishops move diagonally: |delta_rank| = |delta_file|"""
    return raycasting_move(square, board, DIAGONALS)


def candidate_rook_moves(square: Square, board: Board) -> list[Square]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(square, board, STRAIGHTS)


def candidate_queen_moves(square: Square, board: Board) -> list[Square]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    horizontal_and_vertical_moves = candidate_rook_moves(square, board)
    diagonal_moves = candidate_bishop_moves(square, board)
    return horizontal_and_vertical_moves + diagonal_moves


def candidate_king_moves(square: Square, board: Board) -> list[Square]:
    """The king can move by a single square at the time."""
    return single_step_move(square, board, KING_DELTAS)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Square, Board], list[Square]]
MOVEMENT_RULES: dict[PieceType, CandidateMovesFn] = {
    PieceType.PAWN: candidate_pawn_moves,
    PieceType.KNIGHT: candidate_knight_moves,
    PieceType.BISHOP: candidate_bishop_moves,
    PieceType.ROOK: candidate_rook_moves,
    PieceType.QUEEN: candidate_queen_moves,
    PieceType.KING: candidate_king_moves,
}


def candidate_moves(piece_type: PieceType, square: Square, board: Board) -> list[Square]:
    """Destinations reachable by the piece of the given type standing on the square (own king safety ignored)"""
    movement_rule = MOVEMENT_RULES[piece_type]
    return movement_rule(square, board)


# -- PAWN PROMOTION --
def promotion_rank(color: Color) -> int:
    """White pawns promote on the 8th rank, black pawns on the 1st rank"""
    return BOARD_DIMENSIONS[1] - 1 if color == Color.WHITE else 0


def is_pawn_push_to_promotion_square(piece: Piece, to_square: Square) -> bool:
    """check if the piece is a pawn and if the move reaches its final rank"""
    return piece.type == PieceType.PAWN and to_square.rank == promotion_rank(
        piece.color
    )
