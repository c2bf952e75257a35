"""Unit tests for /src/chess/pieces.py"""

from dataclasses import FrozenInstanceError

import pytest

from src.chess.pieces import (
    FEN_TO_PIECE,
    PIECE_TO_FEN,
    PROMOTION_OPTIONS,
    Color,
    Piece,
    PieceType,
    parse_promotion_choice,
)


@pytest.mark.parametrize("char", [char.upper() for char in FEN_TO_PIECE.keys()])
def test_creating_white_piece_from_fen(char: str) -> None:
    """Capital letters are used for white pieces"""
    piece = Piece.from_fen(char)
    assert piece.type == FEN_TO_PIECE[char.lower()]
    assert piece.color == Color.WHITE


@pytest.mark.parametrize("char", [char.lower() for char in FEN_TO_PIECE.keys()])
def test_creating_black_piece_from_fen(char: str) -> None:
    """Lower case letters are used for black pieces"""
    piece = Piece.from_fen(char)
    assert piece.type == FEN_TO_PIECE[char.lower()]
    assert piece.color == Color.BLACK


@pytest.mark.parametrize("piece_type", list(PieceType))
def test_pieces_to_fen(piece_type: PieceType) -> None:
    assert Piece(piece_type, Color.WHITE).to_fen() == PIECE_TO_FEN[piece_type].upper()
    assert Piece(piece_type, Color.BLACK).to_fen() == PIECE_TO_FEN[piece_type].lower()


def test_pieces_are_plain_values() -> None:
    """No identity: two pawns of the same color are the same thing, and a piece cannot be changed in place"""
    assert Piece(PieceType.PAWN, Color.WHITE) == Piece(PieceType.PAWN, Color.WHITE)
    piece = Piece(PieceType.PAWN, Color.BLACK)
    with pytest.raises(FrozenInstanceError):
        piece.type = PieceType.QUEEN  # type: ignore[misc]


def test_opponent_color() -> None:
    assert Color.WHITE.opponent == Color.BLACK
    assert Color.BLACK.opponent == Color.WHITE


@pytest.mark.parametrize(
    "choice, expected",
    [
        ("Queen", PieceType.QUEEN),
        ("rook", PieceType.ROOK),
        ("BISHOP", PieceType.BISHOP),
        ("Knight", PieceType.KNIGHT),
        ("q", PieceType.QUEEN),
        ("N", PieceType.KNIGHT),
        (PieceType.ROOK, PieceType.ROOK),
    ],
)
def test_parse_valid_promotion_choice(choice: str | PieceType, expected: PieceType) -> None:
    assert parse_promotion_choice(choice) == expected


@pytest.mark.parametrize(
    "choice", ["King", "Pawn", "k", "p", "Dragon", "", PieceType.KING, PieceType.PAWN]
)
def test_parse_invalid_promotion_choice(choice: str | PieceType) -> None:
    """Kings and pawns are never an option, and typos are not guessed"""
    assert parse_promotion_choice(choice) is None


def test_promotion_options() -> None:
    assert set(PROMOTION_OPTIONS) == {
        PieceType.QUEEN,
        PieceType.ROOK,
        PieceType.BISHOP,
        PieceType.KNIGHT,
    }
