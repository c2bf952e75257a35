from uuid import UUID, uuid4

import pytest

from src.api.models import (
    CreateGameRequest,
    MoveRequest,
    PossibleMovesRequest,
    PromotionRequest,
)
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - CreateGameRequest --
def test_valid_fen() -> None:
    valid_fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
    request = CreateGameRequest(starting_fen=valid_fen, color_to_move=Color.BLACK)
    assert request.starting_fen == valid_fen
    assert request.color_to_move == Color.BLACK


def test_starting_fen_is_optional() -> None:
    request = CreateGameRequest()
    assert request.starting_fen is None
    assert request.color_to_move == Color.WHITE


@pytest.mark.parametrize(
    "invalid_fen",
    [
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP",  # only 7 ranks
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR/8",  # too many ranks
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBN",  # last rank too short
        "rnbqkbnr/pppppppp/9/8/8/8/PPPPPPPP/RNBQKBNR",  # rank too long
        "rnbqkbnr/ppppxppp/8/8/8/8/PPPPPPPP/RNBQKBNR",  # not a piece
    ],
)
def test_invalid_fen(invalid_fen: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = CreateGameRequest(starting_fen=invalid_fen)


# -- Validation - MoveRequest --
@pytest.mark.parametrize("from_square, to_square", [("e2", "e4"), ("a1", "h8"), ("E2", "E4")])
def test_valid_square_names(mock_id: UUID, from_square: str, to_square: str) -> None:
    request = MoveRequest(game_id=mock_id, from_square=from_square, to_square=to_square)
    assert request.from_square == from_square.lower()
    assert request.to_square == to_square.lower()


@pytest.mark.parametrize("invalid_square", ["e9", "i1", "e", "e22", "22", "", "e0"])
def test_invalid_square_names(mock_id: UUID, invalid_square: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(game_id=mock_id, from_square=invalid_square, to_square="e4")
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(game_id=mock_id, from_square="e2", to_square=invalid_square)
    with pytest.raises(InvalidRequestError):
        _ = PossibleMovesRequest(game_id=mock_id, square=invalid_square)


def test_promotion_request_accepts_any_name(mock_id: UUID) -> None:
    """Deciding what is a valid promotion is up to the game (which ignores invalid ones)"""
    assert PromotionRequest(game_id=mock_id, promote_to="Dragon").promote_to == "Dragon"
