"""Requests and Response models"""

import re
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, GameStatus

SQUARE_PATTERN = re.compile(r"^[a-h][1-8]$")
FEN_RANK_PATTERN = re.compile(r"^[pnbrqkPNBRQK1-8]+$")


def validate_square_name(value: str) -> str:
    square_name = value.strip().lower()
    if not SQUARE_PATTERN.match(square_name):
        raise InvalidRequestError(
            f"Cannot interpret {value!r} as a valid square name (a1 - h8)."
        )
    return square_name


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    # piece placement part of a FEN string. None: standard starting position
    starting_fen: Optional[str] = None
    color_to_move: Color = Color.WHITE

    @field_validator("starting_fen")
    @classmethod
    def validate_starting_fen(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        ranks = value.strip().split("/")
        if len(ranks) != 8:
            raise InvalidRequestError("FEN piece placement must contain 8 ranks separated by '/'.")

        for rank in ranks:
            if not FEN_RANK_PATTERN.match(rank):
                raise InvalidRequestError(f"Invalid characters in FEN rank {rank!r}.")
            width = sum(int(char) if char.isdigit() else 1 for char in rank)
            if width != 8:
                raise InvalidRequestError(f"FEN rank {rank!r} does not cover 8 files.")
        return value.strip()


class MoveRequest(BaseModel):
    game_id: UUID
    from_square: str
    to_square: str

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        return validate_square_name(value)


class PromotionRequest(BaseModel):
    game_id: UUID
    # Queen, Rook, Bishop or Knight. Anything else is ignored by the game, so no validation here.
    promote_to: str


class PossibleMovesRequest(BaseModel):
    game_id: UUID
    square: str

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        return validate_square_name(value)


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    fen_position: str
    color_to_move: Color
    status: GameStatus
    pending_promotion: bool
    move_history: list[str]
    winner: Optional[Color] = None


class PossibleMovesResponse(BaseModel):
    game_id: UUID
    square: str
    color: Color
    possible_moves: list[str]
