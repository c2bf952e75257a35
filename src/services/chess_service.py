"""Orchestration of communication from the request models to the chess domain (and the reverse direction)."""

import logging
from typing import Optional
from uuid import UUID, uuid4

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    PossibleMovesRequest,
    PossibleMovesResponse,
    PromotionRequest,
    validate_square_name,
)
from src.chess.board import Board
from src.chess.game import Game
from src.chess.pieces import Color as DomainColor
from src.chess.render import render_board
from src.chess.square import Square
from src.core.config import EngineSettings, get_settings
from src.core.exceptions import GameNotFoundError
from src.core.shared_types import Color, GameStatus

logger = logging.getLogger(__name__)


class ChessService:
    """Keeps the running games in memory and translates square names into domain calls."""

    def __init__(self, settings: Optional[EngineSettings] = None) -> None:
        self.settings = settings or get_settings()
        self._games: dict[UUID, Game] = {}

    def create_new_game(self, request: Optional[CreateGameRequest] = None) -> GameResponse:
        """Start a game in the standard starting position, or in the position of the request."""
        request = request or CreateGameRequest()
        if request.starting_fen is None:
            game = Game.new_game()
        else:
            board = Board.from_fen(request.starting_fen)
            game = Game.from_board(board, DomainColor[request.color_to_move.name])

        game_id = uuid4()
        self._games[game_id] = game
        logger.info("Created game %s", game_id)
        return self._create_game_response(game_id, game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        game = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game)

    def possible_moves(self, request: PossibleMovesRequest) -> PossibleMovesResponse:
        """Legal destinations for one of the pieces of the player on turn."""
        game = self._fetch_game(request.game_id)
        targets = game.possible_moves(Square.from_algebraic(request.square))
        return PossibleMovesResponse(
            game_id=request.game_id,
            square=request.square,
            color=Color[game.color_to_move.name],
            possible_moves=[target.to_algebraic() for target in targets],
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt. Rejected moves raise, and leave the game untouched."""
        game = self._fetch_game(request.game_id)
        game.make_move(
            Square.from_algebraic(request.from_square),
            Square.from_algebraic(request.to_square),
        )

        if self.settings.log_board_after_move:
            logger.debug("\n%s", render_board(game.board, unicode_pieces=self.settings.unicode_pieces))
        return self._create_game_response(request.game_id, game)

    def set_promotion(self, request: PromotionRequest) -> GameResponse:
        """Choose the piece for a pawn on the final rank. Invalid choices are ignored by the game."""
        game = self._fetch_game(request.game_id)
        game.set_promotion(request.promote_to)
        return self._create_game_response(request.game_id, game)

    def render_board(self, request: GetGameRequest, square: Optional[str] = None) -> str:
        """Draw the board. With a square given, its possible moves are marked as well."""
        game = self._fetch_game(request.game_id)
        highlights = None
        if square is not None:
            highlights = game.possible_moves(Square.from_algebraic(validate_square_name(square)))
        return render_board(game.board, highlights, unicode_pieces=self.settings.unicode_pieces)

    def delete_game(self, request: DeleteGameRequest) -> None:
        self._fetch_game(request.game_id)
        del self._games[request.game_id]

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, game: Game) -> GameResponse:
        winner = game.winner
        return GameResponse(
            game_id=game_id,
            fen_position=game.board.to_fen(),
            color_to_move=Color[game.color_to_move.name],
            status=GameStatus[game.state.name],
            pending_promotion=game.pending_promotion,
            move_history=[move.to_uci() for move in game.moves],
            winner=Color[winner.name] if winner else None,
        )

    def _fetch_game(self, game_id: UUID) -> Game:
        """Attempt to find the game and raise error if it fails."""
        game = self._games.get(game_id)
        if game is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return game
