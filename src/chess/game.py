"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of the board game:
validating who moves, committing a legal move, updating the game state and handling pawn promotion.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from src.chess import rules
from src.chess.board import Board
from src.chess.moves import Move, is_pawn_push_to_promotion_square, promotion_rank
from src.chess.pieces import Color, Piece, PieceType, parse_promotion_choice
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import (
    GameStateError,
    IllegalMoveError,
    NotYourPieceError,
    PromotionPendingError,
)

logger = logging.getLogger(__name__)


class GameState(Enum):
    IN_PROGRESS = auto()
    CHECK = auto()
    CHECKMATE = auto()
    GAME_OVER = auto()


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    color_to_move: Color = Color.WHITE
    state: GameState = GameState.IN_PROGRESS
    # Set when a pawn reached the final rank: the turn is on hold until a promotion piece is chosen
    move_made: bool = False
    moves: list[Move] = field(default_factory=list)

    @classmethod
    def new_game(cls) -> Self:
        """Standard starting position, white to move."""
        return cls(board=Board.starting_position())

    @classmethod
    def from_board(cls, board: Board, color_to_move: Color = Color.WHITE) -> Self:
        """Start from an arbitrary position. The state reflects whether the side to move is (check)mated already."""
        game = cls(board=board, color_to_move=color_to_move)
        game.state = game._evaluate_state(color_to_move)
        return game

    @property
    def game_state(self) -> GameState:
        return self.state

    @property
    def pending_promotion(self) -> bool:
        return self.move_made

    @property
    def winner(self) -> Optional[Color]:
        """The color that delivered checkmate. None while the game is still going."""
        if self.state not in (GameState.CHECKMATE, GameState.GAME_OVER):
            return None
        return next(
            (color.opponent for color in Color if self.is_checkmate(color)), None
        )

    def is_in_check(self, color: Color) -> bool:
        return rules.is_in_check(color, self.board)

    def is_checkmate(self, color: Color) -> bool:
        return rules.is_checkmate(color, self.board)

    def possible_moves(self, square: Square) -> list[Square]:
        """
        Legal destinations for the piece on the square.
        ----

        Only the pieces of the player on turn can be queried.
        """
        self._assert_your_piece(square)
        return rules.legal_moves(square, self.board)

    def make_move(self, from_square: Square, to_square: Square) -> GameState:
        """
        Attempt to make a move
        -----

        1. the game must still be running, and no promotion may be outstanding
        2. the piece on from_square must belong to the player on turn
        3. to_square must be one of its legal moves
        4. update the board and the list of moves
        5. update the game state from the opponent's point of view
        6. pass the turn, unless a pawn reached the final rank (then wait for `set_promotion`)
        """
        # A game that ended in checkmate accepts no more moves
        if self.state in (GameState.CHECKMATE, GameState.GAME_OVER):
            self._change_state(GameState.GAME_OVER)
            raise GameStateError("The game is over. No more moves can be made.")

        if self.move_made:
            raise PromotionPendingError(
                "A pawn is waiting to be promoted. Choose a piece before making another move."
            )

        self._assert_your_piece(from_square)

        if to_square not in rules.legal_moves(from_square, self.board):
            logger.debug("Rejected %s%s: not a legal move", from_square.to_algebraic(), to_square.to_algebraic())
            raise IllegalMoveError(
                f"Move not allowed: {from_square.to_algebraic()}{to_square.to_algebraic()}"
            )

        moving_piece = self.board.piece(from_square)
        assert moving_piece is not None
        self._update_board(from_square, to_square)
        self._update_moves(Move(from_square, to_square))
        logger.info(
            "%s %s %s-%s",
            self.color_to_move.name.lower(),
            moving_piece.type.name.lower(),
            from_square.to_algebraic(),
            to_square.to_algebraic(),
        )

        self._change_state(self._evaluate_state(self.color_to_move.opponent))

        if is_pawn_push_to_promotion_square(moving_piece, to_square):
            self.move_made = True
            logger.info("Waiting for promotion choice on %s", to_square.to_algebraic())
        else:
            self._change_turn()

        return self.state

    def set_promotion(self, choice: "str | PieceType") -> None:
        """
        Promote the pawn waiting on the final rank and complete the turn.
        ----

        Unknown or disallowed choices (king, pawn, typos) are ignored, as is a call without a pending promotion
        or on a game that is over.
        """
        if self.state == GameState.GAME_OVER:
            logger.debug("Ignoring promotion to %r: the game is over", choice)
            return

        piece_type = parse_promotion_choice(choice)
        if piece_type is None:
            logger.warning("Ignoring promotion to %r: not a valid choice", choice)
            return

        if not self.move_made:
            logger.debug("Ignoring promotion to %s: no pawn to promote", piece_type.name)
            return

        promoted_square = self._promote_pawn(piece_type)
        if promoted_square is None:
            return

        # the new piece might give check on its own
        self._change_state(self._evaluate_state(self.color_to_move.opponent))
        self._change_turn()

    # -- PRIVATE HELPERS ---
    def _assert_your_piece(self, square: Square) -> None:
        """You can only select the pieces of your own color while it is your turn."""
        piece = self.board.piece(square)
        if piece is None:
            raise NotYourPieceError(f"There is no piece on {square.to_algebraic()}.")
        if piece.color != self.color_to_move:
            raise NotYourPieceError(
                f"The piece on {square.to_algebraic()} is not yours to move. Waiting for {self.color_to_move.name.lower()}."
            )

    def _evaluate_state(self, color: Color) -> GameState:
        """The state of the game as seen by the given player"""
        if not rules.is_in_check(color, self.board):
            return GameState.IN_PROGRESS
        if not rules.has_legal_move(color, self.board):
            return GameState.CHECKMATE
        return GameState.CHECK

    def _update_board(self, from_square: Square, to_square: Square) -> None:
        captured = self.board.move_piece(from_square, to_square)
        if captured is not None:
            logger.debug(
                "Captured %s %s on %s",
                captured.color.name.lower(),
                captured.type.name.lower(),
                to_square.to_algebraic(),
            )

    def _update_moves(self, move: Move) -> None:
        self.moves.append(move)

    def _change_turn(self) -> None:
        self.color_to_move = self.color_to_move.opponent
        self.move_made = False

    def _change_state(self, new_state: GameState) -> None:
        if new_state != self.state:
            logger.info("Game state %s -> %s", self.state.name, new_state.name)
        self.state = new_state

    # -- PROMOTION RULE HELPERS ---
    def _promote_pawn(self, piece_type: PieceType) -> Optional[Square]:
        """
        Replace the first pawn found on the final rank (scanning from the a-file) with the chosen piece.

        NOTE: the pawn that just moved is not tracked. Should two pawns ever stand on the final rank, the first one wins.
        """
        color = self.color_to_move
        rank = promotion_rank(color)
        for file in range(BOARD_DIMENSIONS[0]):
            square = Square(file, rank)
            if self.board.piece(square) == Piece(PieceType.PAWN, color):
                self.board.place_piece(Piece(piece_type, color), square)
                if self.moves:
                    self.moves[-1].promote_to = piece_type
                logger.info(
                    "Promoted pawn on %s to %s", square.to_algebraic(), piece_type.name
                )
                return square
        return None
