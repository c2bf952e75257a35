"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.chess.board import Board
from src.chess.game import Game
from src.chess.pieces import Color
from src.core.config import EngineSettings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> None:
    """Settings are cached per process. Make sure environment changes in one test do not leak into another."""
    get_settings.cache_clear()


@pytest.fixture
def settings() -> EngineSettings:
    return EngineSettings(log_level="DEBUG", unicode_pieces=False)


@pytest.fixture
def game_from_fen() -> Callable[[str, Color], Game]:
    """Call the inner function with a FEN piece placement (and the color to move) to get a Game in that position"""

    def _create_game(fen: str, color_to_move: Color = Color.WHITE) -> Game:
        return Game.from_board(Board.from_fen(fen), color_to_move)

    return _create_game
