"""
Type definitions used across layers
"""

from enum import StrEnum

# --- The boundary layer (requests/responses) uses string valued versions of the domain enums.
# --- NOTE Same names as the domain enums, as that reads clearly. The imports show which versions are used where.


class GameStatus(StrEnum):
    IN_PROGRESS = "in progress"
    CHECK = "check"
    CHECKMATE = "checkmate"
    GAME_OVER = "game over"


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"
