"""Engine configuration. Values are read from environment variables prefixed with CHESS_ (ex. CHESS_LOG_LEVEL=DEBUG)."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class EngineSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CHESS_", extra="ignore")

    log_level: str = "WARNING"
    log_format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    # Draw the board with chess symbols (♔) instead of FEN letters (K)
    unicode_pieces: bool = True
    # Write the rendered board to the debug log after every accepted move
    log_board_after_move: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}. Pick one from {','.join(LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> EngineSettings:
    return EngineSettings()
