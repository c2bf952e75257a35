"""Logging setup shared by everything that embeds the engine (service, scripts, tests)."""

import logging
from typing import Optional

from src.core.config import EngineSettings, get_settings

logger = logging.getLogger(__name__)


def setup_logging(settings: Optional[EngineSettings] = None) -> None:
    """Configure the root logger from the settings. Calling it again replaces the previous configuration."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level, format=settings.log_format, force=True)
    logger.debug("Logging configured at level %s", settings.log_level)
