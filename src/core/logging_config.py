"""Logging setup for whoever embeds the engine (the engine modules only ever call logging.getLogger)"""

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_LEVEL = "INFO"


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger. Level comes from the argument, then CHECKERS_LOG_LEVEL, then INFO."""
    level_name = (level or os.getenv("CHECKERS_LOG_LEVEL") or DEFAULT_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)
