"""Route loguru output according to the logging configuration."""

from __future__ import annotations

import sys

from loguru import logger

from beacon_mapper.config import LoggingConfig


def configure_logging(config: LoggingConfig) -> int:
    """Replace loguru's sinks with the configured one and return its id."""
    logger.remove()
    output = config.output.lower()
    if output == "stdout":
        return logger.add(sys.stdout, level=config.level)
    if output == "stderr":
        return logger.add(sys.stderr, level=config.level)
    return logger.add(config.output, level=config.level, encoding="utf-8")
