from __future__ import annotations

import sys

from loguru import logger


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def log_fetch_error(context: str, exc: Exception) -> None:
    logger.error("Error fetching donors in {}: {}", context, exc)
