"""Logging configuration for the content studio engine.

Log records go to stderr so that stdout carries only command output
(generated text or the JSON payload).
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: int = logging.INFO,
    module_name: str = "content_studio",
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Return a named logger with a single stderr handler.

    Args:
        level: Logging level (default INFO).
        module_name: Name for the logger instance.
        stream: Output stream; defaults to ``sys.stderr``.

    Returns:
        Configured logger. Calling again with the same name returns it
        unchanged.
    """
    logger = logging.getLogger(module_name)

    if logger.handlers:
        return logger

    logger.setLevel(level)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    return logger
