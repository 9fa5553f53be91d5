"""Logging setup for the command-line entry point.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached here, once, by whoever owns the process.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level_name: str = "WARNING") -> None:
    root = logging.getLogger()

    # Only configure if no handlers exist
    if root.handlers:
        return

    level = getattr(logging, level_name.upper(), logging.WARNING)
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # Request lines from httpx are noise at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
