"""
Logging setup for applications embedding the ToMusic client.

Library modules only ever call ``logging.getLogger(__name__)``; installing
handlers is the application's decision, made once via ``configure_logging``.

Output goes to stderr so a CLI that pipes JSON results on stdout stays
parseable.
"""

from __future__ import annotations

import logging
import sys

_LOG_FORMAT = "%(asctime)s.%(msecs)03d " "[%(name)s] %(levelname)s " "%(message)s"
_LOG_DATE_FORMAT = "%H:%M:%S"

# httpx logs every request line at INFO, including the full URL
_NOISY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore")


def configure_logging(level: int = logging.INFO) -> None:
    """
    Configure the root logger to write structured output to stderr.

    Replaces any handlers already installed on the root logger, so calling
    it twice does not duplicate output.

    Args:
        level: Python logging level (default: INFO)
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
