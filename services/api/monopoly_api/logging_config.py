"""Logging setup shared by the service and the direct query tool.

Both entrypoints call `configure_logging` once so every module logging through
`logging.getLogger(__name__)` emits the same format.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger with a single stream handler.

    Does nothing if the root logger already has handlers (e.g. under uvicorn
    or pytest).

    Args:
        level: Level name such as "INFO" or "DEBUG" (case-insensitive).
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
