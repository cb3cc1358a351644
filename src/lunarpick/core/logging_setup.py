"""Root logging configuration for entry points.

Library modules only call ``logging.getLogger(__name__)``; the CLI calls
``setup_logging`` once at startup.
"""

from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s: %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"

_configured = False


def setup_logging(level: int | str = logging.WARNING, fmt: str = DEFAULT_FORMAT) -> None:
    """Configure the root logger once; later calls only adjust the level."""
    global _configured

    root = logging.getLogger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    root.setLevel(level)

    if _configured:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt, DEFAULT_DATEFMT))
    root.addHandler(handler)
    _configured = True
