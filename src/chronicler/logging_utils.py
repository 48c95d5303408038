from __future__ import annotations

import logging

from rich.logging import RichHandler

_LOG_FORMAT = "%(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Route the root logger through rich. Safe to call more than once."""
    root = logging.getLogger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    root.setLevel(level)
    if any(isinstance(handler, RichHandler) for handler in root.handlers):
        return
    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root.addHandler(handler)
