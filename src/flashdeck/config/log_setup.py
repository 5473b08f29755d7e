"""Logging configuration."""

from __future__ import annotations

import logging
import sys

from textual.logging import TextualHandler

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING", tui: bool = False) -> None:
    """Route log records to Textual's devtools while the TUI owns the terminal,
    otherwise to stderr."""
    handler: logging.Handler
    if tui:
        handler = TextualHandler()
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)
