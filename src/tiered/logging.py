"""Logging setup for the tiered library.

All library output goes through the ``tiered`` logger. ``configure_logger``
installs a single root handler: a ``rich`` console handler that renders
back-ticked names (as written by ``instrument``) in bold, or a plain stdout
stream handler for non-interactive use.
"""

from __future__ import annotations

import logging
import sys

from rich.highlighter import RegexHighlighter
from rich.logging import RichHandler


class BackTickHighlighter(RegexHighlighter):
    """Bold any `name` wrapped in back-ticks."""

    highlights = [r"`(?P<bold>[^`]*)`"]


def logger() -> logging.Logger:
    return logging.getLogger("tiered")


def configure_logger(debug: bool, rich: bool = True, level: str = "INFO") -> None:
    """Replace the root handlers with a tiered console handler.

    Args:
        debug: Force DEBUG level and show source paths in rich output
        rich: Use ``RichHandler``, else a plain stdout ``StreamHandler``
        level: Root level name when ``debug`` is off
    """
    root_level = logging.DEBUG if debug else logging.getLevelName(level.upper())

    handler: logging.Handler
    if rich:
        handler = RichHandler(show_path=debug, highlighter=BackTickHighlighter())
        logging.basicConfig(
            level=root_level,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[handler],
            force=True,
        )
    else:
        handler = logging.StreamHandler(sys.stdout)
        logging.basicConfig(level=root_level, handlers=[handler], force=True)
