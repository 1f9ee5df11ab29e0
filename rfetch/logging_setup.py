"""Diagnostic logging for the rfetch logger tree (stderr only)."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


_LOGGER_NAME = "rfetch"


def configure_logging(debug: bool = False) -> logging.Logger:
    """
    Attach one RichHandler on stderr to the `rfetch` logger.

    Level is DEBUG when `debug` is set, WARNING otherwise. Repeated calls
    only adjust the level. Handlers added by others (pytest, a host
    application) are left alone.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    if any(isinstance(h, RichHandler) for h in logger.handlers):
        return logger

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=debug,
        show_path=debug,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
