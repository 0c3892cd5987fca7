"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(
    level: int = logging.INFO, *, console: Console | None = None
) -> None:
    """Attach a Rich handler to the root logger unless one is already set."""
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(level)
