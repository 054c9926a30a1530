"""Logging setup for the command line entry point."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

# Handlers installed by configure_logging(), replaced on the next call
_installed_handlers: list[logging.Handler] = []


def configure_logging(
    level: str | int = logging.INFO,
    log_file: Path | None = None,
    console: Console | None = None,
) -> None:
    """Send log records to the terminal (via rich) and optionally to a file."""
    root = logging.getLogger()
    for handler in _installed_handlers:
        root.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if isinstance(level, str):
        level = level.strip().upper()
    root.setLevel(level)

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setLevel(level)
    _installed_handlers.append(rich_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s")
        )
        _installed_handlers.append(file_handler)

    for handler in _installed_handlers:
        root.addHandler(handler)
