"""Logging setup for the CLI and the TUI."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Chatty third-party loggers kept at WARNING unless verbose.
_NOISY_LOGGERS = ("httpx", "httpcore", "asyncio")


def configure_logging(
    log_file: Path | None = None,
    verbose: bool = False,
    interactive: bool = False,
) -> None:
    """Configure root logging once.

    The TUI owns the terminal: when ``interactive`` is set, records go to
    ``log_file`` or nowhere. The non-interactive subcommands log to stderr
    when no file is given.
    """
    level = logging.DEBUG if verbose else logging.INFO
    handler: logging.Handler
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    elif interactive:
        handler = logging.NullHandler()
    else:
        handler = logging.StreamHandler(sys.stderr)
        if not verbose:
            level = logging.WARNING
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)
