# charngram/pipeline/logger.py
"""Logging configuration for n-gram counting runs."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

__all__ = ["setup_logger", "LOG_FORMAT"]

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
        *,
        level: int = logging.WARNING,
        log_file: Optional[Union[str, Path]] = None,
        console: bool = True,
        stream: Optional[TextIO] = None,
        force: bool = False,
) -> Optional[Path]:
    """
    Configure root logging for a run.

    Console output goes to stderr, never stdout, since stdout carries the
    report. A log file, when requested, is opened in write mode.

    Args:
        level: Logging level for the root logger and all handlers
        log_file: Optional path of a log file (parent directories are created)
        console: If True, add a stderr handler
        stream: Console stream override (default: sys.stderr)
        force: If True, remove existing handlers before adding new ones

    Raises:
        OSError: the log file or its directory cannot be created

    Returns:
        Resolved path of the log file, or None when only console logging is set up
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    # Open the log file first so a bad path leaves existing handlers intact
    log_path: Optional[Path] = None
    file_handler: Optional[logging.Handler] = None
    if log_file is not None:
        log_path = Path(log_file).expanduser().resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)

    root = logging.getLogger()

    if force:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()

    root.setLevel(level)

    if console:
        console_handler = logging.StreamHandler(stream or sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if file_handler is not None:
        root.addHandler(file_handler)
        root.info("Logging initialized: %s", log_path)

    return log_path
