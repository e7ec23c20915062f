# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Console logging for applications and scripts using monet.

The library itself only creates module loggers under ``monet``; nothing
is printed until a handler is installed, e.g. with ``setup_logging``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

import colorlog


DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}


def setup_logging(
    level: Union[int, str] = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    enable_colors: bool = True,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the ``monet`` logger with a console handler.

    Console output is colored with colorlog when stderr is a terminal.
    Calling this again replaces the handlers installed before.

    Args:
        level: Logging level name or number
        log_file: Optional file that also receives every record
        enable_colors: Color console output when stderr is a terminal
        format_string: Record format; ``DEFAULT_FORMAT`` when omitted

    Returns:
        The configured ``monet`` logger
    """
    if isinstance(level, str):
        level = level.upper()
    fmt = format_string or DEFAULT_FORMAT

    logger = logging.getLogger("monet")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    if enable_colors and sys.stderr.isatty():
        console.setFormatter(colorlog.ColoredFormatter("%(log_color)s" + fmt, log_colors=LOG_COLORS))
    else:
        console.setFormatter(logging.Formatter(fmt))
    logger.addHandler(console)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(file_handler)

    return logger

