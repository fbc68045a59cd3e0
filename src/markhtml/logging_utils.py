#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markhtml/logging_utils.py
"""Logging setup for the markhtml command-line interface.

Library modules only create module-level loggers; handlers are installed
here, once, by the entry point.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PLAIN_FORMAT = "%(levelname)s: %(message)s"


def resolve_log_level(log_level: int | str) -> int:
    """Turn a level name such as ``"debug"`` into its numeric value.

    Unknown names resolve to ``logging.INFO``.

    """
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install stderr (and optional file) handlers on the root logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "WARNING").
    log_file : str, optional
        Path of a file that receives a copy of every log record.
    trace_mode : bool, default False
        Include timestamps and logger names in every record.

    Returns
    -------
    logging.Logger
        The configured root logger.

    """
    level = resolve_log_level(log_level)
    formatter = (
        logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT) if trace_mode else logging.Formatter(PLAIN_FORMAT)
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if len(handlers) > 1:
        root_logger.info("Logging to file: %s", log_file)
    return root_logger


__all__ = ["configure_logging", "resolve_log_level"]
