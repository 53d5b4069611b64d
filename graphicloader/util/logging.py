"""Logging helper for graphicloader.

Configures both console and file logging without relying on environment
variables. The default log file lives under ``logs/graphicloader.log``
relative to the working directory.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logging(
    *,
    log_dir: str | Path = "logs",
    log_name: str = "graphicloader.log",
    level: int = logging.DEBUG,
    console_level: int = logging.INFO,
) -> logging.Logger:
    """Configure package logging for console and file outputs."""
    log_dir_path = Path(log_dir)
    log_dir_path.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("graphicloader")
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s [%(threadName)s:%(thread)d]: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_handler = logging.FileHandler(log_dir_path / log_name, encoding="utf-8")
    file_handler.setFormatter(formatter)
    file_handler.setLevel(level)
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(stream=sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a named logger under the ``graphicloader`` namespace."""
    full_name = "graphicloader" if not name else f"graphicloader.{name}"
    return logging.getLogger(full_name)


__all__ = ["setup_logging", "get_logger"]
