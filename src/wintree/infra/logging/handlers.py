from __future__ import annotations

"""
Handler Factories.

Every handler built here is marked so that reconfiguration and shutdown
only ever remove wintree's own handlers from the root logger.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from wintree.infra.logging.config import LoggingConfig

_HANDLER_TAG_ATTR: str = "_wintree_handler"


def is_wintree_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def build_console_handler(cfg: LoggingConfig) -> logging.Handler:
    """Stderr handler using the short console format."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(cfg.console_format))
    return _mark(handler, cfg.level_value)


def build_file_handler(cfg: LoggingConfig) -> Optional[logging.Handler]:
    """
    Rotating file handler for cfg.log_file.

    Returns None (after a warning on stderr) when the file cannot be
    opened, so a bad --log-file never stops the tree from rendering.
    """
    if not cfg.log_file:
        return None

    try:
        os.makedirs(os.path.dirname(os.path.abspath(cfg.log_file)), exist_ok=True)
        handler = RotatingFileHandler(
            cfg.log_file,
            maxBytes=cfg.max_bytes,
            backupCount=cfg.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{cfg.log_file}': {e}\n")
        return None

    handler.setFormatter(logging.Formatter(cfg.file_format, datefmt=cfg.date_format))
    return _mark(handler, cfg.level_value)


def _mark(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler
