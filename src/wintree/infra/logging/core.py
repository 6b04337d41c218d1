from __future__ import annotations

"""
Logging Lifecycle.

Installs wintree's handlers on the root logger. Configuration is
idempotent: a second call is a no-op unless forced, and shutdown_logging
detaches and closes exactly the handlers installed here.
"""

import logging

from wintree.infra.logging.config import LoggingConfig
from wintree.infra.logging.handlers import (
    build_console_handler,
    build_file_handler,
    is_wintree_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_wintree_configured"


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Attach the console and file handlers described by cfg to the root logger.

    Args:
        cfg: Logging settings for this run.
        force: Replace an existing configuration instead of keeping it.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    _detach_handlers(root)
    root.setLevel(cfg.level_value)

    if cfg.console:
        root.addHandler(build_console_handler(cfg))

    file_handler = build_file_handler(cfg)
    if file_handler is not None:
        root.addHandler(file_handler)

    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    return root


def shutdown_logging() -> None:
    """Close wintree's handlers and allow a fresh configure_logging call."""
    root = logging.getLogger()
    _detach_handlers(root)
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _detach_handlers(root: logging.Logger) -> None:
    for handler in list(root.handlers):
        if is_wintree_handler(handler):
            root.removeHandler(handler)
            handler.close()
