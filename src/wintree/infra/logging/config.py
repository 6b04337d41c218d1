from __future__ import annotations

"""
Logging Settings.

The CLI builds one LoggingConfig per run from the effective configuration
and the --debug / --log-file flags.
"""

import logging
from dataclasses import dataclass
from typing import Optional

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for the diagnostic log output.

    Attributes:
        level: Level name; unknown names mean WARNING.
        console: Emit records on stderr.
        log_file: Optional rotating log file.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files to keep.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_format: str = "%(levelname)s | %(message)s"
    file_format: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def level_value(self) -> int:
        return _LEVELS.get(str(self.level or "").strip().upper(), logging.WARNING)
