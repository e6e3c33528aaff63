from __future__ import annotations

"""
Logging Settings.

dirkit logs traversal detail at DEBUG and finished operations at INFO.
LoggingConfig carries what the CLI decided about where those records go:
stderr, a rotating file under the user data directory, or both.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Level names accepted in config.json and by LoggingConfig.level
LEVEL_NAMES: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Where dirkit sends log records and how they look.

    Attributes:
        level: Level name from LEVEL_NAMES. Unknown names fall back to INFO.
        console: Write records to stderr, keeping stdout for command output.
        log_file: Rotating log file, e.g. ~/.dirkit/logs/dirkit.log. None disables it.
        max_bytes: Size at which the log file is rotated.
        backup_count: Rotated files kept next to the active one.
        console_fmt: Record layout on stderr.
        file_fmt: Record layout in the log file.
        datefmt: Timestamp layout in the log file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @property
    def level_number(self) -> int:
        """Numeric logging level for `level`."""
        if not self.level:
            return logging.INFO
        return LEVEL_NAMES.get(str(self.level).strip().upper(), logging.INFO)
