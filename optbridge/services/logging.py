"""
Diagnostic logger for optbridge.

Warnings go to stderr unless the ``[logging]`` section turns the console
off, so a rejected option name is reported even when nothing has been
bootstrapped. A rotating log file can be enabled on top.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from ..core.interfaces.logger import ILogger
from ..core.models.config import LoggingConfig


class OptBridgeLogger(ILogger):
    """
    ILogger backed by the stdlib ``optbridge`` logger.

    Building an instance replaces the handlers of the named logger, so the
    most recently built configuration is the one in effect.
    """

    LOG_FILE_PATH = Path.home() / ".optbridge" / "optbridge.log"
    MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT = 3

    def __init__(
        self,
        config: LoggingConfig | None = None,
        *,
        name: str = "optbridge",
        log_file: Path | None = None,
    ) -> None:
        """
        Args:
            config: Logging section of the settings (defaults when omitted:
                warnings and above on stderr, no file)
            name: Name of the stdlib logger to configure
            log_file: Override for the log file location
        """
        if config is None:
            config = LoggingConfig()
        level = logging.getLevelName(config.level.upper())

        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)
        self._logger.handlers.clear()
        self._logger.propagate = False

        if config.console:
            console = logging.StreamHandler(sys.stderr)
            console.setFormatter(logging.Formatter("%(name)s [%(levelname)s] %(message)s"))
            self._logger.addHandler(console)

        if config.file:
            path = log_file or self.LOG_FILE_PATH
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                path,
                maxBytes=self.MAX_FILE_SIZE,
                backupCount=self.BACKUP_COUNT,
            )
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            self._logger.addHandler(file_handler)

        # Without any handler stdlib logging falls back to its stderr lastResort
        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

    @property
    def level(self) -> int:
        return self._logger.level

    def debug(self, message: str, *args: Any) -> None:
        self._logger.debug(message, *args)

    def warning(self, message: str, *args: Any) -> None:
        self._logger.warning(message, *args)
