"""Module: logger_setup.py

Author: Michael Economou
Date: 2026-10-18

This module provides the ConfigureLogger class for setting up logging in an
application that embeds exifcache. Logs INFO and higher to the console and
ERROR and higher to a rotating file, using the levels in exifcache.config.

Classes:
    ConfigureLogger: Configures application-wide logging with console and file handlers.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from exifcache import config
from exifcache.utils.logging.logger_helper import DevOnlyFilter


class ConfigureLogger:
    """Configures application-wide logging on the root logger.

    Attributes:
        logger: The root logger
        console_handler: Stream handler with dev-only records filtered out
        file_handler: Rotating file handler (None when log_dir is None)

    """

    def __init__(
        self,
        log_name: str = config.APP_NAME,
        log_dir: str | None = config.LOG_DIR,
        console_level: int | str = config.LOG_CONSOLE_LEVEL,
        file_level: int | str = config.LOG_FILE_LEVEL,
        max_bytes: int = config.LOG_FILE_MAX_BYTES,
        backup_count: int = config.LOG_FILE_BACKUP_COUNT,
    ) -> None:
        """Initializes and configures the root logger.

        Args:
            log_name (str): Base name for the log file.
            log_dir (str | None): Directory to store log files. None disables file output.
            console_level (int | str): Logging level for the console.
            file_level (int | str): Logging level for the log file.
            max_bytes (int): Max size in bytes for rotating file.
            backup_count (int): Number of backup log files to keep.

        """
        self.logger = logging.getLogger()
        self._previous_level = self.logger.level
        self.logger.setLevel(logging.DEBUG)  # Accept all logs; handlers will filter

        self.console_handler = self._setup_console_handler(console_level)
        self.file_handler: RotatingFileHandler | None = None

        if log_dir is not None:
            os.makedirs(log_dir, exist_ok=True)
            log_file_path = os.path.join(log_dir, f"{log_name}.log")
            self.file_handler = self._setup_file_handler(
                log_file_path, file_level, max_bytes, backup_count
            )

    def _setup_console_handler(self, level: int | str) -> logging.Handler:
        """Sets up console handler with simple formatting."""
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(config.LOG_CONSOLE_FORMAT))
        console_handler.addFilter(DevOnlyFilter())
        self.logger.addHandler(console_handler)
        return console_handler

    def _setup_file_handler(
        self, path: str, level: int | str, max_bytes: int, backup_count: int
    ) -> RotatingFileHandler:
        """Sets up file handler with rotating file output."""
        file_handler = RotatingFileHandler(
            path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)
        )
        self.logger.addHandler(file_handler)
        return file_handler

    def close(self) -> None:
        """Detach and close the handlers added by this instance and restore the root level."""
        for handler in (self.console_handler, self.file_handler):
            if handler is None:
                continue
            self.logger.removeHandler(handler)
            handler.close()
        self.file_handler = None
        self.logger.setLevel(self._previous_level)
