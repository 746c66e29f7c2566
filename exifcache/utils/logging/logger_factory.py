"""Module: logger_factory.py

Author: Michael Economou
Date: 2026-10-18

Logger factory with caching.
Provides centralized logger management with thread-safe operations.
"""

import inspect
import logging
import threading

from exifcache.utils.logging.logger_helper import get_logger


def _caller_module_name(depth: int) -> str:
    """Module name of the frame `depth` levels above the function calling this helper."""
    frame = inspect.currentframe()
    for _ in range(depth + 1):
        if frame is None:
            return "unknown"
        frame = frame.f_back
    return frame.f_globals.get("__name__", "unknown") if frame is not None else "unknown"


class LoggerFactory:
    """Thread-safe logger factory with caching.

    Maintains a single logger instance per module name.
    """

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()
    _global_level: int | None = None

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """Get or create a cached logger for the given name.

        Args:
            name (str): Logger name, typically __name__ from calling module

        Returns:
            logging.Logger: Cached logger instance

        """
        if name is None:
            name = _caller_module_name(1)

        with cls._lock:
            if name not in cls._loggers:
                logger = get_logger(name)

                if cls._global_level is not None:
                    logger.setLevel(cls._global_level)

                cls._loggers[name] = logger

            return cls._loggers[name]

    @classmethod
    def set_global_level(cls, level: int) -> None:
        """Set logging level for all cached loggers (and loggers created later)."""
        with cls._lock:
            cls._global_level = level
            for logger in cls._loggers.values():
                logger.setLevel(level)

    @classmethod
    def get_logger_count(cls) -> int:
        return len(cls._loggers)

    @classmethod
    def get_cached_names(cls) -> list[str]:
        return list(cls._loggers.keys())

    @classmethod
    def clear_cache(cls) -> None:
        """Clear all cached loggers.

        The underlying logging.Logger objects stay registered with the logging module.
        """
        with cls._lock:
            cls._loggers.clear()
            cls._global_level = None


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """Convenience function for getting cached logger."""
    if name is None:
        name = _caller_module_name(1)
    return LoggerFactory.get_logger(name)
