"""Logging utilities package.

Logging setup, factory, and helper functions.
"""

from exifcache.utils.logging.logger_factory import LoggerFactory, get_cached_logger
from exifcache.utils.logging.logger_helper import DevOnlyFilter, get_logger, safe_text
from exifcache.utils.logging.logger_setup import ConfigureLogger

__all__ = [
    "ConfigureLogger",
    "DevOnlyFilter",
    "LoggerFactory",
    "get_cached_logger",
    "get_logger",
    "safe_text",
]
