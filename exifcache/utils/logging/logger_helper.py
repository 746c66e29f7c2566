"""Module: logger_helper.py

Author: Michael Economou
Date: 2026-10-18

Provides utility functions for working with loggers in a safe and consistent way.
ExifTool output routinely carries tag values in arbitrary scripts, so logging
methods are patched to fall back to ASCII-safe text on UnicodeEncodeError.

Functions:
get_logger(name): Returns a patched logger that propagates to the root logger.
safe_text(text): Replaces problematic Unicode characters with ASCII equivalents.
safe_log(logger_func, message): Logs a message safely, falling back to ASCII if needed.
DevOnlyFilter:
A logging filter that hides dev-only debug messages from the console,
while still allowing them to be stored in file logs.
"""

import logging
import re
from functools import partial

from exifcache import config

_REPLACEMENTS = {
    "\u2192": "->",
    "\u2014": "--",
    "\u2013": "-",
    "\u2026": "...",
}
_REPLACEMENT_PATTERN = re.compile("|".join(map(re.escape, _REPLACEMENTS.keys())))


def safe_text(text: str) -> str:
    """Replaces unsupported Unicode characters with ASCII-safe alternatives.

    Characters without a known replacement are escaped with backslash notation.

    Args:
        text (str): The original text.

    Returns:
        str: ASCII-only text.

    """
    replaced = _REPLACEMENT_PATTERN.sub(lambda m: _REPLACEMENTS[m.group(0)], text)
    return replaced.encode("ascii", errors="backslashreplace").decode("ascii")


def safe_log(logger_func, message, *args, **kwargs):
    """Logs a message using the given logger function (e.g. logger.info),
    falling back to ASCII-safe output if UnicodeEncodeError occurs.
    """
    if not isinstance(message, str):
        message = repr(message)
    try:
        logger_func(message, *args, **kwargs)
    except UnicodeEncodeError:
        safe_args = tuple(safe_text(str(arg)) for arg in args)
        logger_func(safe_text(message), *safe_args, **kwargs)


def patch_logger_safe_methods(logger: logging.Logger) -> None:
    """Replaces logger's logging methods with safe_log-wrapped versions."""
    for method_name in ["debug", "info", "warning", "error", "critical", "exception"]:
        orig_func = getattr(logger, method_name)
        setattr(logger, method_name, partial(safe_log, orig_func))


def get_logger(name: str | None = None) -> logging.Logger:
    """Returns a logger with the given name, delegating to the root logger for output.

    Args:
        name (str): Optional name for the logger (defaults to this module's name)

    Returns:
        logging.Logger: Patched logger instance

    """
    logger = logging.getLogger(name or __name__)

    # Root logger handles all output (console + files)
    logger.propagate = True

    if not getattr(logger, "_patched_for_safe_log", False):
        patch_logger_safe_methods(logger)
        logger._patched_for_safe_log = True  # type: ignore[attr-defined]

    return logger


class DevOnlyFilter(logging.Filter):
    """Drops records marked with ``extra={"dev_only": True}``."""

    def __init__(self, show_dev_only: bool | None = None) -> None:
        super().__init__()
        self._show_dev_only = show_dev_only

    def filter(self, record: logging.LogRecord) -> bool:
        show = self._show_dev_only
        if show is None:
            show = config.SHOW_DEV_ONLY_IN_CONSOLE
        if show:
            return True
        return not getattr(record, "dev_only", False)
