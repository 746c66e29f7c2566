"""Module: external_tools.py

Author: Michael Economou
Date: 2026-10-18

External tool detection and path resolution.

Usage:
    from exifcache.infra.external.external_tools import resolve_tool_path

    exiftool = resolve_tool_path("exiftool")  # None when not installed
"""

import shutil
from pathlib import Path

from exifcache.utils.logging import get_cached_logger

logger = get_cached_logger(__name__)


def resolve_tool_path(command: str) -> str | None:
    """Find an executable by name on PATH, or accept an explicit file path.

    Args:
        command: Executable name (``exiftool``) or a path to it

    Returns:
        Absolute path string to the tool, or None if not found

    """
    if not command:
        return None

    system_path = shutil.which(command)
    if system_path:
        logger.debug(
            "[ExternalTools] Found %s at: %s", command, system_path, extra={"dev_only": True}
        )
        return system_path

    candidate = Path(command).expanduser()
    if candidate.is_file():
        return str(candidate.resolve())

    logger.debug("[ExternalTools] %s not found", command, extra={"dev_only": True})
    return None


def is_tool_available(command: str) -> bool:
    return resolve_tool_path(command) is not None
