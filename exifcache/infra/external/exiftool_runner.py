"""Module: exiftool_runner.py

Author: Michael Economou
Date: 2026-10-18

ExifTool runner: one blocking subprocess per call.

Implements the ToolRunner port. Every call returns a ToolResult; a process that
cannot be started or that exceeds its timeout is reported as a failed result
with returncode None rather than raised, so callers decide how to surface it.
Requires: exiftool installed and in PATH (or an explicit command path).
"""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING

from exifcache import config
from exifcache.app.ports.tool_runner import ToolResult
from exifcache.infra.external.external_tools import resolve_tool_path
from exifcache.utils.logging import get_cached_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_cached_logger(__name__)


def _as_text(data: bytes | str | None) -> str:
    # TimeoutExpired carries bytes even in text mode
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data


class ExifToolRunner:
    """Runs ExifTool as a one-shot subprocess for each read or write.

    Attributes:
        command: Executable name or path
        read_timeout: Seconds allowed for a JSON dump, None for no limit
        write_timeout: Seconds allowed for a write, None for no limit
        write_args: Extra arguments inserted before the directive on writes

    """

    def __init__(
        self,
        command: str | None = None,
        *,
        read_timeout: float | None = None,
        write_timeout: float | None = None,
        write_args: Sequence[str] | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            command: Executable name or path. Defaults to config.EXIFTOOL_COMMAND.
            read_timeout: Timeout for read_json in seconds. Defaults to
                          config.EXIFTOOL_TIMEOUT_READ.
            write_timeout: Timeout for apply in seconds. Defaults to
                           config.EXIFTOOL_TIMEOUT_WRITE.
            write_args: Defaults to config.EXIFTOOL_WRITE_ARGS

        """
        self.command = command or config.EXIFTOOL_COMMAND
        self.read_timeout = config.EXIFTOOL_TIMEOUT_READ if read_timeout is None else read_timeout
        self.write_timeout = (
            config.EXIFTOOL_TIMEOUT_WRITE if write_timeout is None else write_timeout
        )
        self.write_args = tuple(config.EXIFTOOL_WRITE_ARGS if write_args is None else write_args)
        self._available: bool | None = None
        self._version: str | None = None

    def __repr__(self) -> str:
        return f"ExifToolRunner(command={self.command!r})"

    def read_json(self, filepath: str) -> ToolResult:
        return self._run(["-j", filepath], self.read_timeout)

    def apply(self, directive: str, filepath: str) -> ToolResult:
        return self._run([*self.write_args, directive, filepath], self.write_timeout)

    def is_available(self) -> bool:
        """Check if ExifTool can be run (result is cached).

        Returns:
            True if ``exiftool -ver`` succeeds

        """
        if self._available is not None:
            return self._available

        if resolve_tool_path(self.command) is None:
            logger.warning("[ExifToolRunner] ExifTool not found: %s", self.command)
            self._available = False
            return False

        result = self._run(["-ver"], config.EXIFTOOL_TIMEOUT_VERSION)
        self._available = result.ok
        if result.ok:
            self._version = result.stdout.strip()
            logger.debug("[ExifToolRunner] ExifTool version: %s", self._version)
        else:
            logger.warning(
                "[ExifToolRunner] ExifTool not available (returncode=%s)", result.returncode
            )
        return self._available

    def version(self) -> str | None:
        """Version string reported by ``exiftool -ver``, or None if unavailable."""
        if not self.is_available():
            return None
        return self._version

    def _run(self, args: list[str], timeout: float | None) -> ToolResult:
        cmd = (self.command, *args)
        logger.debug("[ExifToolRunner] Running: %s", " ".join(cmd), extra={"dev_only": True})

        try:
            completed = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            logger.error("[ExifToolRunner] Timeout after %ss: %s", timeout, " ".join(cmd))
            stderr = _as_text(e.stderr) or f"timed out after {timeout}s"
            return ToolResult(cmd, _as_text(e.stdout), stderr, None)
        except OSError as e:
            logger.error("[ExifToolRunner] Could not start %s: %s", self.command, e)
            return ToolResult(cmd, "", str(e), None)

        if completed.returncode != 0:
            logger.warning(
                "[ExifToolRunner] ExifTool returned error code %d for %s",
                completed.returncode,
                args[-1],
            )
            if completed.stderr:
                logger.warning("[ExifToolRunner] ExifTool stderr: %s", completed.stderr.strip())

        return ToolResult(cmd, completed.stdout or "", completed.stderr or "", completed.returncode)
