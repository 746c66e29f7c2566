"""Metadata tool ports.

Protocol interface for running the external metadata tool, without
infrastructure dependencies.

Implementations:
- ExifToolRunner (infra/external/exiftool_runner.py)
- FakeRunner (tests/mocks.py)

Author: Michael Economou
Date: 2026-10-18
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class ToolResult:
    """Outcome of one blocking tool invocation.

    Attributes:
        args: Full command line, executable first
        stdout: Captured standard output
        stderr: Captured standard error
        returncode: Exit status, None if the process could not be started
                    or was killed on timeout

    """

    args: tuple[str, ...]
    stdout: str = ""
    stderr: str = ""
    returncode: int | None = 0

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """Combined stdout/stderr text, for diagnostics."""
        if self.stdout and self.stderr:
            return f"{self.stdout.rstrip()}\n{self.stderr}"
        return self.stdout or self.stderr


@runtime_checkable
class ToolRunner(Protocol):
    """Protocol for the external metadata tool."""

    def read_json(self, filepath: str) -> ToolResult:
        """Dump all metadata of a file as a JSON array of one record.

        Args:
            filepath: File to read

        Returns:
            ToolResult whose stdout holds the JSON text on success
        """
        ...

    def apply(self, directive: str, filepath: str) -> ToolResult:
        """Apply one write directive (e.g. ``-Keywords+=cat``) to a file.

        Args:
            directive: Field-level directive
            filepath: File to modify

        Returns:
            ToolResult of the write call
        """
        ...
