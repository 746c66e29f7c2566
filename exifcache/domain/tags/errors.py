"""Module: errors.py

Author: Michael Economou
Date: 2026-10-18

Exceptions raised by TagCache reads and by the tag mutation operations.

Every failure leaves the cache exactly as it was before the call.
"""

from __future__ import annotations

import shlex
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from exifcache.app.ports.tool_runner import ToolResult


class TagCacheError(Exception):
    """Base class for all exifcache failures."""


class InvalidArgumentError(TagCacheError):
    """Raised when a required string argument is empty."""

    def __init__(self, parameter: str) -> None:
        self.parameter = parameter
        super().__init__(f"{parameter} required")


class AlreadyExistsError(TagCacheError):
    """Raised by add_tag when the tag is already present."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tag {name} already exists")


class NotFoundError(TagCacheError):
    """Raised when removing from a tag that is not present."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tag {name} does not exist")


class TypeMismatchError(TagCacheError):
    """Raised when a stored value's shape does not fit the requested read or mutation."""

    def __init__(self, name: str, actual: str) -> None:
        self.name = name
        self.actual = actual
        super().__init__(f"unexpected tag type {actual} for tag {name}")


class ToolInvocationError(TagCacheError):
    """Raised when ExifTool could not be run or exited with a failure.

    Attributes:
        args_used: Full command line that was attempted
        output: Combined stdout/stderr text (or the OS error text if it never ran)
        returncode: Exit status, None when the process did not run to completion

    """

    def __init__(self, args_used: Sequence[str], output: str, returncode: int | None) -> None:
        self.args_used = tuple(args_used)
        self.output = output
        self.returncode = returncode
        status = "not run" if returncode is None else f"exit status {returncode}"
        super().__init__(f"{shlex.join(self.args_used)} ({status}): {output.strip()}")

    @classmethod
    def from_result(cls, result: ToolResult) -> ToolInvocationError:
        return cls(result.args, result.output, result.returncode)


class DecodeError(TagCacheError):
    """Raised when ExifTool's JSON output cannot be turned into a tag record."""

    def __init__(self, reason: str, output: str = "") -> None:
        self.reason = reason
        self.output = output
        super().__init__(f"cannot decode exiftool output: {reason}")
