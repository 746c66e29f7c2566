"""Module: tag_mutations.py

Author: Michael Economou
Date: 2026-10-18

Tag mutation operations.

Each operation validates its arguments, checks the current shape of the tag,
runs exactly one ExifTool write and only then updates the cache. Any failure,
including a failed ExifTool call, raises before the cache is touched.

ExifTool directives used:
    -NAME=VALUE     set a single value
    -NAME=          delete the tag
    -NAME+=VALUE    add a value to a list tag
    -NAME-=VALUE    remove a value from a list tag
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from exifcache.app.ports.tool_runner import ToolResult
from exifcache.domain.tags.errors import (
    AlreadyExistsError,
    InvalidArgumentError,
    NotFoundError,
    ToolInvocationError,
)
from exifcache.domain.tags.tag_value import Scalar, TagList, widen
from exifcache.utils.logging import get_cached_logger

if TYPE_CHECKING:
    from exifcache.core.tag_cache import TagCache

logger = get_cached_logger(__name__)


def set_directive(name: str, value: str) -> str:
    return f"-{name}={value}"


def clear_directive(name: str) -> str:
    return f"-{name}="


def append_directive(name: str, value: str) -> str:
    return f"-{name}+={value}"


def remove_value_directive(name: str, value: str) -> str:
    return f"-{name}-={value}"


def _require(parameter: str, value: str) -> None:
    if not value:
        raise InvalidArgumentError(parameter)


def _apply(cache: TagCache, directive: str) -> ToolResult:
    """Run one write directive against the cache's file; raise if it failed."""
    result = cache.runner.apply(directive, cache.filepath)
    if not result.ok:
        logger.warning(
            "[TagMutations] %s failed on %s: %s", directive, cache.filepath, result.output.strip()
        )
        raise ToolInvocationError.from_result(result)
    logger.debug(
        "[TagMutations] Applied %s to %s", directive, cache.filepath, extra={"dev_only": True}
    )
    return result


def add_tag(cache: TagCache, name: str, value: str) -> None:
    """Create a new single-valued tag.

    Raises:
        InvalidArgumentError: name or value is empty
        AlreadyExistsError: the tag is already present
        ToolInvocationError: ExifTool failed

    """
    _require("name", name)
    _require("value", value)

    tags = cache.tags()
    if name in tags:
        raise AlreadyExistsError(name)

    _apply(cache, set_directive(name, value))
    tags[name] = Scalar(value)


def remove_tag(cache: TagCache, name: str) -> None:
    """Delete a tag from the file and drop it from the cache.

    Raises:
        InvalidArgumentError: name is empty
        NotFoundError: the tag is not present
        ToolInvocationError: ExifTool failed

    """
    _require("name", name)

    tags = cache.tags()
    if name not in tags:
        raise NotFoundError(name)

    _apply(cache, clear_directive(name))
    del tags[name]


def add_tag_value(cache: TagCache, name: str, value: str) -> None:
    """Append a value to a tag, creating it if absent.

    A scalar tag becomes a list holding its old value followed by ``value``,
    the same promotion ExifTool applies to the field on disk.

    Raises:
        InvalidArgumentError: name or value is empty
        TypeMismatchError: the tag holds an unrecognized shape
        ToolInvocationError: ExifTool failed

    """
    _require("name", name)
    _require("value", value)

    tags = cache.tags()
    values = widen(name, tags[name]) if name in tags else []

    _apply(cache, append_directive(name, value))
    values.append(value)
    tags[name] = TagList(tuple(values))


def remove_tag_value(cache: TagCache, name: str, value: str) -> None:
    """Remove the first occurrence of ``value`` from a tag.

    The tag is stored as a list afterwards, even when one or no values remain.

    Raises:
        InvalidArgumentError: name or value is empty
        NotFoundError: the tag is not present
        TypeMismatchError: the tag holds an unrecognized shape
        ToolInvocationError: ExifTool failed

    """
    _require("name", name)
    _require("value", value)

    tags = cache.tags()
    if name not in tags:
        raise NotFoundError(name)
    values = widen(name, tags[name])

    _apply(cache, remove_value_directive(name, value))
    if value in values:
        values.remove(value)
    tags[name] = TagList(tuple(values))
