"""Module: tag_cache.py

Author: Michael Economou
Date: 2026-10-18

In-memory tag cache for a single media file.

The cache is filled by one ``exiftool -j`` call at construction and is the
authority for every read afterwards. Writes go through the operations in
exifcache.core.tag_mutations, which update the cache only after ExifTool
reports success.

Usage:
    from exifcache.core.tag_cache import TagCache

    cache = TagCache.load("/photos/cat.jpg")
    cache.add_tag_value("Keywords", "cat")
    cache.string_list("Keywords")
"""

from __future__ import annotations

import json
from os import PathLike, fspath
from typing import Any

from exifcache.app.ports.tool_runner import ToolRunner
from exifcache.core.tag_mutations import add_tag, add_tag_value, remove_tag, remove_tag_value
from exifcache.domain.tags.errors import DecodeError, ToolInvocationError, TypeMismatchError
from exifcache.domain.tags.tag_value import Scalar, normalize_record, shape_name, widen
from exifcache.infra.external.exiftool_runner import ExifToolRunner
from exifcache.utils.logging import get_cached_logger

logger = get_cached_logger(__name__)


def _decode_first_record(output: str) -> dict[str, Any]:
    """Parse ExifTool JSON output and return the first record."""
    if not output.strip():
        raise DecodeError("empty output", output)

    try:
        # Numbers keep their exact text: 1.50 must not read back as 1.5
        data = json.loads(output, parse_int=str, parse_float=str)
    except json.JSONDecodeError as e:
        logger.debug("[TagCache] Raw output was: %r", output, extra={"dev_only": True})
        raise DecodeError(str(e), output) from e

    if not isinstance(data, list):
        raise DecodeError(f"expected a JSON array, got {type(data).__name__}", output)
    if not data:
        raise DecodeError("no records returned", output)

    record = data[0]
    if not isinstance(record, dict):
        raise DecodeError(f"expected a JSON object record, got {type(record).__name__}", output)
    return record


class TagCache:
    """Tag name to TagValue mapping for one file.

    Single owner, single thread: there is no internal locking.

    Attributes:
        filepath: Target file, fixed for the cache's lifetime
        runner: ToolRunner used for the load and for every mutation

    """

    def __init__(self, filepath: str | PathLike[str], runner: ToolRunner | None = None) -> None:
        """Load all tags of ``filepath``.

        Args:
            filepath: Media file to read
            runner: Tool runner; a default ExifToolRunner when None

        Raises:
            ToolInvocationError: ExifTool could not be run or failed
            DecodeError: The JSON output held no usable record

        """
        if runner is None:
            runner = ExifToolRunner()

        self._filepath = fspath(filepath)
        self._runner = runner
        self._tags: dict[str, Any] = self._load()

    @classmethod
    def load(cls, filepath: str | PathLike[str], runner: ToolRunner | None = None) -> TagCache:
        return cls(filepath, runner)

    @property
    def filepath(self) -> str:
        return self._filepath

    @property
    def runner(self) -> ToolRunner:
        return self._runner

    def __repr__(self) -> str:
        return f"TagCache({self._filepath!r}, {len(self._tags)} tags)"

    def _load(self) -> dict[str, Any]:
        result = self._runner.read_json(self._filepath)
        if not result.ok:
            logger.warning("[TagCache] Failed to read metadata for %s", self._filepath)
            raise ToolInvocationError.from_result(result)

        tags = normalize_record(_decode_first_record(result.stdout))
        logger.debug(
            "[TagCache] Loaded %d tags for %s", len(tags), self._filepath, extra={"dev_only": True}
        )
        return tags

    def tags(self) -> dict[str, Any]:
        """The live backing mapping.

        Treat it as read-only: only the mutation operations also write the
        change to the file.
        """
        return self._tags

    def string(self, name: str) -> str:
        """Read a single-valued tag.

        Returns:
            The value, or "" when the tag is absent

        Raises:
            TypeMismatchError: The tag holds a list (or an unrecognized shape)

        """
        if name not in self._tags:
            return ""
        current = self._tags[name]
        if isinstance(current, Scalar):
            return current.value
        raise TypeMismatchError(name, shape_name(current))

    def string_list(self, name: str) -> list[str]:
        """Read a tag as a list; a scalar reads as a one-element list.

        Returns:
            A new list, empty when the tag is absent

        Raises:
            TypeMismatchError: The tag holds an unrecognized shape

        """
        if name not in self._tags:
            return []
        return widen(name, self._tags[name])

    # Mutations (see exifcache.core.tag_mutations)

    def add_tag(self, name: str, value: str) -> None:
        add_tag(self, name, value)

    def remove_tag(self, name: str) -> None:
        remove_tag(self, name)

    def add_tag_value(self, name: str, value: str) -> None:
        add_tag_value(self, name, value)

    def remove_tag_value(self, name: str, value: str) -> None:
        remove_tag_value(self, name, value)

