"""Module: tag_value.py

Author: Michael Economou
Date: 2026-10-18

Tag value model.

A tag holds either a single string (Scalar) or an ordered sequence of strings
(TagList). ExifTool's JSON output is untyped, so each decoded field is resolved
into one of the two shapes once, at load time. Fields of any other shape
(JSON objects produced by structured tags) are kept as decoded and every
consumer reports them as a type mismatch.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from exifcache.domain.tags.errors import TypeMismatchError


@dataclass(frozen=True, slots=True)
class Scalar:
    """A tag holding exactly one string value."""

    value: str


@dataclass(frozen=True, slots=True)
class TagList:
    """A multi-valued tag. Order is significant, duplicates are allowed."""

    values: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.values)

    def as_list(self) -> list[str]:
        return list(self.values)


TagValue = Scalar | TagList

_PRIMITIVES = (str, bool, int, float)


def stringify(raw: Any) -> str:
    """Render a decoded JSON value as text.

    Numbers arrive as their original JSON text (see the tag cache decoder), so only
    booleans need rendering, as ``true``/``false``. Nested containers are re-encoded
    as JSON.
    """
    if isinstance(raw, str):
        return raw
    if isinstance(raw, bool):
        return "true" if raw else "false"
    return json.dumps(raw, ensure_ascii=False)


def normalize_value(raw: Any) -> Any:
    """Resolve one decoded field into its TagValue shape.

    Returns:
        Scalar for a primitive, TagList for a JSON array, or the raw value
        unchanged for anything else

    """
    if isinstance(raw, _PRIMITIVES):
        return Scalar(stringify(raw))
    if isinstance(raw, list):
        return TagList(tuple(stringify(item) for item in raw))
    return raw


def normalize_record(record: dict[str, Any]) -> dict[str, Any]:
    """Normalize every top-level field of one ExifTool record.

    Null fields are dropped: a tag without a value is a tag that is not present.
    """
    return {name: normalize_value(raw) for name, raw in record.items() if raw is not None}


def shape_name(value: Any) -> str:
    """Human readable name of a stored value's shape, used in error messages."""
    if isinstance(value, Scalar):
        return "scalar"
    if isinstance(value, TagList):
        return "list"
    return type(value).__name__


def widen(name: str, value: Any) -> list[str]:
    """Return the stored value as a fresh list of strings.

    A Scalar widens to a one-element list. Any shape other than Scalar
    or TagList raises TypeMismatchError.
    """
    if isinstance(value, Scalar):
        return [value.value]
    if isinstance(value, TagList):
        return list(value.values)
    raise TypeMismatchError(name, shape_name(value))
