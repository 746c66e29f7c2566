"""Tag value model and the errors raised by tag reads and mutations.

Author: Michael Economou
Date: 2026-10-18
"""

from exifcache.domain.tags.errors import (
    AlreadyExistsError,
    DecodeError,
    InvalidArgumentError,
    NotFoundError,
    TagCacheError,
    ToolInvocationError,
    TypeMismatchError,
)
from exifcache.domain.tags.tag_value import (
    Scalar,
    TagList,
    TagValue,
    normalize_record,
    normalize_value,
    shape_name,
    stringify,
    widen,
)

__all__ = [
    "AlreadyExistsError",
    "DecodeError",
    "InvalidArgumentError",
    "NotFoundError",
    "Scalar",
    "TagCacheError",
    "TagList",
    "TagValue",
    "ToolInvocationError",
    "TypeMismatchError",
    "normalize_record",
    "normalize_value",
    "shape_name",
    "stringify",
    "widen",
]
