"""exifcache - in-memory tag cache over ExifTool with write-through mutations.

Author: Michael Economou
Date: 2026-10-18
"""

from exifcache.app.ports.tool_runner import ToolResult, ToolRunner
from exifcache.config import APP_VERSION
from exifcache.core.tag_cache import TagCache
from exifcache.core.tag_mutations import add_tag, add_tag_value, remove_tag, remove_tag_value
from exifcache.domain.tags import (
    AlreadyExistsError,
    DecodeError,
    InvalidArgumentError,
    NotFoundError,
    Scalar,
    TagCacheError,
    TagList,
    TagValue,
    ToolInvocationError,
    TypeMismatchError,
)
from exifcache.infra.external.exiftool_runner import ExifToolRunner

__version__ = APP_VERSION

__all__ = [
    "AlreadyExistsError",
    "DecodeError",
    "ExifToolRunner",
    "InvalidArgumentError",
    "NotFoundError",
    "Scalar",
    "TagCache",
    "TagCacheError",
    "TagList",
    "TagValue",
    "ToolInvocationError",
    "ToolResult",
    "ToolRunner",
    "TypeMismatchError",
    "add_tag",
    "add_tag_value",
    "remove_tag",
    "remove_tag_value",
]
