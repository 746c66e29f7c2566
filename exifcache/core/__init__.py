"""Module: __init__.py

Author: Michael Economou
Date: 2026-10-18

Core package: the tag cache and the mutation operations that keep it in step
with ExifTool's writes.
"""

from exifcache.core.tag_cache import TagCache
from exifcache.core.tag_mutations import (
    add_tag,
    add_tag_value,
    append_directive,
    clear_directive,
    remove_tag,
    remove_tag_value,
    remove_value_directive,
    set_directive,
)

__all__ = [
    "TagCache",
    "add_tag",
    "add_tag_value",
    "append_directive",
    "clear_directive",
    "remove_tag",
    "remove_tag_value",
    "remove_value_directive",
    "set_directive",
]
