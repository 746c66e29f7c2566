"""External tool runners - ExifTool.

Author: Michael Economou
Date: 2026-10-18
"""

from exifcache.infra.external.exiftool_runner import ExifToolRunner
from exifcache.infra.external.external_tools import is_tool_available, resolve_tool_path

__all__ = [
    "ExifToolRunner",
    "is_tool_available",
    "resolve_tool_path",
]
