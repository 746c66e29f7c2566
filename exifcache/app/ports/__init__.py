"""Port interfaces implemented by the infrastructure layer.

Author: Michael Economou
Date: 2026-10-18
"""

from exifcache.app.ports.tool_runner import ToolResult, ToolRunner

__all__ = [
    "ToolResult",
    "ToolRunner",
]
