"""Module: exifcache.config.features

Author: Michael Economou
Date: 2026-10-18

External tool configuration.

Timeouts are in seconds. None means the call blocks until ExifTool exits.
"""

# =====================================
# EXTERNAL TOOLS CONFIGURATION
# =====================================

# Executable name (looked up on PATH) or absolute path
EXIFTOOL_COMMAND = "exiftool"

# Extra arguments placed before the directive on write calls,
# e.g. ("-overwrite_original",) to skip the *_original backup copy
EXIFTOOL_WRITE_ARGS: tuple[str, ...] = ()

# =====================================
# EXIFTOOL TIMEOUT SETTINGS
# =====================================

EXIFTOOL_TIMEOUT_READ: float | None = None
EXIFTOOL_TIMEOUT_WRITE: float | None = None
EXIFTOOL_TIMEOUT_VERSION = 5
