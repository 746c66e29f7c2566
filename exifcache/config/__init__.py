"""Module: exifcache.config

Author: Michael Economou
Date: 2026-10-18

Configuration package for exifcache.

This package organizes configuration into logical modules:
- app: Package info, logging settings
- features: External tool settings (ExifTool command, timeouts, write arguments)

All settings are re-exported from this module:
    from exifcache.config import EXIFTOOL_COMMAND, LOG_FORMAT
"""

from exifcache.config.app import *  # noqa: F401, F403
from exifcache.config.features import *  # noqa: F401, F403
