"""Module: exifcache.config.app

Author: Michael Economou
Date: 2026-10-18

Package-level configuration: package info and logging settings.
"""

# =====================================
# PACKAGE INFORMATION
# =====================================

APP_NAME = "exifcache"
APP_VERSION = "0.1.0"

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_CONSOLE_FORMAT = "[%(levelname)s] %(message)s"

# Console logging
LOG_CONSOLE_LEVEL = "INFO"

# File logging
LOG_DIR = "logs"
LOG_FILE_LEVEL = "ERROR"
LOG_FILE_MAX_BYTES = 1_000_000
LOG_FILE_BACKUP_COUNT = 3

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False
