"""Infrastructure layer - implementation of ports.

This layer contains:
- External tool runners (ExifTool)

Allowed imports:
- domain/ modules
- app/ports/ (to implement interfaces)
- Standard library process handling (subprocess, shutil)

Author: Michael Economou
Date: 2026-10-18
"""
