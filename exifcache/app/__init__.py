"""Application layer - ports that the core depends on.

Author: Michael Economou
Date: 2026-10-18
"""
