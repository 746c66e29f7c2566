"""Domain layer - pure tag value model with no process or filesystem access.

Author: Michael Economou
Date: 2026-10-18
"""
