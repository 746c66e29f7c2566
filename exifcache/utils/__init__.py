"""Utility helpers shared across exifcache layers."""
