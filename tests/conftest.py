"""
Module: conftest.py

Author: Michael Economou
Date: 2026-10-18

Global pytest configuration and fixtures for the exifcache test suite.
"""

import os
import sys

# Add project root to sys.path so 'exifcache' and 'tests' import without installing
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from exifcache.core.tag_cache import TagCache
from tests.mocks import FakeRunner


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "exiftool: mark test as requiring the exiftool binary")


@pytest.fixture
def sample_record():
    """Fixture providing a typical exiftool -j record."""
    return {
        "FileName": "beach.jpg",
        "Keywords": ["sea", "sand", "sea"],
        "Rating": 4,
        "Title": "Beach",
    }


@pytest.fixture
def make_cache():
    """Factory fixture: build a TagCache over a FakeRunner serving ``record``."""

    def _make(record=None, **runner_kwargs):
        runner = FakeRunner(record, **runner_kwargs)
        cache = TagCache("/photos/beach.jpg", runner=runner)
        return cache, runner

    return _make
