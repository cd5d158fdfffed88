"""
Shared fixtures for kakikae tests.
"""

import pytest

from kakikae.converter import Converter
from kakikae.tree import TreeCache


@pytest.fixture
def cache():
    """A fresh tree cache, so tests do not depend on each other's trees."""
    return TreeCache(name='test')


@pytest.fixture
def converter(cache):
    """A converter with default options and its own cache."""
    return Converter(cache=cache)
