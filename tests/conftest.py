import os
import sys

import pytest

# Add src to path so tests can run without installing package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from bloomkit import BloomFilter, long_funnel, string_funnel  # noqa: E402
from bloomkit.hashing import HashCode  # noqa: E402


class FixedDigest:
    """Hash function stand-in that returns a chosen (h1, h2) for every input."""

    def __init__(self, h1, h2):
        self.h1 = h1
        self.h2 = h2
        self.calls = 0

    def hash_object(self, obj, funnel):
        self.calls += 1
        digest = (self.h1 & 0xFFFFFFFFFFFFFFFF).to_bytes(8, "little") + (
            self.h2 & 0xFFFFFFFFFFFFFFFF
        ).to_bytes(8, "little")
        return HashCode(digest)


@pytest.fixture
def string_filter():
    """A filter of strings sized for 1000 insertions at 1%."""
    return BloomFilter.create(string_funnel(), 1000, 0.01)


@pytest.fixture
def long_filter():
    return BloomFilter.create(long_funnel, 1000, 0.03)


@pytest.fixture
def fixed_digest():
    return FixedDigest
