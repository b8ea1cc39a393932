import os
import random
import sys

import pytest

# Add src to the Python path so the tests run without an installed package
sys.path.insert(
    0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
)

from muid.corpus import Corpus

HEX = "0123456789abcdef"


@pytest.fixture
def small_corpus():
    """A handful of entries with overlapping prefixes of different lengths."""
    return Corpus(
        {
            "abc123": [3, 3],
            "abc12345": [4, 4],
            "fa7ca7": [3, 3],
            "fa7ca771e": [3, 6],
            "b01dd09": [4, 3],
        }
    )


@pytest.fixture
def dense_corpus():
    """Every two-character prefix, so any digest matches at difficulty 2."""
    return Corpus({a + b: [1, 1] for a in HEX for b in HEX})


@pytest.fixture
def seeded_random():
    """Factory for reproducible byte sources."""

    def make(seed=1234):
        return random.Random(seed).randbytes

    return make
