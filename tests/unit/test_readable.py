"""Unit tests for readable hex."""

import random

import pytest

from muid.errors import InvalidArgumentError
from muid.readable import from_readable, to_readable

HEX = "0123456789abcdef"


def test_substitution_table():
    assert to_readable("0123456789") == "olzmyshtxg"
    assert to_readable("abcdef") == "abcdef"
    assert to_readable("fa7ca7") == "fatcat"
    assert to_readable("") == ""


def test_from_readable_inverts_table():
    assert from_readable("olzmyshtxg") == "0123456789"
    assert from_readable("fatcat") == "fa7ca7"


def test_from_readable_ignores_case():
    assert from_readable("Fat") + from_readable("Cat") == "fa7ca7"


def test_round_trip_random_hex():
    rng = random.Random(7)
    for _ in range(200):
        s = "".join(rng.choice(HEX) for _ in range(rng.randint(0, 40)))
        readable = to_readable(s)
        assert from_readable(readable) == s
        assert not any(c.isdigit() for c in readable)


@pytest.mark.parametrize("bad", ["ABC", "xyz", "12 3", "g"])
def test_to_readable_rejects_non_hex(bad):
    with pytest.raises(InvalidArgumentError):
        to_readable(bad)


@pytest.mark.parametrize("bad", ["123", "dog!", "quack"])
def test_from_readable_rejects_foreign_letters(bad):
    with pytest.raises(InvalidArgumentError):
        from_readable(bad)
