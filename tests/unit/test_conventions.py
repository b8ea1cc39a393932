from unittest.mock import patch

import pytest

from muid.conventions import KeyConventions
from muid.corpus import Corpus
from muid.digest import bhash
from muid.errors import MiningTimeout
from muid.muid import Muid, get_default_muid


@pytest.fixture
def conventions(dense_corpus, seeded_random):
    return KeyConventions(Muid(dense_corpus, random_bytes=seeded_random()))


def test_defaults_to_shared_muid():
    assert KeyConventions().muid is get_default_muid()


def test_create_key_is_valid(conventions):
    key = conventions.create_key(2)
    assert len(key) == 32
    assert conventions.is_valid_key(key)
    assert conventions.key_difficulty(key) == 2


def test_create_returns_found_key(conventions):
    found = conventions.create(2)
    assert conventions.animal_from_key(found.key) == found.pretty
    assert conventions.animal_from_code(found.hash) == found.pretty


def test_animal_from_code_needs_only_public_hash():
    key = "3f06e5b0d027fb4e33a5207dd112892e"
    code = bhash(key)
    conventions = KeyConventions(Muid(Corpus({code[:6]: [3, 3]})))
    assert conventions.animal_from_code(code) == conventions.animal_from_key(key)
    assert conventions.animal_from_code(code) is not None


def test_shash(conventions):
    assert conventions.shash(b"hello") == "2cf24dba5fb0a30e26e83b2ac5b9e29e"


def test_invalid_key():
    # The dense corpus names every key, so use the bundled one
    conventions = KeyConventions()
    key = "82457d14c37df7043cb5d6c0b53bdb30"
    assert not conventions.is_valid_key(key)
    assert conventions.animal_from_key(key) is None
    assert conventions.key_difficulty(key) == 0


def test_maybe_create_key_finds_key(conventions):
    key = conventions.maybe_create_key(seconds=5, difficulty=2)
    assert key is not None
    assert conventions.is_valid_key(key)


def test_maybe_create_key_gives_up():
    conventions = KeyConventions(Muid(Corpus({"f" * 12: [6, 6]}), random_bytes=bytes))
    assert conventions.maybe_create_key(seconds=0.05, difficulty=12) is None


def test_maybe_create_key_passes_timeout(conventions):
    with patch.object(
        conventions.muid, "create", side_effect=MiningTimeout("slow")
    ) as mock_create:
        assert conventions.maybe_create_key(seconds=2.5, difficulty=7) is None
    mock_create.assert_called_once_with(7, timeout=2.5)
