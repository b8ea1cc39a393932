"""Unit tests for the Muid facade."""

import secrets

import pytest

import muid
from muid.corpus import Corpus
from muid.digest import bhash
from muid.muid import Muid, get_default_muid


@pytest.fixture
def dense_muid(dense_corpus, seeded_random):
    return Muid(dense_corpus, random_bytes=seeded_random())


class TestMuid:
    def test_create_returns_matching_key(self, dense_muid, dense_corpus):
        found = dense_muid.create(2)
        assert found.hash[:2] in dense_corpus
        assert found.pretty
        assert dense_muid.validate(found.key)
        assert dense_muid.animal(found.key) == found.pretty
        assert dense_muid.search(found.hash) == found.pretty

    def test_mined_keys_validate_with_their_difficulty(self, dense_muid):
        for found in dense_muid.mine_until(2, 10):
            assert dense_muid.difficulty(found.key) == found.length == 2

    def test_validate_matches_animal(self, small_corpus):
        keys = [secrets.token_hex(16) for _ in range(200)]
        # Make sure at least one key is an animal
        keys.append("82457d14c37df7043cb5d6c0b53bdb30")
        entries = {bhash(keys[-1])[:6]: [3, 3], **small_corpus.to_dict()}
        facade = Muid(Corpus(entries))

        for key in keys:
            name = facade.animal(key)
            assert facade.validate(key) == (name is not None)
            expected = len(name.replace(" ", "")) if name is not None else 0
            assert facade.difficulty(key) == expected

        assert facade.validate(keys[-1])

    def test_static_helpers(self):
        assert Muid.bhash("hello") == bhash("hello")
        assert Muid.shash(b"hello") == bhash("hello")
        assert Muid.pretty("abc123", 3, 3) == "Abc Lzm"

    def test_default_instance_uses_bundled_corpus(self):
        facade = get_default_muid()
        assert facade is get_default_muid()
        assert facade.corpus.exact_lookup("fa7ca7") == (3, 3)


class TestModuleHelpers:
    def test_package_exports(self):
        assert muid.search("fa7ca7" + "0" * 26) == "Fat Cat"
        assert muid.to_readable("b01d") == "bold"
        assert muid.from_readable("Bold") == "b01d"
        assert muid.shash(b"") == "e3b0c44298fc1c149afbf4c8996fb924"

    def test_key_without_animal(self):
        key = "82457d14c37df7043cb5d6c0b53bdb30"
        assert muid.animal(key) is None
        assert muid.validate(key) is False
        assert muid.difficulty(key) == 0

    def test_create_at_difficulty_six(self):
        found = muid.create(6)
        assert get_default_muid().corpus.exact_lookup(found.hash[:6]) is not None
        assert found.pretty
        assert muid.validate(found.key)
