import pytest

from muid.errors import InvalidArgumentError
from muid.naming import pretty


def test_pretty_example():
    assert pretty("abc123", 3, 3) == "Abc Lzm"


def test_pretty_reads_digits_as_letters():
    assert pretty("fa7ca7", 3, 3) == "Fat Cat"
    assert pretty("b01dd09", 4, 3) == "Bold Dog"


def test_pretty_ignores_trailing_code():
    assert pretty("fa7ca7" + "0" * 26, 3, 3) == "Fat Cat"


@pytest.mark.parametrize("k1,k2", [(1, 1), (2, 5), (6, 2), (8, 8)])
def test_pretty_shape(k1, k2):
    code = "0123456789abcdef0123456789abcdef"
    name = pretty(code, k1, k2)
    words = name.split(" ")
    assert len(words) == 2
    assert [len(w) for w in words] == [k1, k2]
    assert len(name) == k1 + k2 + 1


def test_pretty_rejects_bad_lengths():
    with pytest.raises(InvalidArgumentError, match="positive"):
        pretty("abc123", 0, 3)
    with pytest.raises(InvalidArgumentError, match="too short"):
        pretty("abc123", 4, 4)
