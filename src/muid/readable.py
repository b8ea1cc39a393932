"""
Readable hex

Swaps each decimal digit for a letter that looks like it, so a hex fragment
reads as a word: 0->o 1->l 2->z 3->m 4->y 5->s 6->h 7->t 8->x 9->g.
The letters a-f pass through unchanged.
"""

from muid.digest import HEX_DIGITS
from muid.errors import InvalidArgumentError

DIGITS = "0123456789"
LETTERS = "olzmyshtxg"

# Round trips only work while the substitute letters stay clear of a-f.
assert not set(LETTERS) & HEX_DIGITS, "substitute letters overlap hex digits"

READABLE_ALPHABET = frozenset(LETTERS + "abcdef")

_TO_READABLE = str.maketrans(DIGITS, LETTERS)
_FROM_READABLE = str.maketrans(LETTERS, DIGITS)


def to_readable(word: str) -> str:
    """Replace the digits of a lowercase hex string with look-alike letters."""
    if not isinstance(word, str) or not set(word) <= HEX_DIGITS:
        raise InvalidArgumentError(f"Not a lowercase hex string: {word!r}")
    return word.translate(_TO_READABLE)


def from_readable(word: str) -> str:
    """Inverse of to_readable. Case-insensitive, so capitalized names decode."""
    if not isinstance(word, str):
        raise InvalidArgumentError(f"Not a readable hex string: {word!r}")
    word = word.lower()
    if not set(word) <= READABLE_ALPHABET:
        raise InvalidArgumentError(f"Not a readable hex string: {word!r}")
    return word.translate(_FROM_READABLE)
