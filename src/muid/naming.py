from muid.errors import InvalidArgumentError
from muid.readable import to_readable


def _first_upper(word: str) -> str:
    return word[:1].upper() + word[1:]


def pretty(code: str, len1: int, len2: int) -> str:
    """
    Render the start of a code as a two-word animal name.

    Examples:
        pretty("abc123", 3, 3)  # "Abc Lzm"
        pretty("fa7ca7", 3, 3)  # "Fat Cat"
    """
    if len1 <= 0 or len2 <= 0:
        raise InvalidArgumentError("Word lengths must be positive")
    if len1 + len2 > len(code):
        raise InvalidArgumentError(
            f"Code of length {len(code)} is too short for words of {len1} and {len2}"
        )

    word1 = to_readable(code[:len1])
    word2 = to_readable(code[len1 : len1 + len2])
    return f"{_first_upper(word1)} {_first_upper(word2)}"
