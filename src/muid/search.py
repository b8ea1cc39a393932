"""
Animal search

A digest is named after the longest corpus prefix it starts with. Longer
prefixes are rarer to hit by chance, so they win over any shorter match.
"""

from typing import Optional

from muid.corpus import Corpus
from muid.digest import bhash, is_hex
from muid.errors import InvalidArgumentError
from muid.naming import pretty


class Searcher:
    """Longest-prefix lookup of digests against a corpus."""

    def __init__(self, corpus: Corpus):
        self.corpus = corpus

    def search(self, code: str) -> Optional[str]:
        """Return the animal for a public code (digest), or None."""
        if not isinstance(code, str):
            raise InvalidArgumentError(
                f"Code must be a string, got {type(code).__name__}"
            )
        code = code.lower()
        if not is_hex(code):
            raise InvalidArgumentError(f"Code is not hex: {code!r}")

        # Scan bounds come from the corpus itself, longest first.
        for k in self.corpus.lengths:
            if k > len(code):
                continue
            code_k = code[:k]
            lengths = self.corpus.exact_lookup(code_k)
            if lengths is not None:
                return pretty(code_k, *lengths)
        return None

    def animal(self, key: str) -> Optional[str]:
        """Return the animal for a private key, or None."""
        return self.search(bhash(key))

    def validate(self, key: str) -> bool:
        return self.animal(key) is not None

    def difficulty(self, key: str) -> int:
        """Letters in the key's animal name, 0 when it has none."""
        return len((self.animal(key) or "").replace(" ", ""))
