"""
Animal corpus

The corpus maps a lowercase hex prefix to the lengths of the two words the
prefix splits into, e.g. "fa7ca7" -> (3, 3) renders as "Fat Cat". It is read
from a JSON object of the form {"fa7ca7": [3, 3], ...} once per process and
never changes afterwards.
"""

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Sequence, Tuple, Union

from muid import config
from muid.digest import is_hex
from muid.errors import ConfigurationError
from muid.log import log

logger = logging.getLogger("muid.corpus")

Split = Tuple[int, int]


def _validate_entry(prefix, value) -> Split:
    """Check one corpus entry and return it as a tuple."""
    if not is_hex(prefix):
        raise ConfigurationError(f"Corpus key {prefix!r} is not lowercase hex")

    if (
        not isinstance(value, (list, tuple))
        or len(value) != 2
        or not all(isinstance(n, int) and not isinstance(n, bool) for n in value)
    ):
        raise ConfigurationError(
            f"Corpus entry {prefix!r} must be a pair of integers, got {value!r}"
        )

    len1, len2 = value
    if len1 <= 0 or len2 <= 0:
        raise ConfigurationError(
            f"Corpus entry {prefix!r} has non-positive word lengths {value!r}"
        )
    if len1 + len2 != len(prefix):
        raise ConfigurationError(
            f"Corpus entry {prefix!r} splits into {len1}+{len2}, "
            f"expected a total of {len(prefix)}"
        )
    return (len1, len2)


class Corpus:
    """Read-only prefix table. Safe to share between threads."""

    def __init__(self, entries: Mapping[str, Sequence[int]]):
        if not isinstance(entries, Mapping):
            raise ConfigurationError(
                f"Corpus must be a JSON object, got {type(entries).__name__}"
            )
        if not entries:
            raise ConfigurationError("Corpus is empty")

        table: Dict[str, Split] = {}
        counts: Dict[int, int] = {}
        for prefix, value in entries.items():
            table[prefix] = _validate_entry(prefix, value)
            counts[len(prefix)] = counts.get(len(prefix), 0) + 1

        self._table = MappingProxyType(table)
        self._counts = MappingProxyType(counts)
        self._lengths = tuple(sorted(counts, reverse=True))

    # ------------------------------------------------------------------
    @property
    def lengths(self) -> Tuple[int, ...]:
        """Distinct key lengths present, longest first."""
        return self._lengths

    @property
    def max_length(self) -> int:
        return self._lengths[0]

    @property
    def min_length(self) -> int:
        return self._lengths[-1]

    def count(self, length: int) -> int:
        """Number of entries whose key has exactly this length."""
        return self._counts.get(length, 0)

    def exact_lookup(self, prefix: str) -> Optional[Split]:
        return self._table.get(prefix)

    # ------------------------------------------------------------------
    def items(self):
        return self._table.items()

    def to_dict(self) -> Dict[str, list]:
        """Plain, picklable copy in the on-disk shape."""
        return {prefix: list(split) for prefix, split in self._table.items()}

    def __contains__(self, prefix) -> bool:
        return prefix in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __repr__(self) -> str:
        return (
            f"Corpus(entries={len(self)}, "
            f"lengths={self.min_length}..{self.max_length})"
        )


def load_corpus(path: Union[str, os.PathLike, None] = None) -> Corpus:
    """
    Load and validate a corpus file.

    Args:
        path: JSON corpus file, defaults to the bundled animals.json

    Returns:
        Frozen Corpus

    Raises:
        ConfigurationError: If the file is missing, unreadable or malformed
    """
    corpus_path = Path(path) if path is not None else Path(config.CORPUS_PATH)

    try:
        with open(corpus_path, "r", encoding="utf-8") as f:
            entries = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Corpus file not found: {corpus_path}")
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in corpus file {corpus_path}: {e}")
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"Corpus file {corpus_path} is not UTF-8: {e}")
    except OSError as e:
        raise ConfigurationError(f"Cannot read corpus file {corpus_path}: {e}")

    corpus = Corpus(entries)
    log(
        logger,
        "debug",
        "Corpus loaded",
        path=corpus_path,
        entries=len(corpus),
        lengths=f"{corpus.min_length}..{corpus.max_length}",
    )
    return corpus


@lru_cache(maxsize=1)
def default_corpus() -> Corpus:
    """The bundled corpus, loaded on first use and shared by the process."""
    return load_corpus()
