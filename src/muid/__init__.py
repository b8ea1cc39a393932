"""
muid - memorable unique identifiers

A muid is a random key whose SHA-256 hash happens to start with a word pair
from the animal corpus, once digits are read as look-alike letters. The key
stays private; its hash is public, and both map to the same animal name.

Example Usage:
    import muid

    found = muid.create(6)
    print(found.key, found.pretty)   # 1d3b... Fat Cat
    muid.validate(found.key)         # True
    muid.search(found.hash)          # "Fat Cat"
"""

__version__ = "0.1.0"
__author__ = "muid team"
__description__ = "Memorable unique identifiers mined from SHA-256 hashes"

from .corpus import Corpus, default_corpus, load_corpus
from .digest import bhash, shash
from .errors import (
    ConfigurationError,
    DifficultyWarning,
    InvalidArgumentError,
    MiningCancelled,
    MiningTimeout,
    MuidError,
)
from .miner import FoundKey, Miner, mine_parallel
from .muid import Muid, animal, create, difficulty, get_default_muid, search, validate
from .naming import pretty
from .readable import from_readable, to_readable
from .search import Searcher
from .conventions import KeyConventions

__all__ = [
    # Core functions
    "bhash",
    "shash",
    "to_readable",
    "from_readable",
    "pretty",
    "create",
    "animal",
    "validate",
    "difficulty",
    "search",
    # Classes
    "Corpus",
    "Searcher",
    "Miner",
    "Muid",
    "FoundKey",
    "KeyConventions",
    "load_corpus",
    "default_corpus",
    "get_default_muid",
    "mine_parallel",
    # Errors
    "MuidError",
    "ConfigurationError",
    "InvalidArgumentError",
    "MiningTimeout",
    "MiningCancelled",
    "DifficultyWarning",
]
