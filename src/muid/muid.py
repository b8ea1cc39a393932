"""
Muid facade

Bundles a corpus with a Searcher and a Miner. Most callers use the
module-level helpers, which share one instance over the bundled corpus:

    import muid

    found = muid.create(6)          # FoundKey(length=6, pretty="Fat Cat", ...)
    muid.animal(found.key)          # "Fat Cat"
    muid.validate(found.key)        # True
    muid.difficulty(found.key)      # 6
"""

from functools import lru_cache
from typing import Callable, List, Optional

from muid import config
from muid.corpus import Corpus, default_corpus
from muid.digest import bhash as _bhash
from muid.digest import shash as _shash
from muid.miner import FoundKey, Miner
from muid.naming import pretty as _pretty
from muid.search import Searcher


class Muid:
    """Memorable unique identifiers over one corpus."""

    def __init__(
        self,
        corpus: Optional[Corpus] = None,
        random_bytes: Optional[Callable[[int], bytes]] = None,
    ):
        self.corpus = corpus if corpus is not None else default_corpus()
        self.searcher = Searcher(self.corpus)
        self.miner = Miner(self.corpus, random_bytes=random_bytes)

    @staticmethod
    def bhash(key: str) -> str:
        return _bhash(key)

    @staticmethod
    def shash(data: bytes) -> str:
        return _shash(data)

    @staticmethod
    def pretty(code: str, len1: int, len2: int) -> str:
        return _pretty(code, len1, len2)

    def create(
        self, difficulty: int = config.DEFAULT_DIFFICULTY, timeout: Optional[float] = None
    ) -> FoundKey:
        """Mine a single key at the given difficulty."""
        return self.mine_until(difficulty, 1, timeout=timeout)[0]

    def mine_until(
        self,
        difficulty: int,
        quota: int,
        timeout: Optional[float] = None,
        stop_event=None,
    ) -> List[FoundKey]:
        return self.miner.mine_until(
            difficulty, quota, timeout=timeout, stop_event=stop_event
        )

    def search(self, code: str) -> Optional[str]:
        """Return the spirit animal given the public identity"""
        return self.searcher.search(code)

    def animal(self, key: str) -> Optional[str]:
        return self.searcher.animal(key)

    def validate(self, key: str) -> bool:
        return self.searcher.validate(key)

    def difficulty(self, key: str) -> int:
        return self.searcher.difficulty(key)


@lru_cache(maxsize=1)
def get_default_muid() -> Muid:
    """Get the shared Muid over the bundled corpus."""
    return Muid()


def create(difficulty: int = config.DEFAULT_DIFFICULTY) -> FoundKey:
    return get_default_muid().create(difficulty)


def search(code: str) -> Optional[str]:
    return get_default_muid().search(code)


def animal(key: str) -> Optional[str]:
    return get_default_muid().animal(key)


def validate(key: str) -> bool:
    return get_default_muid().validate(key)


def difficulty(key: str) -> int:
    return get_default_muid().difficulty(key)


bhash = Muid.bhash
shash = Muid.shash
