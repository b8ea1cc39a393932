"""
Key conventions

The operations identity and key-management code builds on: a write key is
a private muid key, and its public code is the key's bhash.
"""

from typing import Optional

from muid import config
from muid.errors import MiningTimeout
from muid.miner import FoundKey
from muid.muid import Muid, get_default_muid


class KeyConventions:
    def __init__(self, muid: Optional[Muid] = None):
        self.muid = muid if muid is not None else get_default_muid()

    def is_valid_key(self, key: str) -> bool:
        """Check if the key is hash-memorable"""
        return self.muid.validate(key)

    def create(self, difficulty: int = config.DEFAULT_KEY_DIFFICULTY) -> FoundKey:
        return self.muid.create(difficulty)

    def create_key(self, difficulty: int = config.DEFAULT_KEY_DIFFICULTY) -> str:
        return self.create(difficulty).key

    def maybe_create_key(
        self, seconds: float = 1.0, difficulty: int = config.DEFAULT_KEY_DIFFICULTY
    ) -> Optional[str]:
        """Mine for at most `seconds`; None when nothing turned up in time."""
        try:
            return self.muid.create(difficulty, timeout=seconds).key
        except MiningTimeout:
            return None

    def animal_from_key(self, key: str) -> Optional[str]:
        return self.muid.animal(key)

    def key_difficulty(self, key: str) -> int:
        return self.muid.difficulty(key)

    def shash(self, data: bytes) -> str:
        return self.muid.shash(data)

    def animal_from_code(self, code: str) -> Optional[str]:
        """Return the spirit animal given the public identity (hash of write_key)"""
        return self.muid.search(code)
