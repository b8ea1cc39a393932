"""
Exceptions raised by muid.

A search that finds no animal is not an error: it returns None.
"""

from typing import List, Optional


class MuidError(Exception):
    """Base exception for muid errors"""

    pass


class ConfigurationError(MuidError):
    """The corpus is missing or malformed"""

    pass


class InvalidArgumentError(MuidError, ValueError):
    """Caller passed input outside the contract (non-hex text, bad lengths...)"""

    pass


class MiningStopped(MuidError):
    """Mining ended before the quota was met."""

    def __init__(self, message: str, results: Optional[List] = None, attempts: int = 0):
        super().__init__(message)
        self.results = list(results or [])
        self.attempts = attempts


class MiningTimeout(MiningStopped):
    """Mining ran out of time"""

    pass


class MiningCancelled(MiningStopped):
    """Mining was stopped by its caller"""

    pass


class DifficultyWarning(UserWarning):
    """Mining at this difficulty may take an impractically long time."""

    pass
