"""
Phrasegen Random Sources

Every draw in the core goes through a RandomSource passed in by the caller.
Production code uses SecureRandom (the OS CSPRNG via ``secrets``); tests use
SeededRandom to get reproducible output.
"""

import random
import secrets
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Uniform integer source."""

    def randbelow(self, n: int) -> int:
        """Return a uniform integer in [0, n). n must be positive."""
        ...


def randint_inclusive(rng: RandomSource, low: int, high: int) -> int:
    """
    Draw uniformly from [low, high] with a single randbelow call.

    Args:
        rng: Random source
        low: Inclusive lower bound
        high: Inclusive upper bound, must be >= low

    Returns:
        Integer in [low, high]
    """
    if high < low:
        raise ValueError(f"empty range {low}..{high}")
    return low + rng.randbelow(high - low + 1)


class SecureRandom:
    """
    Cryptographically secure source backed by the operating system.

    ``secrets.randbelow`` rejection-samples over ``getrandbits`` so there is
    no modulo bias for sizes that are not powers of two.
    """

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError("randbelow requires a positive bound")
        return secrets.randbelow(n)

    def __repr__(self) -> str:
        return "SecureRandom()"


class SeededRandom:
    """
    Deterministic source for tests and reproducible runs.

    NOT suitable for real passphrases.
    """

    def __init__(self, seed: int | str | bytes | None = None):
        self.seed = seed
        self._random = random.Random(seed)

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError("randbelow requires a positive bound")
        return self._random.randrange(n)

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed!r})"


def default_random() -> RandomSource:
    """Production random source."""
    return SecureRandom()
