"""
Phrasegen Word Sampling

Uniform selection of dictionary entries, with replacement.
"""

from .dictionary import Dictionary
from .exceptions import EmptyDictionaryError
from .random_source import RandomSource, default_random


def sample_word(dictionary: Dictionary, rng: RandomSource) -> str:
    """
    Select one uniformly random entry.

    Args:
        dictionary: Source dictionary
        rng: Random source (one randbelow draw)

    Returns:
        The selected word

    Raises:
        EmptyDictionaryError: If the dictionary has no entries
    """
    size = len(dictionary)
    if size == 0:
        raise EmptyDictionaryError(size)
    return dictionary[rng.randbelow(size)]


class WordSampler:
    """Draws independent words from a bound dictionary."""

    def __init__(self, dictionary: Dictionary, rng: RandomSource | None = None):
        self.dictionary = dictionary
        self.rng = rng if rng is not None else default_random()

    def sample(self) -> str:
        return sample_word(self.dictionary, self.rng)

    def sample_many(self, count: int) -> list[str]:
        """Draw ``count`` words; repeats are allowed."""
        if count < 0:
            raise ValueError("count cannot be negative")
        return [self.sample() for _ in range(count)]
