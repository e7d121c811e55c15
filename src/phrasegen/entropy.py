"""
Phrasegen Entropy Analysis

Point estimates of passphrase strength, in whole bits:

- Known method: the attacker knows the dictionary and the word count and
  only has to guess the random draws. floor(word_count * log2(dict_size))
- Brute force: the attacker ignores the dictionary and searches every
  string of the same length over a charset. floor(length * log2(charset))

The estimates are independent; none bounds another.
"""

import math

from .constants import BRUTE_FORCE_CHARSETS
from .models import EntropyReport, Passphrase


def known_method_entropy(word_count: int, dict_size: int) -> int:
    """
    Bits for an attacker who knows the dictionary and word count.

    Example:
        >>> known_method_entropy(3, 2048)
        33
    """
    if dict_size <= 1 or word_count <= 0:
        return 0
    return math.floor(word_count * math.log2(dict_size))


def brute_force_entropy(length: int, charset_size: int) -> int:
    """
    Bits for an exhaustive search over ``charset_size`` symbols.

    Example:
        >>> brute_force_entropy(12, 26)
        56
    """
    if length <= 0 or charset_size <= 1:
        return 0
    return math.floor(length * math.log2(charset_size))


def analyze(passphrase: Passphrase, dict_size: int) -> EntropyReport:
    """
    Compute every entropy estimate for a passphrase.

    Pure: the same inputs always give the same report.

    Args:
        passphrase: Generated passphrase
        dict_size: Number of entries in the source dictionary

    Returns:
        EntropyReport
    """
    brute_force = {
        f"brute_force_{name}": brute_force_entropy(passphrase.length, size)
        for name, size in BRUTE_FORCE_CHARSETS.items()
    }
    return EntropyReport(
        known_method=known_method_entropy(passphrase.word_count, dict_size),
        **brute_force,
    )
