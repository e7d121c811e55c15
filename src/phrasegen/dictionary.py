"""
Phrasegen Dictionary Loading

Load, validate, and describe the word lists passphrases are drawn from.

Sources:
1. An override file: every line is an entry
2. The embedded default list: entries follow the ``---`` header marker
3. The BIP-39 English list from the ``mnemonic`` package
"""

import string
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from mnemonic import Mnemonic

from .constants import (
    BIP39_LANGUAGE,
    BIP39_SOURCE,
    BUILTIN_SOURCE,
    HEADER_MARKER,
    get_builtin_wordlist_path,
)
from .debug import debug
from .exceptions import DictionaryLoadError, MalformedEntryError
from .models import DictionaryStats

_PUNCTUATION = frozenset(string.punctuation)


@dataclass(frozen=True)
class Dictionary:
    """Immutable, ordered word list. Entries are never empty."""
    words: tuple[str, ...]
    source: str = BUILTIN_SOURCE

    def __len__(self) -> int:
        return len(self.words)

    def __getitem__(self, index: int) -> str:
        return self.words[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self.words

    @property
    def is_empty(self) -> bool:
        return not self.words


def parse_words(text: str, source: str, has_header: bool = False) -> tuple[str, ...]:
    """
    Split word list text into entries.

    Args:
        text: Full word list text
        source: Label used in error messages
        has_header: Skip everything through the first ``---`` marker line

    Returns:
        Entries in file order

    Raises:
        MalformedEntryError: If an entry is blank, or the header marker
            is missing when one is expected

    Example:
        >>> parse_words("License\\n---\\napple\\npear\\n", "builtin", has_header=True)
        ('apple', 'pear')
    """
    lines = text.splitlines()
    start = 0

    if has_header:
        for index, line in enumerate(lines):
            if line.strip().casefold() == HEADER_MARKER:
                start = index + 1
                break
        else:
            raise MalformedEntryError(
                source, len(lines), f"missing '{HEADER_MARKER}' header marker"
            )

    words = []
    for line_number, line in enumerate(lines[start:], start=start + 1):
        if not line.strip():
            raise MalformedEntryError(source, line_number)
        words.append(line)

    return tuple(words)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        debug.exception(e, f"reading {path}")
        raise DictionaryLoadError(path, "not valid UTF-8 text") from e
    except OSError as e:
        debug.exception(e, f"reading {path}")
        raise DictionaryLoadError(path, e.strerror or str(e)) from e


@debug.time
def load_dictionary(path: str | Path | None = None) -> Dictionary:
    """
    Load a dictionary from an override file or the embedded default.

    Args:
        path: Override word list, one entry per line. None uses the
            embedded default list.

    Returns:
        Dictionary

    Raises:
        DictionaryLoadError: If the file cannot be read
        MalformedEntryError: If the file contains blank entries

    Example:
        >>> words = load_dictionary()
        >>> len(words) > 0
        True
    """
    if path is None:
        builtin = get_builtin_wordlist_path()
        words = parse_words(_read_text(builtin), BUILTIN_SOURCE, has_header=True)
        dictionary = Dictionary(words=words, source=BUILTIN_SOURCE)
    else:
        path = Path(path)
        words = parse_words(_read_text(path), str(path))
        dictionary = Dictionary(words=words, source=str(path))

    debug.print(f"Loaded {len(dictionary):,} words from {dictionary.source}")
    debug.print(debug.words(dictionary.words[:8], "First entries"))
    return dictionary


def load_bip39_dictionary() -> Dictionary:
    """
    Load the official BIP-39 English word list (2048 words).

    Example:
        >>> len(load_bip39_dictionary())
        2048
    """
    wordlist = Mnemonic(BIP39_LANGUAGE).wordlist
    debug.validate(len(wordlist) > 0, "BIP-39 wordlist cannot be empty")
    return Dictionary(words=tuple(wordlist), source=BIP39_SOURCE)


def dictionary_stats(dictionary: Iterable[str]) -> DictionaryStats:
    """
    Describe a dictionary in a single pass.

    Character classes are only detected while every word seen so far is
    ASCII; a non-ASCII dictionary reports no classes.

    Args:
        dictionary: Dictionary (or any iterable of words)

    Returns:
        DictionaryStats

    Example:
        >>> stats = dictionary_stats(Dictionary(words=("Apple", "pear")))
        >>> stats.average_length
        4.5
        >>> stats.has_uppercase
        True
    """
    count = 0
    total_length = 0
    ascii_only = True
    lower = upper = digit = punct = False

    for word in dictionary:
        count += 1
        total_length += len(word)

        if not ascii_only:
            continue
        if not word.isascii():
            ascii_only = False
            continue
        if lower and upper and digit and punct:
            continue

        for ch in word:
            if not lower and ch.islower():
                lower = True
            elif not upper and ch.isupper():
                upper = True
            elif not digit and ch.isdigit():
                digit = True
            elif not punct and ch in _PUNCTUATION:
                punct = True

    if not ascii_only:
        lower = upper = digit = punct = False

    return DictionaryStats(
        word_count=count,
        average_length=total_length / count if count else 0.0,
        ascii_only=ascii_only,
        has_lowercase=lower,
        has_uppercase=upper,
        has_digits=digit,
        has_punctuation=punct,
    )


class DictionaryDump:
    """Restartable view over every entry, in file order."""

    def __init__(self, dictionary: Dictionary):
        self._dictionary = dictionary

    def __iter__(self) -> Iterator[str]:
        return iter(self._dictionary.words)

    def __len__(self) -> int:
        return len(self._dictionary)


def dump(dictionary: Dictionary) -> DictionaryDump:
    """
    Lazily list every entry for inspection output.

    Each iteration starts again from the first entry.
    """
    return DictionaryDump(dictionary)
