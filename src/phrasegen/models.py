"""
Phrasegen Data Models

Dataclasses for structured data exchange between the core and frontends.
"""

import math
from dataclasses import dataclass, field

from .constants import (
    BRUTE_FORCE_CHARSETS,
    DEFAULT_MAX_LENGTH,
    DEFAULT_MAX_WORDS,
    DEFAULT_MIN_LENGTH,
    DEFAULT_MIN_WORDS,
    DEFAULT_PASSPHRASE_COUNT,
    DEFAULT_SEPARATOR,
)


@dataclass(frozen=True)
class GenerationConfig:
    """Parameters for a generation run."""
    min_words: int = DEFAULT_MIN_WORDS
    max_words: int = DEFAULT_MAX_WORDS
    min_len: int = DEFAULT_MIN_LENGTH
    max_len: int = DEFAULT_MAX_LENGTH
    passphrase_count: int = DEFAULT_PASSPHRASE_COUNT
    separator: str = DEFAULT_SEPARATOR

    @property
    def word_count_range(self) -> tuple[int, int]:
        return (self.min_words, self.max_words)

    @property
    def length_range(self) -> tuple[int, int]:
        return (self.min_len, self.max_len)

    @property
    def enforces_length(self) -> bool:
        """Length bounds only apply when both ends are set."""
        return self.min_len > 0 and self.max_len > 0


@dataclass(frozen=True)
class Passphrase:
    """Generated passphrase with its word boundaries."""
    words: tuple[str, ...]
    separator: str = DEFAULT_SEPARATOR

    @property
    def text(self) -> str:
        """Flat passphrase text."""
        return self.separator.join(self.words)

    @property
    def word_count(self) -> int:
        return len(self.words)

    @property
    def length(self) -> int:
        """Character length of the flat text."""
        return len(self.text)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class DictionaryStats:
    """Descriptive statistics for a loaded dictionary."""
    word_count: int
    average_length: float
    ascii_only: bool
    # Character classes, only meaningful when ascii_only holds
    has_lowercase: bool = False
    has_uppercase: bool = False
    has_digits: bool = False
    has_punctuation: bool = False

    @property
    def bits_per_word(self) -> float:
        """Entropy contributed by each uniformly drawn word."""
        if self.word_count <= 1:
            return 0.0
        return math.log2(self.word_count)

    def as_dict(self) -> dict:
        return {
            "word_count": self.word_count,
            "average_length": round(self.average_length, 2),
            "ascii_only": self.ascii_only,
            "bits_per_word": round(self.bits_per_word, 2),
            "character_classes": {
                "lowercase": self.has_lowercase,
                "uppercase": self.has_uppercase,
                "digits": self.has_digits,
                "punctuation": self.has_punctuation,
            },
        }


@dataclass(frozen=True)
class EntropyReport:
    """Entropy estimates in bits under several adversary models."""
    known_method: int
    brute_force_lowercase: int
    brute_force_mixed_case: int
    brute_force_alphanumeric: int
    brute_force_symbols: int

    @property
    def brute_force(self) -> dict[str, int]:
        return {name: getattr(self, f"brute_force_{name}") for name in BRUTE_FORCE_CHARSETS}

    def as_dict(self) -> dict:
        return {"known_method": self.known_method, "brute_force": self.brute_force}


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    error_message: str = ""
    details: dict = field(default_factory=dict)

    @classmethod
    def ok(cls, **details) -> 'ValidationResult':
        """Create a successful validation result."""
        return cls(is_valid=True, details=details)

    @classmethod
    def error(cls, message: str, **details) -> 'ValidationResult':
        """Create a failed validation result."""
        return cls(is_valid=False, error_message=message, details=details)
