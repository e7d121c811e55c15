"""
Phrasegen Exceptions

Custom exception classes for clear error handling across the core and the CLI.
"""


class PhrasegenError(Exception):
    """Base exception for all Phrasegen errors."""

    pass


# ============================================================================
# VALIDATION ERRORS
# ============================================================================


class ValidationError(PhrasegenError):
    """Base class for validation errors."""

    pass


# ============================================================================
# DICTIONARY ERRORS
# ============================================================================


class DictionaryError(PhrasegenError):
    """Base class for dictionary loading errors."""

    pass


class DictionaryLoadError(DictionaryError):
    """Dictionary file could not be read."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read dictionary {path}: {reason}")


class MalformedEntryError(DictionaryError):
    """Dictionary contains an entry that cannot be used."""

    def __init__(self, source: str, line_number: int, reason: str = "empty entry"):
        self.source = source
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Malformed dictionary {source}, line {line_number}: {reason}")


# ============================================================================
# GENERATION ERRORS
# ============================================================================


class SamplingError(PhrasegenError):
    """Base class for word sampling errors."""

    pass


class GenerationError(PhrasegenError):
    """Base class for passphrase generation errors."""

    pass


class EmptyDictionaryError(SamplingError, GenerationError):
    """Nothing to sample from."""

    def __init__(self, dictionary_size: int = 0):
        self.dictionary_size = dictionary_size
        super().__init__("Dictionary is empty, cannot select words")


class InvalidRangeError(ValidationError, GenerationError):
    """A min/max pair is negative or inverted."""

    def __init__(self, field: str, minimum: int, maximum: int, reason: str = ""):
        self.field = field
        self.minimum = minimum
        self.maximum = maximum
        detail = reason or "minimum must not exceed maximum"
        super().__init__(f"Invalid {field} range {minimum}..{maximum}: {detail}")


class LengthConstraintError(GenerationError):
    """No passphrase within the length range after the retry ceiling."""

    def __init__(
        self,
        length_range: tuple[int, int],
        word_range: tuple[int, int],
        attempts: int,
        dictionary_size: int,
    ):
        self.length_range = length_range
        self.word_range = word_range
        self.attempts = attempts
        self.dictionary_size = dictionary_size
        super().__init__(
            f"No passphrase of {length_range[0]}-{length_range[1]} characters "
            f"from {word_range[0]}-{word_range[1]} words after {attempts:,} attempts "
            f"(dictionary has {dictionary_size:,} words)"
        )


# ============================================================================
# PRESENTATION ERRORS
# ============================================================================


class ClipboardError(PhrasegenError):
    """Copying to the system clipboard failed."""

    pass
