"""
Phrasegen Input Validation

Validators for generation settings with clear error messages.

validate_* functions return a ValidationResult for frontends that want to
report problems; require_* functions raise for the core.
"""

from .exceptions import EmptyDictionaryError, InvalidRangeError
from .models import GenerationConfig, ValidationResult


def _range_problem(config: GenerationConfig) -> tuple[str, int, int, str] | None:
    """Return (field, min, max, reason) for the first bad range, or None."""
    if config.min_words < 0 or config.max_words < 0:
        return ("word count", config.min_words, config.max_words, "values cannot be negative")
    if config.min_words > config.max_words:
        return ("word count", config.min_words, config.max_words, "")

    if config.min_len < 0 or config.max_len < 0:
        return ("length", config.min_len, config.max_len, "values cannot be negative")
    # A zero bound means "unset", so only compare when both are set
    if config.enforces_length and config.min_len > config.max_len:
        return ("length", config.min_len, config.max_len, "")

    if config.passphrase_count < 0:
        return (
            "passphrase count",
            config.passphrase_count,
            config.passphrase_count,
            "count cannot be negative",
        )
    return None


def validate_config(config: GenerationConfig) -> ValidationResult:
    """
    Validate generation settings.

    Rules:
    - Word counts, lengths and count are non-negative
    - min_words <= max_words
    - min_len <= max_len when both are set (non-zero)

    Args:
        config: Generation settings

    Returns:
        ValidationResult
    """
    problem = _range_problem(config)
    if problem is None:
        return ValidationResult.ok(
            word_count_range=config.word_count_range,
            length_range=config.length_range,
            passphrase_count=config.passphrase_count,
        )

    field, minimum, maximum, reason = problem
    return ValidationResult.error(
        str(InvalidRangeError(field, minimum, maximum, reason)),
        field=field,
        minimum=minimum,
        maximum=maximum,
    )


def validate_dictionary(dictionary) -> ValidationResult:
    """Check that a dictionary has entries to sample from."""
    if len(dictionary) == 0:
        return ValidationResult.error("Dictionary is empty", size=0)
    return ValidationResult.ok(size=len(dictionary))


# =============================================================================
# RAISING VARIANTS
# =============================================================================


def require_valid_config(config: GenerationConfig) -> None:
    """Raise InvalidRangeError if the settings are invalid."""
    problem = _range_problem(config)
    if problem is not None:
        raise InvalidRangeError(*problem)


def require_valid_dictionary(dictionary) -> None:
    """Raise EmptyDictionaryError if the dictionary has no entries."""
    if len(dictionary) == 0:
        raise EmptyDictionaryError(0)
