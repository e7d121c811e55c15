"""
Phrasegen Passphrase Generation

Choose a word count, draw words, assemble, and keep the result inside the
configured length range.
"""

from .constants import MAX_LENGTH_ATTEMPTS
from .debug import debug
from .dictionary import Dictionary
from .exceptions import LengthConstraintError
from .models import GenerationConfig, Passphrase
from .random_source import RandomSource, default_random, randint_inclusive
from .sampler import sample_word
from .validation import require_valid_config, require_valid_dictionary


def choose_word_count(config: GenerationConfig, rng: RandomSource) -> int:
    """
    Pick the number of words for one passphrase.

    A fixed range uses no randomness; otherwise one draw from
    [min_words, max_words].
    """
    if config.min_words == config.max_words:
        return config.min_words
    return randint_inclusive(rng, config.min_words, config.max_words)


def _within_length(config: GenerationConfig, passphrase: Passphrase) -> bool:
    if not config.enforces_length:
        return True
    return config.min_len <= passphrase.length <= config.max_len


def generate_passphrase(
    config: GenerationConfig,
    dictionary: Dictionary,
    rng: RandomSource | None = None,
    max_attempts: int = MAX_LENGTH_ATTEMPTS,
) -> Passphrase:
    """
    Generate a single passphrase.

    Args:
        config: Generation settings (passphrase_count is ignored)
        dictionary: Words to draw from
        rng: Random source, defaults to the OS CSPRNG
        max_attempts: Ceiling on redraws for the length range

    Returns:
        Passphrase

    Raises:
        InvalidRangeError: If the settings are invalid
        EmptyDictionaryError: If the dictionary has no entries
        LengthConstraintError: If no draw fits the length range

    Example:
        >>> p = generate_passphrase(GenerationConfig(min_words=3, max_words=3), load_dictionary())
        >>> p.word_count
        3
    """
    require_valid_config(config)
    require_valid_dictionary(dictionary)
    rng = rng if rng is not None else default_random()

    for _ in range(max_attempts):
        word_count = choose_word_count(config, rng)
        words = tuple(sample_word(dictionary, rng) for _ in range(word_count))
        passphrase = Passphrase(words=words, separator=config.separator)

        if _within_length(config, passphrase):
            debug.validate(
                config.min_words <= passphrase.word_count <= config.max_words,
                "word count outside configured range",
            )
            return passphrase

    debug.print(f"Length range {config.length_range} not met after {max_attempts} attempts", "WARN")
    raise LengthConstraintError(
        length_range=config.length_range,
        word_range=config.word_count_range,
        attempts=max_attempts,
        dictionary_size=len(dictionary),
    )


@debug.time
def generate_passphrases(
    config: GenerationConfig,
    dictionary: Dictionary,
    rng: RandomSource | None = None,
) -> list[Passphrase]:
    """
    Generate ``config.passphrase_count`` passphrases.

    Words are drawn independently with replacement, so a word may repeat
    within one passphrase. With a seeded RandomSource the output is
    reproducible.

    Args:
        config: Generation settings
        dictionary: Words to draw from
        rng: Random source, defaults to the OS CSPRNG

    Returns:
        Passphrases in generation order (empty if passphrase_count is 0)

    Raises:
        InvalidRangeError: If the settings are invalid
        EmptyDictionaryError: If the dictionary is empty and output is requested
        LengthConstraintError: If no draw fits the length range
    """
    require_valid_config(config)

    if config.passphrase_count == 0:
        return []
    require_valid_dictionary(dictionary)

    rng = rng if rng is not None else default_random()
    debug.print(
        f"Generating {config.passphrase_count} passphrase(s): "
        f"words={config.word_count_range}, length={config.length_range}, "
        f"dictionary={len(dictionary):,} words"
    )

    passphrases = [
        generate_passphrase(config, dictionary, rng)
        for _ in range(config.passphrase_count)
    ]
    debug.print(f"Generated {len(passphrases)} passphrase(s)")
    return passphrases


class PassphraseGenerator:
    """
    Generator bound to one dictionary and random source.

    Example:
        >>> generator = PassphraseGenerator(load_dictionary())
        >>> [p.text for p in generator.generate(GenerationConfig(passphrase_count=2))]
        ['...', '...']
    """

    def __init__(self, dictionary: Dictionary, rng: RandomSource | None = None):
        self.dictionary = dictionary
        self.rng = rng if rng is not None else default_random()

    def generate(self, config: GenerationConfig) -> list[Passphrase]:
        return generate_passphrases(config, self.dictionary, self.rng)

    def generate_one(self, config: GenerationConfig) -> Passphrase:
        return generate_passphrase(config, self.dictionary, self.rng)
