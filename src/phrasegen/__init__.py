"""
Phrasegen - Memorable Passphrase Generator

A Python library for generating passphrases from a word list with a
cryptographically secure random source, and for estimating their strength.

Basic Usage:
    from phrasegen import GenerationConfig, load_dictionary, generate_passphrases, analyze

    dictionary = load_dictionary()          # embedded default list
    config = GenerationConfig(min_words=3, max_words=5, passphrase_count=3)

    for passphrase in generate_passphrases(config, dictionary):
        report = analyze(passphrase, len(dictionary))
        print(passphrase.text, report.known_method, "bits")

Length Bounds:
    # Redraws until the passphrase is 16-24 characters long
    config = GenerationConfig(min_len=16, max_len=24)
    generate_passphrases(config, dictionary)

Custom Dictionaries:
    dictionary = load_dictionary("my_words.txt")   # one word per line
    dictionary = load_bip39_dictionary()            # 2048 BIP-39 words
    print(dictionary_stats(dictionary).bits_per_word)

Reproducible Output (tests only):
    from phrasegen import SeededRandom
    generate_passphrases(config, dictionary, rng=SeededRandom(42))

Debugging:
    from phrasegen.debug import debug
    debug.enable(True)  # Enable debug output
"""

from .constants import __version__, MAX_LENGTH_ATTEMPTS
from .models import (
    GenerationConfig,
    Passphrase,
    DictionaryStats,
    EntropyReport,
    ValidationResult,
)
from .exceptions import (
    PhrasegenError,
    ValidationError,
    DictionaryError,
    DictionaryLoadError,
    MalformedEntryError,
    SamplingError,
    GenerationError,
    EmptyDictionaryError,
    InvalidRangeError,
    LengthConstraintError,
    ClipboardError,
)
from .random_source import (
    RandomSource,
    SecureRandom,
    SeededRandom,
)
from .dictionary import (
    Dictionary,
    parse_words,
    load_dictionary,
    load_bip39_dictionary,
    dictionary_stats,
    dump,
)
from .sampler import (
    sample_word,
    WordSampler,
)
from .generator import (
    choose_word_count,
    generate_passphrase,
    generate_passphrases,
    PassphraseGenerator,
)
from .entropy import (
    analyze,
    known_method_entropy,
    brute_force_entropy,
)
from .validation import (
    validate_config,
    validate_dictionary,
    require_valid_config,
    require_valid_dictionary,
)
from .debug import debug  # Import debug utilities

__all__ = [
    # Version
    '__version__',
    'MAX_LENGTH_ATTEMPTS',

    # Models
    'GenerationConfig',
    'Passphrase',
    'DictionaryStats',
    'EntropyReport',
    'ValidationResult',

    # Exceptions
    'PhrasegenError',
    'ValidationError',
    'DictionaryError',
    'DictionaryLoadError',
    'MalformedEntryError',
    'SamplingError',
    'GenerationError',
    'EmptyDictionaryError',
    'InvalidRangeError',
    'LengthConstraintError',
    'ClipboardError',

    # Random sources
    'RandomSource',
    'SecureRandom',
    'SeededRandom',

    # Dictionary
    'Dictionary',
    'parse_words',
    'load_dictionary',
    'load_bip39_dictionary',
    'dictionary_stats',
    'dump',

    # Sampling and generation
    'sample_word',
    'WordSampler',
    'choose_word_count',
    'generate_passphrase',
    'generate_passphrases',
    'PassphraseGenerator',

    # Entropy
    'analyze',
    'known_method_entropy',
    'brute_force_entropy',

    # Validation
    'validate_config',
    'validate_dictionary',
    'require_valid_config',
    'require_valid_dictionary',

    # Debugging
    'debug',
]
