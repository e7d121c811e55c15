"""
Phrasegen Constants and Configuration

Central location for defaults, limits, and entropy parameters.
All version numbers, limits, and configuration values should be defined here.
"""

from pathlib import Path

# ============================================================================
# VERSION
# ============================================================================

__version__ = "1.0.0"

# ============================================================================
# GENERATION DEFAULTS
# ============================================================================

DEFAULT_PASSPHRASE_COUNT = 1

# Word count range
DEFAULT_MIN_WORDS = 3
DEFAULT_MAX_WORDS = 3

# Length range (0 disables the bound check, see generator.py)
DEFAULT_MIN_LENGTH = 0
DEFAULT_MAX_LENGTH = 32

# No separator is the canonical form
DEFAULT_SEPARATOR = ""

# Hard ceiling on retries while satisfying the length range
MAX_LENGTH_ATTEMPTS = 10_000

# ============================================================================
# ENTROPY
# ============================================================================

# Brute-force charset sizes
CHARSET_LOWERCASE = 26
CHARSET_MIXED_CASE = 52
CHARSET_ALPHANUMERIC = 62
CHARSET_SYMBOLS = 82  # alphanumeric + 20 common symbols

BRUTE_FORCE_CHARSETS = {
    "lowercase": CHARSET_LOWERCASE,
    "mixed_case": CHARSET_MIXED_CASE,
    "alphanumeric": CHARSET_ALPHANUMERIC,
    "symbols": CHARSET_SYMBOLS,
}

# ============================================================================
# DICTIONARY
# ============================================================================

# Separates header/license text from entries in the embedded word list
HEADER_MARKER = "---"

BUILTIN_SOURCE = "builtin"
BIP39_SOURCE = "bip39"

BIP39_LANGUAGE = "english"
BIP39_WORD_COUNT = 2048

# ============================================================================
# ENVIRONMENT / CONFIG
# ============================================================================

DICT_ENV_VAR = "PHRASEGEN_DICT"
DEBUG_ENV_VAR = "PHRASEGEN_DEBUG"

# Dictionary override locations (in priority order, after env var)
CONFIG_DICT_LOCATIONS = [
    Path("./config/words.txt"),  # Project config
    Path.home() / ".phrasegen" / "words.txt",  # User config
]

# ============================================================================
# DATA FILES
# ============================================================================

def get_data_dir() -> Path:
    """Get the packaged data directory path."""
    return Path(__file__).parent / "data"


def get_builtin_wordlist_path() -> Path:
    """Path of the embedded default word list."""
    return get_data_dir() / "words.txt"
