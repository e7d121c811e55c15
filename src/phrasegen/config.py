"""
Phrasegen Runtime Configuration

Resolve settings that come from the environment rather than the command line.

Dictionary override priority:
1. Explicit path (``--dict``)
2. Environment variable: PHRASEGEN_DICT
3. Config file: ./config/words.txt or ~/.phrasegen/words.txt
4. None (embedded default list)
"""

import os
from pathlib import Path

from .constants import CONFIG_DICT_LOCATIONS, DEBUG_ENV_VAR, DICT_ENV_VAR
from .debug import debug

_TRUTHY = {"1", "true", "yes", "on"}


def resolve_dictionary_path(explicit: str | Path | None = None) -> Path | None:
    """
    Find the dictionary override to use, if any.

    An environment path is returned even if it does not exist, so the loader
    reports the bad path instead of quietly using the default list.

    Returns:
        Override path, or None for the embedded default

    Example:
        >>> resolve_dictionary_path("my_words.txt")
        PosixPath('my_words.txt')
    """
    # 1. Explicit
    if explicit is not None:
        return Path(explicit)

    # 2. Environment variable
    env_path = os.environ.get(DICT_ENV_VAR, "").strip()
    if env_path:
        debug.print(f"Dictionary from {DICT_ENV_VAR}: {env_path}")
        return Path(env_path).expanduser()

    # 3. Config files
    for config_path in CONFIG_DICT_LOCATIONS:
        if config_path.is_file():
            debug.print(f"Dictionary from {config_path}")
            return config_path

    # 4. Embedded default
    return None


def debug_from_env() -> bool:
    """Whether PHRASEGEN_DEBUG asks for debug tracing."""
    return os.environ.get(DEBUG_ENV_VAR, "").strip().lower() in _TRUTHY
