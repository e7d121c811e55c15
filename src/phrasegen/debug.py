"""
Phrasegen Debugging Utilities

Tracing and timing on stderr, switched on by --debug or PHRASEGEN_DEBUG.
Off by default; the core never prints anything else.
"""

import sys
import time
import traceback
from collections.abc import Callable, Iterable
from datetime import datetime
from functools import wraps
from typing import Any

# Global tracing switch
DEBUG_ENABLED = False


def enable_debug(enable: bool = True) -> None:
    """Turn stderr tracing on or off for the whole process."""
    global DEBUG_ENABLED
    DEBUG_ENABLED = enable


def debug_print(message: str, level: str = "INFO") -> None:
    """Write a timestamped trace line to stderr when tracing is on."""
    if DEBUG_ENABLED and message:
        stamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
        print(f"[{stamp}] [{level}] {message}", file=sys.stderr)


def debug_words(words: Iterable[str], label: str = "Words", max_items: int = 8) -> str:
    """Preview a word sequence, never the full list."""
    if not DEBUG_ENABLED:
        return ""

    words = list(words)
    if not words:
        return f"{label}: Empty"

    if len(words) <= max_items:
        return f"{label} ({len(words)}): {', '.join(words)}"
    half = max_items // 2
    return f"{label} ({len(words)}): {', '.join(words[:half])} ... {', '.join(words[-half:])}"


def debug_exception(e: Exception, context: str = "") -> None:
    """Trace an exception and its traceback before it is re-raised."""
    if DEBUG_ENABLED:
        debug_print(f"{type(e).__name__} while {context}: {e}", "ERROR")
        traceback.print_exc()


def time_function(func: Callable) -> Callable:
    """Decorator: trace how long ``func`` took, only while tracing is on."""

    @wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        if not DEBUG_ENABLED:
            return func(*args, **kwargs)

        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            debug_print(f"{func.__name__} took {time.perf_counter() - start:.6f}s", "PERF")

    return wrapper


def validate_assertion(condition: bool, message: str) -> None:
    """Internal invariant check; raises AssertionError when violated."""
    if not condition:
        raise AssertionError(f"Validation failed: {message}")


class Debug:
    """Namespace over the module functions, used as ``debug.print(...)``."""

    def print(self, message: str, level: str = "INFO") -> None:
        debug_print(message, level)

    def words(self, words: Iterable[str], label: str = "Words", max_items: int = 8) -> str:
        return debug_words(words, label, max_items)

    def exception(self, e: Exception, context: str = "") -> None:
        debug_exception(e, context)

    def time(self, func: Callable) -> Callable:
        return time_function(func)

    def validate(self, condition: bool, message: str) -> None:
        validate_assertion(condition, message)

    def enable(self, enable: bool = True) -> None:
        enable_debug(enable)


# Create singleton instance
debug = Debug()
