"""
Phrasegen Clipboard Integration

Copy text to the system clipboard through the platform's command-line tool.
"""

import platform
import shutil
import subprocess
from typing import Protocol

from .debug import debug
from .exceptions import ClipboardError

# Tried in order; the first one found on PATH wins
CLIPBOARD_COMMANDS = {
    "darwin": [["pbcopy"]],
    "windows": [["clip"]],
    "linux": [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ],
}


class Clipboard(Protocol):
    def copy(self, text: str) -> None:
        ...


def find_clipboard_command(system: str | None = None) -> list[str] | None:
    """Return the first available clipboard command for this platform."""
    system = (system or platform.system()).lower()
    for command in CLIPBOARD_COMMANDS.get(system, CLIPBOARD_COMMANDS["linux"]):
        if shutil.which(command[0]):
            return command
    return None


class SystemClipboard:
    """Clipboard backed by pbcopy / wl-copy / xclip / xsel / clip."""

    def __init__(self, command: list[str] | None = None, timeout: float = 5):
        self.command = command
        self.timeout = timeout

    def copy(self, text: str) -> None:
        command = self.command or find_clipboard_command()
        if command is None:
            raise ClipboardError(
                "No clipboard tool found (install xclip, xsel or wl-clipboard)"
            )

        debug.print(f"Copying {len(text)} characters with {command[0]}")
        try:
            result = subprocess.run(
                command,
                input=text,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            debug.exception(e, "clipboard copy")
            raise ClipboardError(f"Clipboard copy failed: {e}") from e

        if result.returncode != 0:
            message = result.stderr.strip() or f"exit status {result.returncode}"
            raise ClipboardError(f"{command[0]} failed: {message}")
