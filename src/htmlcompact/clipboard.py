"""Copy text to the system clipboard through the platform's clipboard command."""

import logging
import shutil
import subprocess
import sys
from typing import Optional

logger = logging.getLogger(__name__)

# Candidate commands per platform, tried in order
CLIPBOARD_COMMANDS: dict[str, list[list[str]]] = {
    "darwin": [["pbcopy"]],
    "win32": [["clip"]],
    "linux": [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ],
}


def find_clipboard_command(platform: Optional[str] = None) -> Optional[list[str]]:
    """
    Find an installed clipboard command for the platform.

    Args:
        platform: sys.platform value (defaults to the running platform)

    Returns:
        Command argv list, or None if no clipboard tool is installed
    """
    platform = platform or sys.platform
    key = "linux" if platform.startswith(("linux", "freebsd", "openbsd")) else platform
    for command in CLIPBOARD_COMMANDS.get(key, []):
        if shutil.which(command[0]):
            return command
    return None


def write_clipboard(text: str, command: Optional[list[str]] = None) -> None:
    """
    Copy text to the clipboard.

    Args:
        text: Text to copy
        command: Clipboard command to use (auto-detected if None)

    Raises:
        RuntimeError: If no clipboard command is available or it fails
    """
    command = command or find_clipboard_command()
    if command is None:
        raise RuntimeError(
            "No clipboard command found (install pbcopy, wl-copy, xclip or xsel, or use --output/--stdout)"
        )

    logger.debug(f"Copying {len(text)} characters with {command[0]}")
    try:
        subprocess.run(command, input=text, text=True, check=True)
    except (OSError, subprocess.CalledProcessError) as e:
        raise RuntimeError(f"Clipboard command '{command[0]}' failed: {e}") from e
