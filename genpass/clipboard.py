"""
Clipboard access.

One capability, `copy(text) -> bool`, with an implementation per platform
family and a no-op fallback. The implementation is picked once at startup by
`default_clipboard()`; callers only ever see the bool.
"""

from __future__ import annotations

import logging
import subprocess
import sys

import pyperclip

logger = logging.getLogger(__name__)


class Clipboard:
    """Base clipboard: copying is never possible."""

    name = "none"

    def copy(self, text: str) -> bool:
        return False


class NullClipboard(Clipboard):
    def copy(self, text: str) -> bool:
        logger.warning("No clipboard mechanism on platform %s", sys.platform)
        return False


class WlCopyClipboard(Clipboard):
    """
    Pipe the text into `wl-copy` (wl-clipboard).

    Returns False when the binary is missing, the pipe breaks or the
    process exits with a non-zero status.
    """

    name = "wl-copy"

    def __init__(self, command: str = "wl-copy") -> None:
        self.command = command

    def copy(self, text: str) -> bool:
        try:
            proc = subprocess.run(
                [self.command],
                input=text.encode("utf-8"),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except OSError as exc:
            logger.warning("Could not run %s: %s", self.command, exc)
            return False

        if proc.returncode != 0:
            logger.warning("%s exited with status %d", self.command, proc.returncode)
            return False
        return True


class PyperclipClipboard(Clipboard):
    """Native clipboard API through pyperclip (Windows, macOS)."""

    name = "pyperclip"

    def copy(self, text: str) -> bool:
        try:
            pyperclip.copy(text)
        except (pyperclip.PyperclipException, OSError) as exc:
            # Windows clipboard can be temporarily locked by other apps
            logger.warning("Clipboard copy failed: %s", exc)
            return False
        return True


def default_clipboard(platform: str | None = None) -> Clipboard:
    """Pick the clipboard implementation for `platform` (default: sys.platform)."""
    platform = platform or sys.platform

    if platform.startswith("linux") or "bsd" in platform:
        clipboard: Clipboard = WlCopyClipboard()
    elif platform in ("win32", "cygwin", "darwin"):
        clipboard = PyperclipClipboard()
    else:
        clipboard = NullClipboard()

    logger.debug("Clipboard backend: %s", clipboard.name)
    return clipboard
