"""
Curses front end.

Draws the session state every frame, decodes key presses into KeyEvents and
feeds them to the Controller. Nothing here changes state directly.
"""

from __future__ import annotations

import curses
import locale
import logging
import textwrap
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from .app import Controller, Focus, KeyEvent, SessionState
from .config import GenPassConfig, DEFAULT_CONFIG
from .generator import Strength

logger = logging.getLogger(__name__)

TITLE = "GenPass"
HELP_TEXT = "  Use arrows (h, j, k, l) or +/- to adjust. Enter to generate."
FIELD_LABELS = ("Letters", "Uppercase", "Symbols", "Numbers")
ACTION_LABELS = ("Generate", "Copy to clipboard", "Quit")

ESCAPE = 27
ESCDELAY_MS = 25

NAMED_KEYS = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_ENTER: "enter",
    10: "enter",
    13: "enter",
    ESCAPE: "escape",
    # Backspace arrives as 8 or 127 depending on the terminal.
    curses.KEY_BACKSPACE: "backspace",
    8: "backspace",
    127: "backspace",
}

# Box drawing
BOX_TL, BOX_TR, BOX_BL, BOX_BR = "┌", "┐", "└", "┘"
BOX_H, BOX_V = "─", "│"
GAUGE_FULL = "█"


class TerminalSetupError(RuntimeError):
    """The terminal could not be put into interactive mode."""


# ---------- input ----------

def decode_key(code: int) -> Optional[KeyEvent]:
    """Translate a curses key code into a KeyEvent, or None for timeouts and unknown keys."""
    if code == -1:
        return None
    if code in NAMED_KEYS:
        return KeyEvent(NAMED_KEYS[code])
    if 1 <= code <= 26:
        # ctrl+a .. ctrl+z
        return KeyEvent(chr(code + ord("a") - 1), ctrl=True)
    if 32 <= code <= 126:
        return KeyEvent(chr(code))
    return None


def poll_input(window, timeout: float) -> Optional[KeyEvent]:
    """
    Wait at most `timeout` seconds for a key.

    Alt+key arrives as ESC followed at once by the key. It is reported as the
    bare key, so only a lone ESC counts as Escape.
    """
    window.timeout(max(0, int(timeout * 1000)))
    code = window.getch()
    if code == ESCAPE:
        window.timeout(0)
        follower = window.getch()
        if follower != -1:
            return decode_key(follower)
    return decode_key(code)


# ---------- drawing ----------

@dataclass
class Palette:
    """Curses attributes per role. The default is plain text everywhere."""

    focus: int = 0
    dim: int = 0
    bold: int = 0
    status: int = 0
    strength: Dict[Strength, int] = field(default_factory=dict)

    def for_strength(self, strength: Strength) -> int:
        return self.strength.get(strength, self.dim)

    @classmethod
    def from_terminal(cls) -> "Palette":
        if not curses.has_colors():
            return cls(focus=curses.A_BOLD | curses.A_REVERSE, bold=curses.A_BOLD)

        curses.start_color()
        try:
            curses.use_default_colors()
            background = -1
        except curses.error:
            background = curses.COLOR_BLACK

        curses.init_pair(1, curses.COLOR_YELLOW, background)
        curses.init_pair(2, curses.COLOR_GREEN, background)
        curses.init_pair(3, curses.COLOR_RED, background)
        curses.init_pair(4, curses.COLOR_MAGENTA, background)
        curses.init_pair(5, curses.COLOR_WHITE, background)

        yellow = curses.color_pair(1)
        return cls(
            focus=yellow | curses.A_BOLD,
            dim=curses.color_pair(5) | curses.A_DIM,
            bold=curses.A_BOLD,
            status=curses.color_pair(4),
            strength={
                Strength.STRONG: curses.color_pair(2),
                Strength.MODERATE: yellow,
                Strength.WEAK: curses.color_pair(3),
            },
        )


def _put(window, y: int, x: int, text: str, attr: int = 0) -> None:
    """addstr clipped to the window; text that does not fit is dropped."""
    height, width = window.getmaxyx()
    if y < 0 or y >= height or x < 0 or x >= width:
        return
    text = text[: width - x]
    if not text:
        return
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        # Writing the bottom-right cell moves the cursor off-screen.
        pass


def _box(window, y: int, x: int, height: int, width: int, title: str = "") -> None:
    if height < 2 or width < 2:
        return
    _put(window, y, x, BOX_TL + BOX_H * (width - 2) + BOX_TR)
    for row in range(y + 1, y + height - 1):
        _put(window, row, x, BOX_V)
        _put(window, row, x + width - 1, BOX_V)
    _put(window, y + height - 1, x, BOX_BL + BOX_H * (width - 2) + BOX_BR)
    if title:
        _put(window, y, x + 1, title[: max(0, width - 2)])


def _gauge_line(ratio: float, width: int) -> str:
    label = f" {int(round(ratio * 100))}%"
    bar_width = max(0, width - len(label))
    filled = int(round(bar_width * ratio))
    return GAUGE_FULL * filled + " " * (bar_width - filled) + label


def render(window, state: SessionState, palette: Palette | None = None) -> None:
    """Paint one full frame for `state`."""
    palette = palette or Palette()
    window.erase()
    height, width = window.getmaxyx()

    _box(window, 0, 0, height, width, TITLE)

    top, left = 1, 2
    inner_width = max(0, width - 4)
    bottom = height - 1
    y = top

    # Header
    _put(window, y, left, "Password Generator", palette.bold)
    _put(window, y, left + len("Password Generator"), HELP_TEXT)
    y += 3

    # Fields
    for index, (label, value) in enumerate(zip(FIELD_LABELS, state.counts.as_tuple())):
        active = state.focus == index
        _put(window, y + index, left, f"{label:<10}", palette.focus if active else 0)
        _put(
            window,
            y + index,
            left + 12,
            f"{value:>3}",
            palette.focus if active else palette.dim,
        )
    y += 7

    # Actions
    _box(window, y, left, 5, inner_width, "Actions")
    for index, label in enumerate(ACTION_LABELS):
        active = state.focus == Focus.GENERATE + index
        _put(
            window,
            y + 1 + index,
            left + 2,
            f"> {label}",
            palette.focus if active else palette.dim,
        )
    y += 5

    # Output: title, wrapped password, strength line
    strength_attr = palette.for_strength(state.strength)
    text_width = max(1, inner_width - 4)
    password_lines = textwrap.wrap(state.password, text_width) or [""]
    room = max(1, bottom - y - 8)
    password_lines = password_lines[:room]
    out_height = len(password_lines) + 4
    _box(window, y, left, out_height, inner_width, "Output")
    _put(window, y + 1, left + 2, "Generated Password", palette.bold)
    for offset, line in enumerate(password_lines):
        _put(window, y + 2 + offset, left + 2, line)
    _put(
        window,
        y + 2 + len(password_lines),
        left + 2,
        f"Strength: {state.strength.label}",
        strength_attr,
    )
    y += out_height

    # Strength gauge
    _box(window, y, left, 3, inner_width, "Strength")
    _put(
        window,
        y + 1,
        left + 1,
        _gauge_line(state.strength.ratio, max(0, inner_width - 2)),
        strength_attr,
    )

    if state.status:
        _put(window, bottom - 1, left, state.status, palette.status)

    window.refresh()


# ---------- main loop ----------

def loop(
    window,
    controller: Controller,
    palette: Palette | None = None,
    poll: Callable[[object, float], Optional[KeyEvent]] = poll_input,
) -> None:
    """
    Render, expire the status message, wait briefly for a key, apply it.
    Runs until the controller stops.
    """
    palette = palette or Palette()
    while controller.running:
        render(window, controller.state, palette)
        controller.clear_expired_status()

        event = poll(window, controller.config.poll_interval)
        if event is None:
            continue
        if controller.handle(event) and controller.running:
            render(window, controller.state, palette)


def _session(stdscr, controller: Controller) -> None:
    curses.raw()
    try:
        curses.curs_set(0)
    except curses.error:
        # Terminal cannot hide the cursor.
        pass
    if hasattr(curses, "set_escdelay"):
        curses.set_escdelay(ESCDELAY_MS)
    stdscr.keypad(True)

    loop(stdscr, controller, Palette.from_terminal())


def run(config: GenPassConfig | None = None, controller: Controller | None = None) -> None:
    """
    Run the interactive session. curses.wrapper restores the terminal on
    both normal exit and errors.
    """
    cfg = config or DEFAULT_CONFIG
    controller = controller or Controller(cfg)

    locale.setlocale(locale.LC_ALL, "")
    try:
        curses.wrapper(_session, controller)
    except curses.error as exc:
        logger.error("Terminal setup failed: %s", exc)
        raise TerminalSetupError(f"Could not initialise the terminal: {exc}") from exc
