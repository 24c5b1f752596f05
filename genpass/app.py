"""
Interactive session: state, key handling and side effects.

`transition()` is a pure function from (state, key event) to a new state
plus the effects it requests. `Controller` owns the live state, runs the
transition and carries out the effects (generate, copy, quit).
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Callable, Optional

from .clipboard import Clipboard, default_clipboard
from .config import GenPassConfig, DEFAULT_CONFIG
from .generator import (
    CategoryCounts,
    Strength,
    check_password_strength,
    generate_password,
)
from .randomness import make_random_source

logger = logging.getLogger(__name__)

COPIED_MESSAGE = "Copied to clipboard."
UNAVAILABLE_MESSAGE = "Clipboard unavailable."


class Focus(IntEnum):
    LETTERS = 0
    UPPERCASE = 1
    SYMBOLS = 2
    NUMBERS = 3
    GENERATE = 4
    COPY = 5
    QUIT = 6

    @property
    def is_field(self) -> bool:
        return self < Focus.GENERATE


FIELD_NAMES = {
    Focus.LETTERS: "letters",
    Focus.UPPERCASE: "uppercase",
    Focus.SYMBOLS: "symbols",
    Focus.NUMBERS: "numbers",
}


class KeyKind(Enum):
    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    """
    A decoded key press.

    `key` is either a single character ("q", "+", ...) or one of the named
    keys "up", "down", "left", "right", "enter", "escape", "backspace".
    """

    key: str
    ctrl: bool = False
    kind: KeyKind = KeyKind.PRESS


class Effect(Enum):
    REGENERATE = "regenerate"
    COPY = "copy"
    QUIT = "quit"


@dataclass
class SessionState:
    counts: CategoryCounts
    focus: Focus = Focus.LETTERS
    password: str = ""
    strength: Strength = Strength.DO_NOT_USE
    status: str = ""
    status_until: Optional[float] = None


@dataclass(frozen=True)
class Transition:
    state: SessionState
    effects: tuple[Effect, ...] = ()


QUIT_KEYS = {"q", "escape"}
UP_KEYS = {"up", "k"}
DOWN_KEYS = {"down", "j"}
DECREMENT_KEYS = {"left", "-", "h"}
INCREMENT_KEYS = {"right", "+", "=", "l"}
CONFIRM_KEYS = {"g", "enter"}
COPY_KEYS = {"c", "C"}


def _adjust(state: SessionState, delta: int, config: GenPassConfig) -> SessionState:
    if not state.focus.is_field:
        return state
    name = FIELD_NAMES[state.focus]
    value = config.clamp(getattr(state.counts, name) + delta)
    return replace(state, counts=replace(state.counts, **{name: value}))


def transition(
    state: SessionState,
    event: KeyEvent,
    config: GenPassConfig | None = None,
) -> Transition:
    """Apply one key event. Never mutates `state`."""
    cfg = config or DEFAULT_CONFIG

    if event.kind is not KeyKind.PRESS:
        return Transition(state)

    key = event.key

    # Modifiers only matter for ctrl+r; ctrl+<other> acts like the bare key.
    if event.ctrl and key.lower() == "r":
        return Transition(state, (Effect.REGENERATE,))

    if key in QUIT_KEYS:
        return Transition(state, (Effect.QUIT,))
    if key in UP_KEYS:
        return Transition(replace(state, focus=Focus(max(state.focus - 1, Focus.LETTERS))))
    if key in DOWN_KEYS:
        return Transition(replace(state, focus=Focus(min(state.focus + 1, Focus.QUIT))))
    if key in DECREMENT_KEYS:
        return Transition(_adjust(state, -1, cfg))
    if key in INCREMENT_KEYS:
        return Transition(_adjust(state, 1, cfg))
    if key in CONFIRM_KEYS:
        if state.focus is Focus.COPY:
            return Transition(state, (Effect.COPY,))
        if state.focus is Focus.QUIT:
            return Transition(state, (Effect.QUIT,))
        return Transition(state, (Effect.REGENERATE,))
    if key in COPY_KEYS:
        return Transition(state, (Effect.COPY,))

    return Transition(state)


class Controller:
    """
    Owns the session state for the lifetime of the process.

    The renderer reads `controller.state`; only `handle()`,
    `regenerate()`, `copy_password()` and `clear_expired_status()` change it.
    """

    def __init__(
        self,
        config: GenPassConfig | None = None,
        rng: random.Random | None = None,
        clipboard: Clipboard | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.rng = rng or make_random_source(self.config)
        self.clipboard = clipboard or default_clipboard()
        self.clock = clock
        self.running = True

        counts = CategoryCounts(
            letters=self.config.clamp(self.config.letters),
            uppercase=self.config.clamp(self.config.uppercase),
            symbols=self.config.clamp(self.config.symbols),
            numbers=self.config.clamp(self.config.numbers),
        )
        self.state = SessionState(counts=counts)
        self.regenerate()

    # -- effects --

    def regenerate(self) -> None:
        password = generate_password(self.state.counts, self.rng)
        strength = check_password_strength(password)
        self.state = replace(self.state, password=password, strength=strength)
        logger.debug(
            "Generated password: length=%d strength=%s",
            len(password),
            strength.label,
        )

    def copy_password(self) -> bool:
        ok = self.clipboard.copy(self.state.password)
        message = COPIED_MESSAGE if ok else UNAVAILABLE_MESSAGE
        self.state = replace(
            self.state,
            status=message,
            status_until=self.clock() + self.config.status_duration,
        )
        logger.info("Clipboard copy %s", "succeeded" if ok else "failed")
        return ok

    def clear_expired_status(self) -> bool:
        """Drop the status message once its expiry has passed. Returns True if cleared."""
        deadline = self.state.status_until
        if deadline is None or self.clock() < deadline:
            return False
        self.state = replace(self.state, status="", status_until=None)
        return True

    # -- input --

    def handle(self, event: KeyEvent) -> bool:
        """
        Run one event through `transition()` and apply its effects.
        Returns True when anything visible changed.
        """
        result = transition(self.state, event, self.config)
        changed = result.state != self.state
        self.state = result.state

        for effect in result.effects:
            if effect is Effect.QUIT:
                self.running = False
            elif effect is Effect.REGENERATE:
                self.regenerate()
                changed = True
            elif effect is Effect.COPY:
                self.copy_password()
                changed = True

        return changed
