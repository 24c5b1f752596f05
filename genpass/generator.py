"""
Password generation and strength scoring.

Both functions are pure: the generator only consumes entropy from the random
source it is handed, and the scorer is a fixed classification.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

from .config import LETTERS, NUMBERS, SYMBOLS


@dataclass(frozen=True)
class CategoryCounts:
    """How many characters of each category go into a password."""

    letters: int = 0
    uppercase: int = 0
    symbols: int = 0
    numbers: int = 0

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.letters, self.uppercase, self.symbols, self.numbers)


class Strength(Enum):
    STRONG = "Strong"
    MODERATE = "Moderate"
    WEAK = "Weak"
    DO_NOT_USE = "Do not use"

    @property
    def label(self) -> str:
        return self.value

    @property
    def ratio(self) -> float:
        """Fill level of the strength gauge."""
        return _GAUGE_RATIOS[self]


_GAUGE_RATIOS = {
    Strength.STRONG: 1.0,
    Strength.MODERATE: 0.6,
    Strength.WEAK: 0.3,
    Strength.DO_NOT_USE: 0.0,
}


def generate_password(
    counts: CategoryCounts,
    rng: random.Random | None = None,
) -> str:
    """
    Build a password with exactly the requested number of characters per
    category, then shuffle it.

    - `letters` draws from a-z.
    - `uppercase` also draws from a-z and upper-cases each pick.
    - `symbols` draws from SYMBOLS, `numbers` from 0-9.

    `rng` may be any random.Random-compatible source; the same source is
    used for the picks and the final shuffle.
    """
    rng = rng or random.SystemRandom()

    chars: list[str] = []
    chars.extend(rng.choice(LETTERS) for _ in range(counts.letters))
    chars.extend(rng.choice(LETTERS).upper() for _ in range(counts.uppercase))
    chars.extend(rng.choice(SYMBOLS) for _ in range(counts.symbols))
    chars.extend(rng.choice(NUMBERS) for _ in range(counts.numbers))

    rng.shuffle(chars)
    return "".join(chars)


def _is_ascii_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def _is_ascii_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def check_password_strength(password: str) -> Strength:
    """
    Count how many of five criteria the password meets:
    length >= 10, an uppercase letter, a lowercase letter, a digit and a
    symbol from SYMBOLS.
    """
    criteria = [
        len(password) >= 10,
        any(_is_ascii_upper(ch) for ch in password),
        any(_is_ascii_lower(ch) for ch in password),
        any(_is_ascii_digit(ch) for ch in password),
        any(ch in SYMBOLS for ch in password),
    ]
    met = sum(criteria)

    if met == 5:
        return Strength.STRONG
    if met >= 4:
        return Strength.MODERATE
    if met >= 3:
        return Strength.WEAK
    return Strength.DO_NOT_USE


score_strength = check_password_strength
