"""
GenPass: terminal password generator with per-category character counts.
"""

from .config import GenPassConfig, DEFAULT_CONFIG
from .generator import (
    CategoryCounts,
    Strength,
    check_password_strength,
    generate_password,
    score_strength,
)
from .app import Controller, Focus, KeyEvent, SessionState, transition

__all__ = [
    "GenPassConfig",
    "DEFAULT_CONFIG",
    "CategoryCounts",
    "Strength",
    "check_password_strength",
    "generate_password",
    "score_strength",
    "Controller",
    "Focus",
    "KeyEvent",
    "SessionState",
    "transition",
]
