"""
Configuration for the GenPass terminal password generator.
"""

from dataclasses import dataclass

# Character pools. Uppercase characters are drawn from LETTERS and upper-cased.
LETTERS = "abcdefghijklmnopqrstuvwxyz"
NUMBERS = "0123456789"
SYMBOLS = "!#$%&()*+"

MIN_VALUE = 0
MAX_VALUE = 64


@dataclass
class GenPassConfig:
    # Initial category counts shown when the session starts.
    letters: int = 6
    uppercase: int = 2
    symbols: int = 2
    numbers: int = 4

    # Bounds every count is clamped to after an adjustment.
    min_value: int = MIN_VALUE
    max_value: int = MAX_VALUE

    # How long (seconds) a clipboard status message stays visible.
    status_duration: float = 2.0

    # Input poll timeout (seconds) for the main loop.
    poll_interval: float = 0.05

    # "system" (OS entropy pool) or "quantum" (simulated qubits).
    entropy_source: str = "system"

    # Quantum source only: qubits per circuit run and SHA-256 mixing rounds.
    # NOTE: Keep num_qubits <= backend limit (often 20-29 for local simulators).
    num_qubits: int = 20
    entropy_rounds: int = 2

    def clamp(self, value: int) -> int:
        return max(self.min_value, min(self.max_value, value))


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = GenPassConfig()
