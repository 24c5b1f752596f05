"""
Random sources the generator can draw from.

Anything with the random.Random interface works. Two are provided:

- "system": random.SystemRandom, backed by the OS entropy pool.
- "quantum": QuantumRandom, backed by simulated qubit measurements that are
  mixed through SHA-256 before use.
"""

from __future__ import annotations

import logging
import random
from typing import List, Protocol

from .config import GenPassConfig, DEFAULT_CONFIG
from .entropy import EntropyPool, bits_to_int

logger = logging.getLogger(__name__)

ENTROPY_SOURCES = ("system", "quantum")

_BPF = 53  # bits in a float mantissa
_RECIP_BPF = 2.0 ** -_BPF


class BitSource(Protocol):
    def get_raw_bits(self) -> List[int]: ...


class QuantumRandom(random.Random):
    """
    random.Random driven by a quantum bit source.

    Engine runs are pooled until a full batch of raw bits is collected,
    then mixed with `entropy_rounds` of SHA-256 and buffered; getrandbits()
    consumes the buffer and refills it on demand.
    Like SystemRandom, it cannot be seeded or have its state saved.
    """

    def __init__(
        self,
        engine: BitSource | None = None,
        config: GenPassConfig | None = None,
    ) -> None:
        cfg = config or DEFAULT_CONFIG
        if engine is None:
            from .quantum_engine import QuantumEngine  # pulls in qiskit

            engine = QuantumEngine(cfg)
        self._engine = engine
        self._rounds = cfg.entropy_rounds
        self._buffer: List[int] = []
        self._pos = 0
        super().__init__()

    def _refill(self) -> None:
        pool = EntropyPool(self._rounds)
        while not pool.ready:
            bits = self._engine.get_raw_bits()
            if not bits:
                raise RuntimeError("Quantum engine returned no bits.")
            pool.add(bits)
        self._buffer = self._buffer[self._pos :] + pool.drain()
        self._pos = 0

    def getrandbits(self, k: int) -> int:
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        while len(self._buffer) - self._pos < k:
            self._refill()
        chunk = self._buffer[self._pos : self._pos + k]
        self._pos += k
        return bits_to_int(chunk)

    def random(self) -> float:
        return self.getrandbits(_BPF) * _RECIP_BPF

    def seed(self, *args, **kwds) -> None:
        "Stub method. Quantum measurements cannot be seeded."
        return None

    def _notimplemented(self, *args, **kwds):
        raise NotImplementedError("Quantum entropy source state cannot be saved.")

    getstate = setstate = _notimplemented


def make_random_source(config: GenPassConfig | None = None) -> random.Random:
    """Return the random source named by `config.entropy_source`."""
    cfg = config or DEFAULT_CONFIG
    source = cfg.entropy_source

    if source == "system":
        rng: random.Random = random.SystemRandom()
    elif source == "quantum":
        rng = QuantumRandom(config=cfg)
    else:
        raise ValueError(
            f"Unknown entropy source {source!r}; "
            f"expected one of: {', '.join(ENTROPY_SOURCES)}."
        )

    logger.info("Using %s entropy source", source)
    return rng
