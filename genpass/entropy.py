"""
Entropy pooling for the quantum random source.

A circuit run yields only `num_qubits` bits, so runs are accumulated in an
EntropyPool until a full batch (256 bits, one SHA-256 digest) is collected.
Only then is the batch mixed and handed out, so no output batch carries less
raw entropy than it has bits.
"""

from __future__ import annotations

import hashlib
from typing import List

BATCH_BITS = 256


def pack_bits(bits: List[int]) -> bytes:
    """Bits to bytes, MSB first; a trailing partial byte is zero-padded."""
    if not bits:
        return b""
    nbytes = (len(bits) + 7) // 8
    return (bits_to_int(bits) << (nbytes * 8 - len(bits))).to_bytes(nbytes, "big")


def unpack_bits(data: bytes) -> List[int]:
    width = len(data) * 8
    value = int.from_bytes(data, "big")
    return [(value >> (width - 1 - i)) & 1 for i in range(width)]


def bits_to_int(bits: List[int]) -> int:
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value


class EntropyPool:
    """
    Collects raw bits until at least `batch_bits` are held, then drains them
    as one batch. With rounds > 0 the batch is hashed `rounds` times with
    SHA-256 and drained as a 256-bit digest; with rounds <= 0 the raw bits
    are drained unchanged.
    """

    def __init__(self, rounds: int, batch_bits: int = BATCH_BITS) -> None:
        self.rounds = rounds
        self.batch_bits = batch_bits
        self._raw: List[int] = []

    def add(self, bits: List[int]) -> None:
        self._raw.extend(bits)

    @property
    def ready(self) -> bool:
        return len(self._raw) >= self.batch_bits

    def drain(self) -> List[int]:
        raw, self._raw = self._raw, []
        if self.rounds <= 0:
            return raw

        data = pack_bits(raw)
        for _ in range(self.rounds):
            data = hashlib.sha256(data).digest()
        return unpack_bits(data)
