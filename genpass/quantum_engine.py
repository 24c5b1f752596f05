"""
Quantum engine: puts qubits in superposition, measures them in alternating
bases on a local simulator and returns the raw bits.
"""

from __future__ import annotations

import logging
from typing import List

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .config import GenPassConfig, DEFAULT_CONFIG

logger = logging.getLogger(__name__)


class QuantumEngine:
    """
    Encapsulates all quantum-circuit-related logic.
    """

    def __init__(self, config: GenPassConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.backend = AerSimulator()

        configuration = getattr(self.backend, "configuration", None)
        max_qubits = getattr(configuration(), "n_qubits", None) if configuration else None

        if self.config.num_qubits < 1:
            raise ValueError("num_qubits must be at least 1.")
        if max_qubits is not None and self.config.num_qubits > max_qubits:
            raise ValueError(
                f"Configured num_qubits={self.config.num_qubits} exceeds "
                f"backend limit ({max_qubits})."
            )

        self._circuit = self._build_circuit()
        self._compiled = transpile(self._circuit, self.backend)

    def _build_circuit(self) -> QuantumCircuit:
        """
        Even qubits are put in superposition and measured in the Z basis.
        Odd qubits stay in |0> and are measured in the X basis (H before
        measurement), which is equally uniform.
        """
        n = self.config.num_qubits
        qc = QuantumCircuit(n, n)

        for i in range(n):
            if i % 2 == 0:
                qc.h(i)

        for i in range(n):
            if i % 2 == 1:
                qc.h(i)
            qc.measure(i, i)

        return qc

    def get_raw_bits(self) -> List[int]:
        """Run the circuit once (a single shot) and return its bits, qubit 0 first."""
        result = self.backend.run(self._compiled, shots=1).result()
        bitstring = next(iter(result.get_counts().keys()))

        # Qiskit orders bits as [q_(n-1) ... q_0]
        bits = [int(b) for b in bitstring[::-1]]
        logger.debug("Sampled %d bits from %d qubits", len(bits), self.config.num_qubits)
        return bits
