from dataclasses import replace

import pytest

from genpass.config import DEFAULT_CONFIG
from genpass.quantum_engine import QuantumEngine
from genpass.randomness import QuantumRandom, make_random_source


def test_raw_bits_one_per_qubit():
    engine = QuantumEngine(replace(DEFAULT_CONFIG, num_qubits=6))
    bits = engine.get_raw_bits()

    assert len(bits) == 6
    assert set(bits) <= {0, 1}


def test_every_qubit_is_measured():
    engine = QuantumEngine(replace(DEFAULT_CONFIG, num_qubits=4))
    assert engine._circuit.count_ops()["measure"] == 4
    assert engine._circuit.count_ops()["h"] == 4


def test_rejects_zero_qubits():
    with pytest.raises(ValueError):
        QuantumEngine(replace(DEFAULT_CONFIG, num_qubits=0))


def test_rejects_more_qubits_than_backend():
    with pytest.raises(ValueError, match="backend limit"):
        QuantumEngine(replace(DEFAULT_CONFIG, num_qubits=99))


def test_quantum_source_selection():
    rng = make_random_source(replace(DEFAULT_CONFIG, entropy_source="quantum", num_qubits=8))
    assert isinstance(rng, QuantumRandom)
    assert 0 <= rng.randrange(26) < 26
