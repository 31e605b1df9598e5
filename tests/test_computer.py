"""Tests for the QuantumComputer facade."""

import numpy as np
import pytest

from tiny_qc import ComputerState, QuantumComputer, gates
from tiny_qc.exceptions import DimensionMismatch, ProtocolViolation, RangeError, SizeError


@pytest.fixture
def qc():
    return QuantumComputer(3, rng=0)


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------

def test_state_transitions(qc):
    assert qc.state is ComputerState.INITIALIZING
    qc.initialize(5)
    assert qc.state is ComputerState.RUNNING
    qc.collapse()
    assert qc.state is ComputerState.COLLAPSED
    qc.value()
    qc.reset()
    assert qc.state is ComputerState.INITIALIZING


def test_identity_computation(qc):
    qc.initialize(5)
    qc.apply(gates.identity(3))
    qc.collapse()
    assert qc.value() == 5


def test_probabilities_after_hadamard():
    qc = QuantumComputer(1)
    qc.initialize(0)
    qc.apply(gates.hadamard())
    probs = qc.probabilities()
    assert len(probs) == 2
    np.testing.assert_allclose(probs, [0.5, 0.5], atol=1e-12)


def test_reinitialize_after_reset(qc):
    qc.initialize(1)
    qc.collapse()
    qc.reset()
    qc.initialize(6)
    qc.collapse()
    assert qc.value() == 6


def test_width_over_capacity():
    with pytest.raises(SizeError):
        QuantumComputer(6)


def test_initialize_out_of_range(qc):
    with pytest.raises(RangeError):
        qc.initialize(8)
    assert qc.state is ComputerState.INITIALIZING


# ---------------------------------------------------------------------------
# Protocol violations
# ---------------------------------------------------------------------------

def test_initializing_rejects_other_operations(qc):
    with pytest.raises(ProtocolViolation):
        qc.apply(gates.identity(3))
    with pytest.raises(ProtocolViolation):
        qc.collapse()
    with pytest.raises(ProtocolViolation):
        qc.reset()
    with pytest.raises(ProtocolViolation):
        qc.value()
    with pytest.raises(ProtocolViolation):
        qc.probabilities()


def test_running_rejects_other_operations(qc):
    qc.initialize(0)
    with pytest.raises(ProtocolViolation):
        qc.initialize(0)
    with pytest.raises(ProtocolViolation):
        qc.reset()
    with pytest.raises(ProtocolViolation):
        qc.value()


def test_collapsed_rejects_other_operations(qc):
    qc.initialize(0)
    qc.collapse()
    with pytest.raises(ProtocolViolation):
        qc.initialize(0)
    with pytest.raises(ProtocolViolation):
        qc.apply(gates.identity(3))
    with pytest.raises(ProtocolViolation):
        qc.probabilities()


def test_double_collapse(qc):
    qc.initialize(0)
    qc.collapse()
    for _ in range(3):
        with pytest.raises(ProtocolViolation):
            qc.collapse()


# ---------------------------------------------------------------------------
# Sampling helper
# ---------------------------------------------------------------------------

def test_run_counts_deterministic(qc):
    counts = qc.run(6, [gates.toffoli()], shots=20)
    assert counts == {7: 20}
    assert qc.state is ComputerState.INITIALIZING


def test_run_hadamard_statistics():
    qc = QuantumComputer(1, rng=2024)
    counts = qc.run(0, [gates.hadamard()], shots=1000)
    assert set(counts) <= {0, 1}
    assert sum(counts.values()) == 1000
    assert 400 <= counts.get(1, 0) <= 600


def test_run_reuses_gate_objects(fixed_source):
    qc = QuantumComputer(1, rng=fixed_source(0.25, 0.75))
    h = gates.hadamard()
    counts = qc.run(0, [h], shots=4)
    assert counts == {0: 2, 1: 2}


def test_run_rejects_bad_shots(qc):
    with pytest.raises(ValueError):
        qc.run(0, [], shots=0)


def test_run_requires_initializing(qc):
    qc.initialize(0)
    with pytest.raises(ProtocolViolation):
        qc.run(0, [])


def test_run_rejects_gate_width_before_first_shot(fixed_source):
    source = fixed_source(0.5)
    qc = QuantumComputer(2, rng=source)
    with pytest.raises(DimensionMismatch):
        qc.run(0, [gates.controlled_not(), gates.pauli_x()], shots=5)
    assert qc.state is ComputerState.INITIALIZING
    assert source.calls == 0

    assert qc.run(2, [gates.controlled_not()], shots=1) == {3: 1}
