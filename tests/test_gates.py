"""Tests for the quantum gate library."""

import numpy as np
import pytest

from tiny_qc import QuantumComputer
from tiny_qc import gates as g
from tiny_qc.exceptions import DimensionMismatch


# ---------------------------------------------------------------------------
# Unitarity tests: every gate must satisfy U†U = I
# ---------------------------------------------------------------------------

FIXED_GATES = [
    ("identity", g.identity(3)), ("hadamard", g.hadamard()),
    ("hadamard2", g.hadamard(2)), ("X", g.pauli_x()), ("Y", g.pauli_y()),
    ("Z", g.pauli_z()), ("SWAP", g.swap()), ("sqrt_SWAP", g.sqrt_swap()),
    ("CNOT", g.controlled_not()), ("Toffoli", g.toffoli()),
    ("Fredkin", g.fredkin()), ("QFT3", g.fourier(3)),
]


@pytest.mark.parametrize("name,gate", FIXED_GATES)
def test_fixed_gate_unitary(name, gate):
    """Every library gate must be unitary: U†U = I."""
    matrix = gate.matrix.to_array()
    dim = matrix.shape[0]
    product = matrix.conj().T @ matrix
    np.testing.assert_allclose(product, np.eye(dim), atol=1e-12, err_msg=f"{name} is not unitary")


@pytest.mark.parametrize("name,gate", FIXED_GATES)
def test_fixed_gate_shape(name, gate):
    """Gate matrices have dimension 2^width."""
    assert gate.matrix.size == 2 ** gate.width


@pytest.mark.parametrize("phi", [0, 0.5, np.pi, 2 * np.pi, -1.3])
def test_phase_shift_unitary(phi):
    mat = g.phase_shift(phi).matrix.to_array()
    np.testing.assert_allclose(mat.conj().T @ mat, np.eye(2), atol=1e-12)


# ---------------------------------------------------------------------------
# Gate algebra tests
# ---------------------------------------------------------------------------

def test_x_squared_is_identity():
    x = g.pauli_x().matrix
    assert (x @ x).approx_eq(g.identity(1).matrix)


def test_sqrt_swap_squared_is_swap():
    s = g.sqrt_swap().matrix
    assert (s @ s).approx_eq(g.swap().matrix)


def test_phase_shift_pi_is_z():
    assert g.phase_shift(np.pi).matrix.approx_eq(g.pauli_z().matrix)


def test_fourier_one_qubit_is_hadamard():
    assert g.fourier(1).matrix.approx_eq(g.hadamard().matrix)


def test_fourier_entries():
    n = 4
    omega = np.exp(2j * np.pi / n)
    expected = np.array([[omega ** (j * k) for k in range(n)] for j in range(n)]) / 2
    np.testing.assert_allclose(g.fourier(2).matrix.to_array(), expected, atol=1e-12)


def test_controlled_embeds_in_lower_right():
    mat = g.controlled(g.pauli_y()).matrix.to_array()
    np.testing.assert_array_equal(mat[:2, :2], np.eye(2))
    np.testing.assert_array_equal(mat[2:, 2:], [[0, -1j], [1j, 0]])
    np.testing.assert_array_equal(mat[:2, 2:], np.zeros((2, 2)))


def test_toffoli_matrix():
    expected = np.eye(8)
    expected[[6, 7]] = expected[[7, 6]]
    np.testing.assert_array_equal(g.toffoli().matrix.to_array(), expected)


def test_fredkin_swaps_five_and_six():
    expected = np.eye(8)
    expected[[5, 6]] = expected[[6, 5]]
    np.testing.assert_array_equal(g.fredkin().matrix.to_array(), expected)


# ---------------------------------------------------------------------------
# Deterministic outcomes
# ---------------------------------------------------------------------------

def collapse_once(width, value, gate):
    qc = QuantumComputer(width, rng=0)
    qc.initialize(value)
    qc.apply(gate)
    qc.collapse()
    return qc.value()


@pytest.mark.parametrize("gate,width,value,expected", [
    (g.pauli_x(), 1, 0, 1),
    (g.pauli_x(), 1, 1, 0),
    (g.pauli_z(), 1, 0, 0),
    (g.pauli_z(), 1, 1, 1),
    (g.pauli_y(), 1, 0, 1),
    (g.controlled_not(), 2, 0, 0),
    (g.controlled_not(), 2, 1, 1),
    (g.controlled_not(), 2, 2, 3),
    (g.controlled_not(), 2, 3, 2),
    (g.toffoli(), 3, 0, 0),
    (g.toffoli(), 3, 2, 2),
    (g.toffoli(), 3, 6, 7),
    (g.toffoli(), 3, 7, 6),
    (g.swap(), 2, 0, 0),
    (g.swap(), 2, 1, 2),
    (g.swap(), 2, 2, 1),
    (g.swap(), 2, 3, 3),
    (g.fredkin(), 3, 5, 6),
    (g.fredkin(), 3, 3, 3),
    (g.identity(3), 3, 5, 5),
])
def test_deterministic_gate(gate, width, value, expected):
    assert collapse_once(width, value, gate) == expected


def test_hadamard_statistics():
    qc = QuantumComputer(1, rng=1234)
    ones = 0
    for _ in range(1000):
        qc.initialize(0)
        qc.apply(g.hadamard())
        qc.collapse()
        if qc.value() == 1:
            ones += 1
        qc.reset()
    assert 400 <= ones <= 600


# ---------------------------------------------------------------------------
# Registry lookup
# ---------------------------------------------------------------------------

def test_get_gate_case_insensitive():
    assert g.get_gate("CNOT", 2) == g.controlled_not()


def test_get_gate_width_generic():
    assert g.get_gate("h", 3) == g.hadamard(3)
    assert g.get_gate("identity", 2) == g.identity(2)


def test_get_gate_with_params():
    assert g.get_gate("phase_shift", 1, (0.25,)) == g.phase_shift(0.25)


def test_get_gate_unknown():
    with pytest.raises(KeyError):
        g.get_gate("warp", 1)


def test_get_gate_wrong_param_count():
    with pytest.raises(ValueError):
        g.get_gate("x", 1, (1.0,))
    with pytest.raises(ValueError):
        g.get_gate("p", 1)


def test_width_mismatch_on_apply():
    qc = QuantumComputer(2)
    qc.initialize(0)
    with pytest.raises(DimensionMismatch):
        qc.apply(g.pauli_x())
