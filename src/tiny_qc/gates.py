"""
Quantum gate library.

Every factory returns a :class:`~tiny_qc.gate.Gate`. Fixed gates are
defined from numpy matrices; controlled gates are assembled with
:meth:`Matrix.embed`.

Gate categories:
    - Width-generic: identity, hadamard, fourier
    - Single-qubit: pauli_x, pauli_y, pauli_z, phase_shift
    - Two-qubit: swap, sqrt_swap, controlled_not
    - Three-qubit: toffoli (CCNOT), fredkin (CSWAP)
    - Builders: controlled(gate)

State indices follow :class:`ClassicalRegister` numbering, so the
controlling qubit of ``controlled(gate)`` is the most significant one.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from tiny_qc.complex import Complex
from tiny_qc.gate import Gate
from tiny_qc.ket import size_for_width
from tiny_qc.matrix import Matrix

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
_SQRT2_INV = 1.0 / np.sqrt(2.0)

_H = np.array([[1, 1], [1, -1]], dtype=np.complex128) * _SQRT2_INV

_X = np.array([[0, 1], [1, 0]], dtype=np.complex128)

_Y = np.array([[0, -1j], [1j, 0]], dtype=np.complex128)

_Z = np.array([[1, 0], [0, -1]], dtype=np.complex128)

_SWAP = np.array(
    [[1, 0, 0, 0], [0, 0, 1, 0], [0, 1, 0, 0], [0, 0, 0, 1]],
    dtype=np.complex128,
)

_SQRT_SWAP = np.array(
    [
        [1, 0, 0, 0],
        [0, 0.5 * (1 + 1j), 0.5 * (1 - 1j), 0],
        [0, 0.5 * (1 - 1j), 0.5 * (1 + 1j), 0],
        [0, 0, 0, 1],
    ],
    dtype=np.complex128,
)


def _fixed(width: int, array: np.ndarray) -> Gate:
    return Gate(width, Matrix.from_array(array))


# ---------------------------------------------------------------------------
# Width-generic gates
# ---------------------------------------------------------------------------

def identity(width: int) -> Gate:
    """Identity gate; leaves the state unchanged."""
    return Gate(width, Matrix.identity(size_for_width(width)))


def hadamard(width: int = 1) -> Gate:
    """Hadamard transform on every qubit: H tensored ``width`` times."""
    full = np.ones((1, 1), dtype=np.complex128)
    for _ in range(width):
        full = np.kron(full, _H)
    return _fixed(width, full)


def fourier(width: int) -> Gate:
    """
    Quantum Fourier transform on ``width`` qubits.

    Entry ``(j, k)`` is ``omega**(j*k) / sqrt(N)`` where ``N = 2**width``
    and ``omega`` is the primitive N-th root of unity.
    """
    n = size_for_width(width)
    omega = Complex.nth_root_of_unity(n)
    norm = Complex(1.0 / np.sqrt(n), 0.0)

    m = Matrix(n)
    for j in range(n):
        for k in range(n):
            m.set(j, k, omega.pow(j * k) * norm)
    return Gate(width, m)


# ---------------------------------------------------------------------------
# Single-qubit gates
# ---------------------------------------------------------------------------

def pauli_x() -> Gate:
    """Pauli-X (NOT) gate."""
    return _fixed(1, _X)


def pauli_y() -> Gate:
    """Pauli-Y gate."""
    return _fixed(1, _Y)


def pauli_z() -> Gate:
    """Pauli-Z gate."""
    return _fixed(1, _Z)


def phase_shift(phi: float) -> Gate:
    """Phase shift: diagonal with entries [1, exp(i*phi)]."""
    m = Matrix.identity(2)
    m.set(1, 1, Complex.from_polar(1.0, phi))
    return Gate(1, m)


# ---------------------------------------------------------------------------
# Two- and three-qubit gates
# ---------------------------------------------------------------------------

def swap() -> Gate:
    """Exchange the two qubits."""
    return _fixed(2, _SWAP)


def sqrt_swap() -> Gate:
    """Square root of SWAP."""
    return _fixed(2, _SQRT_SWAP)


def controlled(gate: Gate) -> Gate:
    """
    Controlled-U: apply ``gate`` only when the extra control qubit is set.

    The result acts on ``gate.width + 1`` qubits; its matrix is the
    identity with ``gate``'s matrix embedded in the lower-right block.
    """
    size = gate.matrix.size
    m = Matrix.identity(2 * size)
    m.embed(gate.matrix, size, size)
    return Gate(gate.width + 1, m)


def controlled_not() -> Gate:
    """Controlled-NOT (CNOT) gate."""
    return controlled(pauli_x())


def toffoli() -> Gate:
    """Toffoli (CCNOT) gate."""
    return controlled(controlled_not())


def fredkin() -> Gate:
    """Fredkin (CSWAP) gate."""
    return controlled(swap())


# ---------------------------------------------------------------------------
# Gate metadata registry
# ---------------------------------------------------------------------------

# "n_qubits": None marks gates that take the register width.
GATE_REGISTRY: dict[str, dict] = {
    # Width-generic
    "identity": {"factory": identity, "n_qubits": None, "n_params": 0},
    "i": {"factory": identity, "n_qubits": None, "n_params": 0},
    "hadamard": {"factory": hadamard, "n_qubits": None, "n_params": 0},
    "h": {"factory": hadamard, "n_qubits": None, "n_params": 0},
    "fourier": {"factory": fourier, "n_qubits": None, "n_params": 0},
    "qft": {"factory": fourier, "n_qubits": None, "n_params": 0},
    # Single-qubit
    "x": {"factory": pauli_x, "n_qubits": 1, "n_params": 0},
    "y": {"factory": pauli_y, "n_qubits": 1, "n_params": 0},
    "z": {"factory": pauli_z, "n_qubits": 1, "n_params": 0},
    "phase_shift": {"factory": phase_shift, "n_qubits": 1, "n_params": 1},
    "p": {"factory": phase_shift, "n_qubits": 1, "n_params": 1},
    # Two-qubit
    "swap": {"factory": swap, "n_qubits": 2, "n_params": 0},
    "sqrt_swap": {"factory": sqrt_swap, "n_qubits": 2, "n_params": 0},
    "cnot": {"factory": controlled_not, "n_qubits": 2, "n_params": 0},
    "cx": {"factory": controlled_not, "n_qubits": 2, "n_params": 0},
    # Three-qubit
    "toffoli": {"factory": toffoli, "n_qubits": 3, "n_params": 0},
    "ccx": {"factory": toffoli, "n_qubits": 3, "n_params": 0},
    "fredkin": {"factory": fredkin, "n_qubits": 3, "n_params": 0},
    "cswap": {"factory": fredkin, "n_qubits": 3, "n_params": 0},
}


def get_gate(name: str, width: int, params: tuple[float, ...] = ()) -> Gate:
    """
    Look up a gate by name, with optional parameters.

    Parameters
    ----------
    name : str
        Gate name (case-insensitive).
    width : int
        Register width, used by width-generic gates.
    params : tuple of float
        Parameters for parameterized gates.

    Returns
    -------
    Gate

    Raises
    ------
    KeyError
        If gate name is not found.
    ValueError
        If wrong number of parameters provided.
    """
    key = name.lower()
    if key not in GATE_REGISTRY:
        raise KeyError(f"Unknown gate: '{name}'. Available: {sorted(GATE_REGISTRY)}")

    info = GATE_REGISTRY[key]
    n_params = info["n_params"]
    if len(params) != n_params:
        raise ValueError(
            f"Gate '{name}' requires {n_params} parameter(s), got {len(params)}"
        )

    factory: Callable[..., Gate] = info["factory"]
    if info["n_qubits"] is None:
        return factory(width, *params)
    return factory(*params)
