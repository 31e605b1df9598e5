"""
Ket (state vector) of a quantum register.

A register of ``width`` qubits is described by ``2**width`` complex
amplitudes over the computational basis. Index ``s`` is the classical
state of the basis vector, using the same encoding as
:meth:`ClassicalRegister.state` (leftmost bit least significant).

Amplitudes are stored left-aligned in a ``MAX_SIZE`` buffer; the unused
tail is zero.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy import ndarray

from tiny_qc.complex import TOLERANCE, Complex
from tiny_qc.exceptions import InvariantViolation, SizeError
from tiny_qc.matrix import MAX_SIZE, zero_vector

if TYPE_CHECKING:
    from tiny_qc.gate import Gate
    from tiny_qc.registers import ClassicalRegister


def size_for_width(width: int) -> int:
    """Number of amplitudes for a register of ``width`` qubits."""
    if width < 0:
        raise SizeError(f"Width must be non-negative, got {width}")
    return 2 ** width


class Ket:
    """
    State vector of ``width`` qubits, initially all zero.

    Parameters
    ----------
    width : int
        Number of qubits. ``2**width`` must not exceed ``MAX_SIZE``.
    """

    __slots__ = ("_width", "_elements")

    def __init__(self, width: int) -> None:
        size = size_for_width(width)
        if size > MAX_SIZE:
            raise SizeError(
                f"A {width}-qubit ket needs {size} amplitudes; capacity is {MAX_SIZE}"
            )
        self._width = width
        self._elements = zero_vector()

    @classmethod
    def from_classical(cls, register: ClassicalRegister) -> Ket:
        """Basis ket with amplitude 1 at ``register.state()``."""
        ket = cls(register.width)
        ket._elements[register.state()] = 1.0
        return ket

    # -- Properties ---------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def size(self) -> int:
        """Number of live amplitudes, ``2**width``."""
        return size_for_width(self._width)

    @property
    def vector(self) -> ndarray:
        """Copy of the full ``MAX_SIZE`` amplitude buffer."""
        return self._elements.copy()

    def __getitem__(self, state: int) -> Complex:
        if not 0 <= state < MAX_SIZE:
            raise IndexError(f"State {state} outside buffer of {MAX_SIZE}")
        return Complex.coerce(self._elements[state])

    def __setitem__(self, state: int, value) -> None:
        if not 0 <= state < MAX_SIZE:
            raise IndexError(f"State {state} outside buffer of {MAX_SIZE}")
        self._elements[state] = complex(value)

    # -- Invariants ---------------------------------------------------------

    def total_probability(self) -> float:
        """Sum of squared amplitude magnitudes over the whole buffer."""
        return float(np.sum(np.abs(self._elements) ** 2))

    def is_valid(self, tol: float = TOLERANCE) -> bool:
        """True iff the squared magnitudes sum to 1 within ``tol``."""
        return abs(self.total_probability() - 1.0) < tol

    def is_classical(self) -> bool:
        """
        True iff the ket is exactly a single basis vector.

        Exactly one amplitude must equal ``1 + 0i`` and every other must be
        exactly zero; no tolerance is applied here, unlike :meth:`is_valid`.

        Raises
        ------
        InvariantViolation
            If the ket is not valid.
        """
        if not self.is_valid():
            raise InvariantViolation(
                f"Ket is not normalized (total probability {self.total_probability()})"
            )
        ones = np.count_nonzero(self._elements == 1.0)
        zeros = np.count_nonzero(self._elements == 0.0)
        return ones == 1 and ones + zeros == MAX_SIZE

    # -- Evolution ----------------------------------------------------------

    def apply(self, gate: Gate) -> None:
        """Replace the amplitudes with ``gate.matrix @ amplitudes``."""
        self._elements = gate.matrix.multiply_vector(self._elements)

    def probabilities(self) -> ndarray:
        """Squared magnitudes of the ``2**width`` live amplitudes."""
        return np.abs(self._elements[: self.size]) ** 2

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ket):
            return NotImplemented
        return self._width == other._width and bool(
            np.array_equal(self._elements, other._elements)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Ket(width={self._width}, size={self.size})"
