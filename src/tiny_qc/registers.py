"""
Classical and quantum registers.

A :class:`ClassicalRegister` is a fixed-width bit sequence with a
canonical integer state. A :class:`QuantumRegister` holds the ket of a
register of entangled qubits, evolves it through gates, and can be
collapsed exactly once into a classical outcome.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable

import numpy as np
from numpy import ndarray

from tiny_qc.exceptions import (
    DimensionMismatch,
    InvalidBitError,
    InvariantViolation,
    ProtocolViolation,
    RangeError,
    WidthMismatch,
)
from tiny_qc.gate import Gate
from tiny_qc.ket import Ket

logger = logging.getLogger(__name__)

MAX_CLASSICAL_WIDTH = 32
"""Widest register whose state fits a 32-bit unsigned integer."""


def as_random_source(rng=None):
    """
    Normalize a randomness argument.

    ``None`` or an ``int`` seed gives a fresh ``numpy.random.Generator``.
    Anything else is used as-is and must provide ``random() -> float``
    returning a sample in ``[0, 1)``.
    """
    if rng is None or isinstance(rng, (int, np.integer)):
        return np.random.default_rng(rng)
    if not callable(getattr(rng, "random", None)):
        raise TypeError(f"Random source must provide random(), got {type(rng).__name__}")
    return rng


# ---------------------------------------------------------------------------
# ClassicalRegister
# ---------------------------------------------------------------------------

class ClassicalRegister:
    """
    Non-quantum register of bits.

    Parameters
    ----------
    bits : iterable of int
        Ones and zeros; the width is the number of bits.

    Raises
    ------
    InvalidBitError
        If any element is not 0 or 1.

    Example
    -------
    >>> ClassicalRegister([0, 1, 1]).state()
    6
    """

    __slots__ = ("_bits",)

    def __init__(self, bits: Iterable[int]) -> None:
        bits = tuple(bits)
        for pos, bit in enumerate(bits):
            if bit not in (0, 1):
                raise InvalidBitError(f"Bit {pos} must be 0 or 1, got {bit!r}")
        self._bits = tuple(int(b) for b in bits)

    @classmethod
    def from_state(cls, width: int, state: int) -> ClassicalRegister:
        """
        Register of ``width`` bits whose :meth:`state` equals ``state``.

        Raises
        ------
        RangeError
            If ``state`` is not in ``[0, 2**width)``.
        """
        if not 0 <= state < 2 ** width:
            raise RangeError(f"State {state} does not fit in {width} bit(s)")
        return cls((state >> pos) & 1 for pos in range(width))

    @classmethod
    def from_int(cls, width: int, value: int) -> ClassicalRegister:
        """Alias of :meth:`from_state`."""
        return cls.from_state(width, value)

    @classmethod
    def zeroed(cls, width: int) -> ClassicalRegister:
        return cls([0] * width)

    @property
    def width(self) -> int:
        return len(self._bits)

    @property
    def bits(self) -> tuple[int, ...]:
        return self._bits

    def state(self) -> int:
        """
        Integer uniquely identifying the bits for this width.

        Bit strings are enumerated in reversed lexicographic order, which is
        the same as reading the register as an integer whose leftmost bit is
        least significant: ``[0, 1, 0, 1]`` has state 10.

        Raises
        ------
        RangeError
            If the register is wider than 32 bits.
        """
        if self.width > MAX_CLASSICAL_WIDTH:
            raise RangeError(
                f"State is only defined for width <= {MAX_CLASSICAL_WIDTH}, got {self.width}"
            )
        return sum(1 << pos for pos, bit in enumerate(self._bits) if bit)

    def to_int(self) -> int:
        return self.state()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClassicalRegister):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __repr__(self) -> str:
        return f"ClassicalRegister({list(self._bits)})"

    def __str__(self) -> str:
        return "".join(str(b) for b in self._bits)


# ---------------------------------------------------------------------------
# QuantumRegister
# ---------------------------------------------------------------------------

class RegisterState(Enum):
    """Lifecycle of a quantum register. COLLAPSED is terminal."""
    LIVE = "live"
    COLLAPSED = "collapsed"


class QuantumRegister:
    """
    Register of ``width`` entangled qubits.

    The register starts in the classical state ``initial`` and holds a
    superposition through any number of gate applications. It may be
    collapsed once, after which it holds no useful state.

    Parameters
    ----------
    width : int
        Number of qubits.
    initial : ClassicalRegister
        Starting classical state; must have the same width.
    rng : numpy.random.Generator | int | None
        Source of the collapse sample, or a seed for one. Any object with
        a ``random()`` method is accepted.

    Raises
    ------
    WidthMismatch
        If ``initial.width != width``.
    """

    def __init__(self, width: int, initial: ClassicalRegister, rng=None) -> None:
        if initial.width != width:
            raise WidthMismatch(
                f"Initial register has width {initial.width}, expected {width}"
            )
        self._width = width
        self._ket = Ket.from_classical(initial)
        self._state = RegisterState.LIVE
        self._rng = as_random_source(rng)
        logger.debug("Initialized %d-qubit register to state %d", width, initial.state())

    @property
    def width(self) -> int:
        return self._width

    @property
    def state(self) -> RegisterState:
        return self._state

    @property
    def collapsed(self) -> bool:
        return self._state is RegisterState.COLLAPSED

    @property
    def ket(self) -> Ket:
        return self._ket

    def _require_live(self, operation: str) -> None:
        if self._state is not RegisterState.LIVE:
            raise ProtocolViolation(f"Cannot {operation}: register is already collapsed")

    def apply(self, gate: Gate) -> None:
        """
        Apply ``gate`` to the register, mutating its state.

        Raises
        ------
        ProtocolViolation
            If the register is collapsed.
        DimensionMismatch
            If ``gate.width`` differs from the register width.
        """
        self._require_live("apply gate")
        if gate.width != self._width:
            raise DimensionMismatch(
                f"Cannot apply {gate.width}-qubit gate to {self._width}-qubit register"
            )
        self._ket.apply(gate)
        logger.debug("Applied %d-qubit gate", gate.width)

    def collapse(self) -> ClassicalRegister:
        """
        Measure the register, yielding one classical state.

        One uniform sample ``u`` in ``[0, 1)`` is drawn and the amplitudes
        are walked in state order, accumulating squared magnitudes; the
        first state whose cumulative probability exceeds ``u`` is returned.
        If rounding leaves ``u`` uncovered, state 0 is returned.

        The register is marked collapsed before sampling, so a failure
        during sampling cannot be retried.

        Raises
        ------
        ProtocolViolation
            If the register was already collapsed.
        InvariantViolation
            If the random source returns a sample outside ``[0, 1)``.
        """
        self._require_live("collapse")
        self._state = RegisterState.COLLAPSED

        sample = float(self._rng.random())
        if not 0.0 <= sample < 1.0:
            raise InvariantViolation(f"Random source returned {sample!r}, outside [0, 1)")
        cumulative = 0.0
        for state, probability in enumerate(self._ket.probabilities()):
            cumulative += probability
            if sample < cumulative:
                logger.debug("Collapsed with sample %.6f to state %d", sample, state)
                return ClassicalRegister.from_state(self._width, state)

        logger.warning(
            "Sample %.17g not covered by cumulative probability %.17g; "
            "falling back to state 0",
            sample,
            cumulative,
        )
        return ClassicalRegister.from_state(self._width, 0)

    def probabilities(self) -> ndarray:
        """
        Probability of each of the ``2**width`` states, without collapsing.

        Raises
        ------
        ProtocolViolation
            If the register is collapsed.
        """
        self._require_live("read probabilities")
        return self._ket.probabilities()

    def __repr__(self) -> str:
        return f"QuantumRegister(width={self._width}, state={self._state.value})"
