"""
Quantum computer facade.

Wraps a single quantum register in a three-stage lifecycle::

    INITIALIZING --initialize--> RUNNING --collapse--> COLLAPSED
         ^                                                 |
         +---------------------- reset --------------------+

Calling an operation in the wrong stage is a programming error and
raises :class:`ProtocolViolation`.

Example
-------
>>> from tiny_qc import QuantumComputer, gates
>>> qc = QuantumComputer(1, rng=42)
>>> qc.initialize(0)
>>> qc.apply(gates.pauli_x())
>>> qc.collapse()
>>> qc.value()
1
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable

from numpy import ndarray

from tiny_qc.exceptions import DimensionMismatch, ProtocolViolation
from tiny_qc.gate import Gate
from tiny_qc.registers import ClassicalRegister, QuantumRegister, as_random_source

logger = logging.getLogger(__name__)


class ComputerState(Enum):
    INITIALIZING = "initializing"
    RUNNING = "running"
    COLLAPSED = "collapsed"


class QuantumComputer:
    """
    Quantum computer of one ``width``-qubit register.

    Parameters
    ----------
    width : int
        Register width in qubits.
    rng : numpy.random.Generator | int | None
        Random source (or seed) shared by every register this computer
        creates.
    """

    def __init__(self, width: int, rng=None) -> None:
        self._width = width
        self._rng = as_random_source(rng)
        self._state = ComputerState.INITIALIZING
        # Only meaningful while RUNNING.
        self._register = QuantumRegister(width, ClassicalRegister.zeroed(width), rng=self._rng)
        # Only meaningful while COLLAPSED.
        self._classical = ClassicalRegister.zeroed(width)

    # -- Properties ---------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def state(self) -> ComputerState:
        return self._state

    # -- Lifecycle ----------------------------------------------------------

    def _require(self, expected: ComputerState, operation: str) -> None:
        if self._state is not expected:
            raise ProtocolViolation(
                f"Cannot {operation} while {self._state.value}; "
                f"computer must be {expected.value}"
            )

    def _transition(self, new_state: ComputerState) -> None:
        logger.debug("Computer %s -> %s", self._state.value, new_state.value)
        self._state = new_state

    def initialize(self, value: int) -> None:
        """Set the register qubits to the classical state ``value``."""
        self._require(ComputerState.INITIALIZING, "initialize")
        classical = ClassicalRegister.from_int(self._width, value)
        self._register = QuantumRegister(self._width, classical, rng=self._rng)
        self._transition(ComputerState.RUNNING)

    def apply(self, gate: Gate) -> None:
        """Apply a gate to the register qubits."""
        self._require(ComputerState.RUNNING, "apply gate")
        self._register.apply(gate)

    def collapse(self) -> None:
        """Collapse the register to a classical state."""
        self._require(ComputerState.RUNNING, "collapse")
        self._classical = self._register.collapse()
        self._transition(ComputerState.COLLAPSED)

    def reset(self) -> None:
        """Return to INITIALIZING. The stored registers are kept until the next initialize."""
        self._require(ComputerState.COLLAPSED, "reset")
        self._transition(ComputerState.INITIALIZING)

    def value(self) -> int:
        """The collapsed register read as an integer."""
        self._require(ComputerState.COLLAPSED, "read value")
        return self._classical.to_int()

    def probabilities(self) -> ndarray:
        """
        Probability of each register state without collapsing.

        Intended for inspection and testing.
        """
        self._require(ComputerState.RUNNING, "read probabilities")
        return self._register.probabilities()

    # -- Sampling -----------------------------------------------------------

    def run(self, value: int, gates: Iterable[Gate], shots: int = 1) -> dict[int, int]:
        """
        Run a gate sequence ``shots`` times from ``value`` and count outcomes.

        Each shot initializes, applies every gate, collapses, reads the
        value and resets, so the computer ends in INITIALIZING.
        Gate widths are checked before the first shot.

        Returns
        -------
        dict[int, int]
            Mapping from outcome state to number of occurrences.
        """
        if shots < 1:
            raise ValueError(f"shots must be >= 1, got {shots}")
        self._require(ComputerState.INITIALIZING, "run")

        gates = list(gates)
        for gate in gates:
            if gate.width != self._width:
                raise DimensionMismatch(
                    f"Cannot apply {gate.width}-qubit gate to {self._width}-qubit register"
                )
        counts: dict[int, int] = {}
        for _ in range(shots):
            self.initialize(value)
            for gate in gates:
                self.apply(gate)
            self.collapse()
            outcome = self.value()
            counts[outcome] = counts.get(outcome, 0) + 1
            self.reset()
        return counts

    def __repr__(self) -> str:
        return f"QuantumComputer(width={self._width}, state={self._state.value})"
