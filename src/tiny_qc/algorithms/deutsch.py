"""
Deutsch's algorithm.

Decides with a single oracle query whether ``f: {0, 1} -> {0, 1}`` is
constant or balanced.

Usage:
    from tiny_qc.algorithms import deutsch

    deutsch(lambda x: 1 - x)   # DeutschResult.BALANCED
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from tiny_qc import gates
from tiny_qc.computer import QuantumComputer
from tiny_qc.exceptions import InvariantViolation
from tiny_qc.gate import Gate
from tiny_qc.matrix import Matrix

BitFunction = Callable[[int], int]

_EXCHANGE = Matrix.from_elements(2, [0, 1, 1, 0])


class DeutschResult(Enum):
    CONSTANT = "constant"
    BALANCED = "balanced"


def deutsch_gate(f: BitFunction) -> Gate:
    """
    Oracle taking ``|a, b>`` to ``|a, b xor f(a)>``.

    ``b`` is the least significant qubit, so each value of ``a`` owns a
    2x2 diagonal block; the block is swapped when ``f(a) == 1``.
    """
    m = Matrix.identity(4)
    for a in (0, 1):
        fa = f(a)
        if fa not in (0, 1):
            raise ValueError(f"f must map {{0, 1}} to {{0, 1}}, got f({a}) = {fa!r}")
        if fa == 1:
            m.embed(_EXCHANGE, 2 * a, 2 * a)
    return Gate(2, m)


def deutsch(f: BitFunction, rng=None) -> DeutschResult:
    """
    Classify ``f`` as constant or balanced.

    Adapted from http://physics.stackexchange.com/q/3400
    """
    qc = QuantumComputer(2, rng=rng)

    # |a=0, b=1>
    qc.initialize(1)
    qc.apply(gates.hadamard(2))
    qc.apply(deutsch_gate(f))
    qc.apply(gates.hadamard(2))
    qc.collapse()

    outcome = qc.value()
    if outcome == 1:
        return DeutschResult.CONSTANT
    if outcome == 3:
        return DeutschResult.BALANCED
    raise InvariantViolation(f"Deutsch circuit collapsed to unexpected state {outcome}")
