"""Single, non-entangled qubit ``a|0> + b|1>``."""

from __future__ import annotations

from dataclasses import dataclass

from tiny_qc.complex import TOLERANCE, Complex
from tiny_qc.exceptions import InvariantViolation
from tiny_qc.ket import Ket


@dataclass(frozen=True)
class Qubit:
    """
    Pure single-qubit state.

    Construction fails unless ``|a|^2 + |b|^2`` is 1 within tolerance.
    """

    a: Complex
    b: Complex

    def __post_init__(self) -> None:
        object.__setattr__(self, "a", Complex.coerce(self.a))
        object.__setattr__(self, "b", Complex.coerce(self.b))
        total = self.a.norm_squared() + self.b.norm_squared()
        if abs(total - 1.0) >= TOLERANCE:
            raise InvariantViolation(f"|a|^2 + |b|^2 = {total}, expected 1")

    @classmethod
    def zero(cls) -> Qubit:
        return cls(Complex.one(), Complex.zero())

    @classmethod
    def one(cls) -> Qubit:
        return cls(Complex.zero(), Complex.one())

    def probabilities(self) -> tuple[float, float]:
        """Probabilities of measuring 0 and 1."""
        return self.a.norm_squared(), self.b.norm_squared()

    def to_ket(self) -> Ket:
        """Width-1 ket with amplitudes ``(a, b)``."""
        ket = Ket(1)
        ket[0] = self.a
        ket[1] = self.b
        return ket
