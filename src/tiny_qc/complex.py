"""
Complex scalar arithmetic.

:class:`Complex` is the scalar type used at the public API boundary
(``Matrix.get``, ``Ket[...]``). Inside the numeric buffers values are
stored as numpy ``complex128``; :meth:`Complex.coerce` converts between
the two.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

TOLERANCE = 1e-12
"""Absolute per-component tolerance for approximate comparisons."""

# Below this exponent pow() multiplies in a plain loop.
_POW_LOOP_LIMIT = 5


@dataclass(frozen=True)
class Complex:
    """
    Immutable complex number ``re + im * i`` with 64-bit float parts.

    Example
    -------
    >>> Complex(1, 2) * Complex(3, 4)
    Complex(re=-5.0, im=10.0)
    """

    re: float = 0.0
    im: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "re", float(self.re))
        object.__setattr__(self, "im", float(self.im))

    # -- Constructors -------------------------------------------------------

    @classmethod
    def from_polar(cls, r: float, phi: float) -> Complex:
        """Construct ``r * exp(i * phi)``."""
        return cls(r * math.cos(phi), r * math.sin(phi))

    @classmethod
    def nth_root_of_unity(cls, n: int) -> Complex:
        """Primitive n-th root of unity, ``exp(2*pi*i / n)``. n = 0 gives one."""
        if n == 0:
            return cls.one()
        return cls.from_polar(1.0, 2.0 * math.pi / n)

    @classmethod
    def zero(cls) -> Complex:
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Complex:
        return cls(1.0, 0.0)

    @classmethod
    def i(cls) -> Complex:
        """The imaginary unit."""
        return cls(0.0, 1.0)

    @classmethod
    def coerce(cls, value) -> Complex:
        """Convert a Python or numpy number (or a Complex) to Complex."""
        if isinstance(value, Complex):
            return value
        if isinstance(value, (str, bytes)):
            raise TypeError(f"Cannot convert {type(value).__name__} to Complex")
        z = complex(value)
        return cls(z.real, z.imag)

    # -- Arithmetic ---------------------------------------------------------

    def norm_squared(self) -> float:
        """Squared modulus ``|z|^2``."""
        return self.re * self.re + self.im * self.im

    def pow(self, n: int) -> Complex:
        """
        Integer power ``z**n`` for ``n >= 0``.

        Small exponents use repeated multiplication; larger ones use
        binary exponentiation (repeated squaring).
        """
        if n < 0:
            raise ValueError(f"Exponent must be non-negative, got {n}")

        if n < _POW_LOOP_LIMIT:
            result = Complex.one()
            for _ in range(n):
                result = result * self
            return result

        result = Complex.one()
        base = self
        while n:
            if n & 1:
                result = result * base
            base = base * base
            n >>= 1
        return result

    def approx_eq(self, other, tol: float = TOLERANCE) -> bool:
        """True iff both components differ by less than ``tol``."""
        other = Complex.coerce(other)
        return abs(self.re - other.re) < tol and abs(self.im - other.im) < tol

    def __add__(self, other) -> Complex:
        try:
            other = Complex.coerce(other)
        except TypeError:
            return NotImplemented
        return Complex(self.re + other.re, self.im + other.im)

    __radd__ = __add__

    def __mul__(self, other) -> Complex:
        try:
            other = Complex.coerce(other)
        except TypeError:
            return NotImplemented
        return Complex(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    __rmul__ = __mul__

    def __neg__(self) -> Complex:
        return Complex(-self.re, -self.im)

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __str__(self) -> str:
        return f"{self.re:+.3f} {self.im:+.3f}i"
