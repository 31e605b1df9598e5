"""
Error taxonomy for tiny-qc.

Every error is fatal to the operation that raised it. Each class also
derives from the closest built-in exception so callers can catch either
the library-specific type or the familiar one.
"""

from __future__ import annotations


class QuantumError(Exception):
    """Base class for all tiny-qc errors."""


class SizeError(QuantumError, ValueError):
    """A matrix or ket dimension is out of range for its buffer."""


class SizeMismatchError(SizeError):
    """Two matrix operands have different active sizes."""


class InvalidPermutationError(QuantumError, ValueError):
    """A permutation is not a bijection on the expected index range."""


class DimensionMismatch(QuantumError, ValueError):
    """A gate does not fit the matrix or register it is paired with."""


class WidthMismatch(DimensionMismatch):
    """A classical register's width differs from the quantum register's."""


class InvalidBitError(QuantumError, ValueError):
    """A classical register was given a value other than 0 or 1."""


class RangeError(QuantumError, ValueError):
    """A classical state cannot be represented at the given width."""


class ProtocolViolation(QuantumError, RuntimeError):
    """An operation was invoked outside its permitted lifecycle state."""


class InvariantViolation(QuantumError, AssertionError):
    """An internal consistency check failed."""
