"""
Fixed-capacity square complex matrices.

Every matrix owns a ``MAX_SIZE x MAX_SIZE`` complex128 buffer and an
active ``size``. Entries outside the active ``size x size`` block are
zero and stay zero, so gates of any width up to ``log2(MAX_SIZE)``
qubits share one allocation shape.

Memory: 32 * 32 * 16 bytes = 16 KiB per matrix.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy import ndarray

from tiny_qc.complex import TOLERANCE, Complex
from tiny_qc.exceptions import (
    InvalidPermutationError,
    InvariantViolation,
    SizeError,
    SizeMismatchError,
)

MAX_SIZE = 32
"""Maximum matrix dimension, and therefore maximum ket length."""


def zero_vector() -> ndarray:
    """A zeroed amplitude buffer of length ``MAX_SIZE``."""
    return np.zeros(MAX_SIZE, dtype=np.complex128)


def _check_index(i: int, j: int) -> None:
    if not (0 <= i < MAX_SIZE and 0 <= j < MAX_SIZE):
        raise IndexError(f"Index ({i}, {j}) outside {MAX_SIZE}x{MAX_SIZE} buffer")


class Matrix:
    """
    Square matrix over C with active dimension ``size <= MAX_SIZE``.

    Parameters
    ----------
    size : int
        Active dimension. The matrix starts as all zeros.

    Raises
    ------
    SizeError
        If ``size`` is negative or exceeds ``MAX_SIZE``.

    Example
    -------
    >>> m = Matrix.from_elements(2, [1, 2, 3, 4])
    >>> (m @ m).get(0, 0)
    Complex(re=7.0, im=0.0)
    """

    __slots__ = ("_size", "_elements")

    def __init__(self, size: int) -> None:
        if not 0 <= size <= MAX_SIZE:
            raise SizeError(f"Matrix size must be in [0, {MAX_SIZE}], got {size}")
        self._size = size
        self._elements = np.zeros((MAX_SIZE, MAX_SIZE), dtype=np.complex128)

    # -- Constructors -------------------------------------------------------

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """Identity matrix of the given size."""
        m = cls(size)
        idx = np.arange(size)
        m._elements[idx, idx] = 1.0
        return m

    @classmethod
    def from_elements(cls, size: int, elements: Sequence) -> Matrix:
        """
        Build a matrix from a flat, row-major list of ``size**2`` values.

        Values may be :class:`Complex` or any Python/numpy number.
        """
        elements = list(elements)
        if len(elements) != size * size:
            raise SizeError(
                f"Expected {size * size} elements for a {size}x{size} matrix, "
                f"got {len(elements)}"
            )
        m = cls(size)
        block = np.array([complex(v) for v in elements], dtype=np.complex128)
        m._elements[:size, :size] = block.reshape(size, size)
        return m

    @classmethod
    def from_array(cls, array) -> Matrix:
        """Build a matrix from a square 2-D array-like."""
        array = np.asarray(array, dtype=np.complex128)
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise SizeError(f"Expected a square 2-D array, got shape {array.shape}")
        m = cls(array.shape[0])
        m._elements[: m._size, : m._size] = array
        return m

    def copy(self) -> Matrix:
        m = Matrix(self._size)
        m._elements[...] = self._elements
        return m

    # -- Access -------------------------------------------------------------

    @property
    def size(self) -> int:
        """Active dimension."""
        return self._size

    def get(self, i: int, j: int) -> Complex:
        """Element at row ``i``, column ``j``."""
        _check_index(i, j)
        return Complex.coerce(self._elements[i, j])

    def set(self, i: int, j: int, value) -> None:
        """Set the element at row ``i``, column ``j``."""
        _check_index(i, j)
        self._elements[i, j] = complex(value)

    def to_array(self) -> ndarray:
        """Copy of the active ``size x size`` block."""
        return self._elements[: self._size, : self._size].copy()

    # -- Algebra ------------------------------------------------------------

    def _require_same_size(self, other: Matrix, op: str) -> None:
        if self._size != other._size:
            raise SizeMismatchError(
                f"Cannot {op} matrices of size {self._size} and {other._size}"
            )

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_size(other, "add")
        m = Matrix(self._size)
        m._elements = self._elements + other._elements
        return m

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_size(other, "multiply")
        n = self._size
        m = Matrix(n)
        m._elements[:n, :n] = self._elements[:n, :n] @ other._elements[:n, :n]
        return m

    def multiply_vector(self, vector: ndarray) -> ndarray:
        """
        Multiply by a length-``MAX_SIZE`` amplitude buffer.

        Returns a new buffer whose first ``size`` entries hold the product
        and whose tail is zero.

        Raises
        ------
        SizeError
            If ``vector`` is not a length-``MAX_SIZE`` buffer.
        InvariantViolation
            If ``vector`` has a nonzero entry at index ``>= size``.
        """
        vector = np.asarray(vector, dtype=np.complex128)
        if vector.shape != (MAX_SIZE,):
            raise SizeError(f"Expected a vector of shape ({MAX_SIZE},), got {vector.shape}")

        n = self._size
        tail = np.flatnonzero(vector[n:])
        if tail.size:
            raise InvariantViolation(
                f"Vector has nonzero entry at index {n + tail[0]} "
                f"beyond matrix size {n}"
            )

        output = zero_vector()
        output[:n] = self._elements[:n, :n] @ vector[:n]
        return output

    # -- Structural edits ---------------------------------------------------

    def embed(self, other: Matrix, i: int, j: int) -> None:
        """
        Overwrite the ``other.size`` square block starting at ``(i, j)``.

        Raises
        ------
        SizeError
            If the block does not fit inside this matrix.
        """
        k = other._size
        if i < 0 or j < 0 or i + k > self._size or j + k > self._size:
            raise SizeError(
                f"Cannot embed {k}x{k} block at ({i}, {j}) "
                f"in {self._size}x{self._size} matrix"
            )
        self._elements[i:i + k, j:j + k] = other._elements[:k, :k]

    def _validate_permutation(self, permutation: Sequence[int]) -> list[int]:
        perm = [int(p) for p in permutation]
        if len(perm) != self._size or sorted(perm) != list(range(self._size)):
            raise InvalidPermutationError(
                f"{list(permutation)} is not a permutation of 0..{self._size - 1}"
            )
        return perm

    def permute_rows(self, permutation: Sequence[int]) -> Matrix:
        """New matrix where row ``k`` is moved to row ``permutation[k]``."""
        perm = self._validate_permutation(permutation)
        m = Matrix(self._size)
        m._elements[perm, : self._size] = self._elements[: self._size, : self._size]
        return m

    def permute_columns(self, permutation: Sequence[int]) -> Matrix:
        """New matrix where column ``k`` is moved to column ``permutation[k]``."""
        perm = self._validate_permutation(permutation)
        m = Matrix(self._size)
        m._elements[: self._size, perm] = self._elements[: self._size, : self._size]
        return m

    # -- Comparison ---------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_size(other, "compare")
        return bool(np.array_equal(self._elements, other._elements))

    __hash__ = None

    def approx_eq(self, other: Matrix, tol: float = TOLERANCE) -> bool:
        """Elementwise approximate equality, per component (see Complex.approx_eq)."""
        self._require_same_size(other, "compare")
        diff = self._elements - other._elements
        return bool(np.all(np.abs(diff.real) < tol) and np.all(np.abs(diff.imag) < tol))

    def __repr__(self) -> str:
        return f"Matrix(size={self._size})"
