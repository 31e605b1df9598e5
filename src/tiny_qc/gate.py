"""Quantum gate: a unitary matrix tagged with the number of qubits it acts on."""

from __future__ import annotations

from typing import Sequence

from tiny_qc.exceptions import DimensionMismatch
from tiny_qc.ket import size_for_width
from tiny_qc.matrix import Matrix


class Gate:
    """
    Register transformation of ``width`` qubits.

    The matrix is copied on construction, so later edits to the caller's
    matrix do not affect the gate, and the gate can be applied any number
    of times.

    Unitarity is not checked; callers are trusted to supply a unitary
    matrix.

    Parameters
    ----------
    width : int
        Number of qubits acted on.
    matrix : Matrix
        Computational-basis matrix of size ``2**width``.

    Raises
    ------
    DimensionMismatch
        If ``matrix.size != 2**width``.
    """

    __slots__ = ("_width", "_matrix")

    def __init__(self, width: int, matrix: Matrix) -> None:
        expected = size_for_width(width)
        if matrix.size != expected:
            raise DimensionMismatch(
                f"A {width}-qubit gate needs a {expected}x{expected} matrix, "
                f"got {matrix.size}x{matrix.size}"
            )
        self._width = width
        self._matrix = matrix.copy()

    @property
    def width(self) -> int:
        return self._width

    @property
    def matrix(self) -> Matrix:
        return self._matrix

    def permute(self, permutation: Sequence[int]) -> Gate:
        """
        Reposition the gate by permuting the rows of its matrix.

        Row ``k`` of the matrix moves to row ``permutation[k]``.
        ``permutation`` must be a permutation of ``0..2**width - 1``.
        """
        return Gate(self._width, self._matrix.permute_rows(permutation))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Gate):
            return NotImplemented
        return self._width == other._width and self._matrix == other._matrix

    __hash__ = None

    def __repr__(self) -> str:
        return f"Gate(width={self._width})"
