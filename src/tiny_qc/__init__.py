"""
tiny-qc: a small in-memory quantum computer simulator.

Features:
- Fixed-capacity complex matrices and kets (up to 5 qubits)
- Gates as unitary matrices tagged with a qubit width
- One-shot stochastic collapse with an injectable random source
- Lifecycle-checked QuantumComputer facade

Quick Start:
    >>> from tiny_qc import QuantumComputer, gates
    >>> qc = QuantumComputer(1, rng=7)
    >>> qc.run(0, [gates.hadamard()], shots=1000)  # {0: ~500, 1: ~500}
"""
__version__ = "1.0.0"

from .complex import Complex
from .matrix import MAX_SIZE, Matrix
from .ket import Ket, size_for_width
from .gate import Gate
from .registers import ClassicalRegister, QuantumRegister, RegisterState
from .computer import ComputerState, QuantumComputer
from .qubit import Qubit
from .exceptions import (
    QuantumError,
    SizeError,
    SizeMismatchError,
    InvalidPermutationError,
    DimensionMismatch,
    WidthMismatch,
    InvalidBitError,
    RangeError,
    ProtocolViolation,
    InvariantViolation,
)

from . import gates
from . import algorithms

__all__ = [
    # Core
    'Complex',
    'Matrix',
    'MAX_SIZE',
    'Ket',
    'size_for_width',
    'Gate',
    'ClassicalRegister',
    'QuantumRegister',
    'RegisterState',
    'QuantumComputer',
    'ComputerState',
    'Qubit',
    # Errors
    'QuantumError',
    'SizeError',
    'SizeMismatchError',
    'InvalidPermutationError',
    'DimensionMismatch',
    'WidthMismatch',
    'InvalidBitError',
    'RangeError',
    'ProtocolViolation',
    'InvariantViolation',
    # Submodules
    'gates',
    'algorithms',
]
