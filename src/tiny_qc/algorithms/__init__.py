"""Worked quantum algorithms built on the QuantumComputer facade."""

from tiny_qc.algorithms.deutsch import DeutschResult, deutsch, deutsch_gate

__all__ = ["DeutschResult", "deutsch", "deutsch_gate"]
