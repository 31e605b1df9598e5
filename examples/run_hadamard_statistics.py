"""Example: sample a Hadamard-prepared qubit on tiny-qc."""
from tiny_qc import QuantumComputer, gates

print("=" * 50)
print("tiny-qc: Hadamard Statistics Example")
print("=" * 50)

qc = QuantumComputer(1)
counts = qc.run(0, [gates.hadamard()], shots=1000)

print("\nMeasurement Results:")
for state, count in sorted(counts.items()):
    print(f"  |{state}⟩: {count:4d} ({100*count/1000:5.1f}%)")

print("\nExpected: ~50% |0⟩ and ~50% |1⟩")
