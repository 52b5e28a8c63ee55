# lite_qsim/tests/conftest.py
import numpy as np
import pytest
from lite_qsim.circuit import Circuit

ONE_QUBIT = ("h", "x", "z", "rx", "ry", "rz")

def build_random_circuit(n, depth, seed=0):
    """Alternate layers: random 1-qubit gate on every wire, then neighbour CNOTs."""
    rng = np.random.default_rng(seed)
    c = Circuit.empty(n)
    for layer in range(depth):
        if layer % 2 == 0:
            for k in range(n):
                g = ONE_QUBIT[int(rng.integers(0, len(ONE_QUBIT)))]
                if g.startswith("r"):
                    getattr(c, g)(k, float(rng.uniform(-np.pi, np.pi)))
                else:
                    getattr(c, g)(k)
        else:
            for k in range(0, n-1, 2):
                if rng.integers(0, 2) == 0:
                    c.cnot(k, k+1)
                else:
                    c.cnot(k+1, k)
    return c

@pytest.fixture
def random_circuit():
    return build_random_circuit
