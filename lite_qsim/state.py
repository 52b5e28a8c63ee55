# lite_qsim/state.py
import numpy as np
from dataclasses import dataclass
from .config import (MIN_WIRES, MAX_WIRES, DEFAULT_DTYPE, NORM_TOL, NORM_TOL_SINGLE,
                     PROBABILITY_RULES, DEFAULT_PROBABILITY_RULE)
from .errors import WireCountError

def check_wire_count(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise WireCountError(f"wire count must be an integer, got {n!r}")
    if not (MIN_WIRES <= n <= MAX_WIRES):
        raise WireCountError(f"Supports {MIN_WIRES}-{MAX_WIRES} qubits, got {n}")
    return int(n)

def default_tol(dtype) -> float:
    return NORM_TOL_SINGLE if np.dtype(dtype) == np.complex64 else NORM_TOL

@dataclass
class State:
    n: int
    psi: np.ndarray  # shape (2**n,), bit k of the index = wire k

    @staticmethod
    def zero(n: int, dtype=DEFAULT_DTYPE) -> "State":
        n = check_wire_count(n)
        N = 1 << n
        psi = np.zeros(N, dtype=dtype)
        psi[0] = 1.0 + 0.0j
        return State(n=n, psi=psi)

    @property
    def dtype(self):
        return self.psi.dtype

    @property
    def dim(self) -> int:
        return self.psi.shape[0]

    def norm2(self) -> float:
        return float(np.vdot(self.psi, self.psi).real)

    def check_normalized(self, tol=None):
        if tol is None:
            tol = default_tol(self.dtype)
        n2 = self.norm2()
        if not (abs(1.0 - n2) <= tol):
            raise AssertionError(f"Normalization failed: ||psi||^2={n2}")

    def probabilities(self, rule: str = DEFAULT_PROBABILITY_RULE) -> np.ndarray:
        """
        Measurement probability per basis index, as a new float64 array.
        rule="magnitude" gives |a|^2; rule="real_part" gives Re(a)^2.
        """
        if rule == "magnitude":
            return (np.abs(self.psi)**2).astype(np.float64)
        if rule == "real_part":
            return (self.psi.real**2).astype(np.float64)
        raise ValueError(f"Unknown probability rule {rule!r}, expected one of {PROBABILITY_RULES}")

    def copy(self) -> "State":
        return State(self.n, self.psi.copy())

    def as_numpy(self) -> np.ndarray:
        return self.psi
