# lite_qsim/gates.py
import numpy as np
from .complex_ops import phase
from .config import DEFAULT_DTYPE
from .errors import UnknownGateError
from .ops import GateKind, GateOp

def H(dtype=DEFAULT_DTYPE) -> np.ndarray:
    s = np.sqrt(0.5)
    return np.array([[s, s],
                     [s, -s]], dtype=dtype)

def X(dtype=DEFAULT_DTYPE) -> np.ndarray:
    return np.array([[0, 1],
                     [1, 0]], dtype=dtype)

def Z(dtype=DEFAULT_DTYPE) -> np.ndarray:
    return np.array([[1, 0],
                     [0, -1]], dtype=dtype)

def RX(theta: float, dtype=DEFAULT_DTYPE) -> np.ndarray:
    c = np.cos(theta/2.0)
    s = -1j*np.sin(theta/2.0)
    return np.array([[c, s],
                     [s, c]], dtype=dtype)

def RY(theta: float, dtype=DEFAULT_DTYPE) -> np.ndarray:
    c = np.cos(theta/2.0)
    s = np.sin(theta/2.0)
    return np.array([[c, -s],
                     [s, c]], dtype=dtype)

def RZ(theta: float, dtype=DEFAULT_DTYPE) -> np.ndarray:
    return np.array([[phase(-0.5*theta), 0],
                     [0, phase(+0.5*theta)]], dtype=dtype)

# kind -> builder; rotations take the angle as first argument
_FIXED = {
    GateKind.HADAMARD: H,
    GateKind.PAULI_X: X,
    GateKind.PAULI_Z: Z,
}
_ROTATIONS = {
    GateKind.RX: RX,
    GateKind.RY: RY,
    GateKind.RZ: RZ,
}

def matrix_for(op: GateOp, dtype=DEFAULT_DTYPE) -> np.ndarray:
    """2x2 matrix of a single-qubit operation."""
    if op.kind in _FIXED:
        return _FIXED[op.kind](dtype=dtype)
    if op.kind in _ROTATIONS:
        return _ROTATIONS[op.kind](op.angle, dtype=dtype)
    raise UnknownGateError(f"{op.kind.value} has no 2x2 matrix")

def is_unitary(U: np.ndarray, tol: float = 1e-10) -> bool:
    U = np.asarray(U)
    if U.ndim != 2 or U.shape[0] != U.shape[1]:
        return False
    return np.allclose(U.conj().T @ U, np.eye(U.shape[0]), atol=tol, rtol=0)
