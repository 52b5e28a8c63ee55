# lite_qsim/apply_numba.py
import numpy as np
from numba import njit
from .state import State

# ---------- low-level kernels (Numba JIT, single-threaded) ----------

@njit
def _single_qubit_kernel(psi, U2, k):
    mk = 1 << k
    m00 = U2[0,0]; m01 = U2[0,1]; m10 = U2[1,0]; m11 = U2[1,1]
    for i in range(psi.shape[0]):
        if i & mk:
            continue
        j = i | mk
        a0 = psi[i]
        a1 = psi[j]
        psi[i] = m00*a0 + m01*a1
        psi[j] = m10*a0 + m11*a1

@njit
def _cnot_kernel(psi, control, target):
    mc = 1 << control
    mt = 1 << target
    # each i with control=1, target=0 owns the swap with i|mt
    for i in range(psi.shape[0]):
        if (i & mc) != 0 and (i & mt) == 0:
            j = i | mt
            a = psi[i]
            psi[i] = psi[j]
            psi[j] = a

# ---------- user-facing apply helpers ----------

def apply_single_qubit(state: State, U2: np.ndarray, k: int):
    _single_qubit_kernel(state.psi, U2.astype(state.dtype), k)

def apply_CNOT(state: State, control: int, target: int):
    if control == target:
        raise ValueError("control and target must differ")
    _cnot_kernel(state.psi, control, target)
