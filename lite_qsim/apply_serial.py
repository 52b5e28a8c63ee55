# lite_qsim/apply_serial.py
import numpy as np
from .complex_ops import add, multiply
from .state import State

def apply_single_qubit(state: State, U2: np.ndarray, k: int):
    """Apply 2x2 gate U2 to wire k (little-endian: bit k)."""
    psi = state.psi
    assert U2.shape == (2,2)
    m00, m01, m10, m11 = (complex(u) for u in U2.ravel())
    mk = 1 << k
    # visit each pair once, from its bit-k-clear member
    for i in range(psi.shape[0]):
        if i & mk:
            continue
        j = i | mk
        a0 = psi[i]
        a1 = psi[j]
        psi[i] = add(multiply(m00, a0), multiply(m01, a1))
        psi[j] = add(multiply(m10, a0), multiply(m11, a1))

def apply_CNOT(state: State, control: int, target: int):
    """Flip wire `target` where wire `control` is 1, as a swap of amplitudes."""
    if control == target:
        raise ValueError("control and target must differ")
    psi = state.psi
    mc = 1 << control
    mt = 1 << target
    for i in range(psi.shape[0]):
        if (i & mc) and not (i & mt):
            j = i | mt
            psi[i], psi[j] = psi[j], psi[i]
