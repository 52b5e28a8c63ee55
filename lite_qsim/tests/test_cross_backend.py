# lite_qsim/tests/test_cross_backend.py
import numpy as np
import pytest

pytest.importorskip("numba")

from lite_qsim.circuit import Circuit

def max_abs_diff(a, b):
    return float(np.max(np.abs(a - b)))

def test_serial_vs_numba_small():
    # 3-qubit mixed circuit
    c = Circuit.empty(3).h(0).x(1).cnot(1,2).h(2).cnot(0,1).x(2).rz(1, 0.4).ry(2, 1.1)
    st_s = c.run(backend="serial")
    st_n = c.run(backend="numba")
    assert max_abs_diff(st_s.as_numpy(), st_n.as_numpy()) < 1e-9

def test_reversed_cnot_matches():
    c = Circuit.empty(3).h(2).cnot(2,0).rx(1, 0.9).cnot(1,2)
    s = c.run(backend="serial")
    t = c.run(backend="numba")
    assert np.allclose(s.as_numpy(), t.as_numpy(), atol=1e-9, rtol=0)

def test_random_circuits_match(random_circuit):
    for n in (1, 4, 7):
        for depth in (5, 10, 20):
            c = random_circuit(n, depth, seed=100*n + depth)
            s = c.run(backend="serial")
            t = c.run(backend="numba")
            assert np.allclose(s.as_numpy(), t.as_numpy(), atol=1e-9, rtol=0)

def test_numba_device_bell():
    from lite_qsim.device import Device
    p = Device(2, backend="numba").run([{"gate": "Hadamard", "wires": [0]},
                                        {"gate": "CX", "wires": [0, 1]}])
    assert np.allclose(p, [0.5, 0, 0, 0.5], atol=1e-12)
