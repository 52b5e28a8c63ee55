# lite_qsim/tests/test_gates.py
import numpy as np
import pytest
from lite_qsim import gates as G
from lite_qsim.complex_ops import add, multiply, phase
from lite_qsim.errors import UnknownGateError
from lite_qsim.ops import hadamard, rz, cnot

def test_complex_add_and_multiply():
    assert add(1+2j, 3-1j) == 4+1j
    assert multiply(1j, 1j) == -1
    assert multiply(2+3j, 4-5j) == (2+3j)*(4-5j)

def test_phase_is_unit_exponential():
    for theta in (0.0, 0.5, np.pi/2, -3.0):
        z = phase(theta)
        assert abs(abs(z) - 1.0) < 1e-15
        assert abs(z - np.exp(1j*theta)) < 1e-15

@pytest.mark.parametrize("U", [
    G.H(), G.X(), G.Z(), G.RX(0.3), G.RY(-1.2), G.RZ(2.0), G.RX(7.0),
])
def test_gates_are_unitary(U):
    assert U.shape == (2, 2)
    assert U.dtype == np.complex128
    assert G.is_unitary(U)

def test_is_unitary_rejects():
    assert not G.is_unitary(np.array([[1, 1], [0, 1]]))
    assert not G.is_unitary(np.ones((2, 3)))

def test_rotation_matrices():
    theta = 0.8
    c, s = np.cos(theta/2), np.sin(theta/2)
    assert np.allclose(G.RX(theta), [[c, -1j*s], [-1j*s, c]])
    assert np.allclose(G.RY(theta), [[c, -s], [s, c]])
    assert np.allclose(G.RZ(theta), [[np.exp(-0.5j*theta), 0], [0, np.exp(0.5j*theta)]])

def test_matrix_for_dispatch():
    assert np.allclose(G.matrix_for(hadamard(0)), G.H())
    assert np.allclose(G.matrix_for(rz(0, 1.5)), G.RZ(1.5))
    assert G.matrix_for(hadamard(0), dtype=np.complex64).dtype == np.complex64

def test_cnot_has_no_matrix():
    with pytest.raises(UnknownGateError):
        G.matrix_for(cnot(0, 1))
