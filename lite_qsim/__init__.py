# lite_qsim/__init__.py
"""Small state-vector simulator for 1-7 wire circuits."""
from .errors import SimulatorError, WireCountError, InvalidOperationError, UnknownGateError
from .ops import GateKind, GateOp, hadamard, pauli_x, pauli_z, rx, ry, rz, cnot
from .state import State
from .circuit import Circuit
from .device import Device, RunStatus, create_device

__version__ = "0.1.0"
