# lite_qsim/device.py
"""
Simulator handle for a fixed register of 1-7 wires.

    >>> dev = create_device("default.qubit", wires=2)
    >>> dev.run([{"gate": "Hadamard", "wires": [0]},
    ...          {"gate": "CNOT", "wires": [0, 1]}])
    array([0.5, 0. , 0. , 0.5])

Every call to run() builds a fresh state vector, so a device can be reused
and holds no amplitudes between runs.
"""
import logging
from enum import Enum
from typing import Iterable, Union
import numpy as np
from .circuit import Circuit, OpLike, load_backend
from .config import (DEFAULT_BACKEND, DEFAULT_DEVICE, DEFAULT_DTYPE,
                     DEFAULT_PROBABILITY_RULE, PROBABILITY_RULES, BACKENDS)
from .state import check_wire_count

logger = logging.getLogger(__name__)

class RunStatus(Enum):
    IDLE = "idle"
    COMPLETED = "completed"

class Device:
    def __init__(self, wires: int, name: str = DEFAULT_DEVICE, backend: str = DEFAULT_BACKEND,
                 probability_rule: str = DEFAULT_PROBABILITY_RULE, dtype=DEFAULT_DTYPE):
        self.wires = check_wire_count(wires)
        if backend not in BACKENDS:
            raise NotImplementedError(f"Unknown backend: {backend}")
        if probability_rule not in PROBABILITY_RULES:
            raise ValueError(f"Unknown probability rule {probability_rule!r}, "
                             f"expected one of {PROBABILITY_RULES}")
        if probability_rule == "real_part":
            logger.warning("probability_rule='real_part' squares only the real part; "
                           "results drop imaginary components and may not sum to 1")
        self.name = name
        self.backend = backend
        self.probability_rule = probability_rule
        self.dtype = dtype
        self.status = RunStatus.IDLE
        # fail at construction rather than on the first run
        load_backend(backend)

    @property
    def dim(self) -> int:
        return 1 << self.wires

    def __repr__(self):
        return f"Device({self.name!r}, wires={self.wires}, backend={self.backend!r})"

    def _circuit(self, circuit: Union[Circuit, Iterable[OpLike]]) -> Circuit:
        if isinstance(circuit, Circuit):
            if circuit.n != self.wires:
                # ops are re-checked against this device's register
                return Circuit(self.wires, list(circuit.ops))
            return circuit
        return Circuit.from_wire(self.wires, circuit)

    def run(self, circuit: Union[Circuit, Iterable[OpLike]] = ()) -> np.ndarray:
        """Apply `circuit` to |0...0> and return one probability per basis index."""
        circ = self._circuit(circuit)
        st = circ.run(backend=self.backend, dtype=self.dtype)
        probs = st.probabilities(self.probability_rule)
        self.status = RunStatus.COMPLETED
        logger.debug("%r completed %d op(s)", self, len(circ))
        return probs

    async def arun(self, circuit: Union[Circuit, Iterable[OpLike]] = ()) -> np.ndarray:
        """Coroutine form of run() for event-loop hosts; the work itself is synchronous."""
        return self.run(circuit)

def create_device(name: str = DEFAULT_DEVICE, wires: int = 1, **kwargs) -> Device:
    return Device(wires, name=name, **kwargs)
