# lite_qsim/circuit.py
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Union
import numpy as np
from .config import DEFAULT_BACKEND, DEFAULT_DTYPE, DEFAULT_PROBABILITY_RULE
from .errors import InvalidOperationError, UnknownGateError
from .gates import matrix_for
from .ops import GateKind, GateOp, hadamard, pauli_x, pauli_z, rx, ry, rz, cnot
from .state import State, check_wire_count

logger = logging.getLogger(__name__)

OpLike = Union[GateOp, Mapping[str, Any]]

def as_op(op: OpLike) -> GateOp:
    if isinstance(op, GateOp):
        return op
    if isinstance(op, Mapping):
        return GateOp.from_dict(op)
    raise InvalidOperationError(f"Not a gate operation: {op!r}")

def load_backend(backend: str):
    """Module exposing apply_single_qubit / apply_CNOT for `backend`."""
    if backend == "serial":
        from . import apply_serial
        return apply_serial
    if backend == "numba":
        try:
            from . import apply_numba
        except ImportError as e:
            raise RuntimeError("Numba backend not available. Did you `pip install numba`?") from e
        return apply_numba
    raise NotImplementedError(f"Unknown backend: {backend}")

@dataclass
class Circuit:
    n: int
    ops: List[GateOp] = field(default_factory=list)

    def __post_init__(self):
        self.n = check_wire_count(self.n)
        self.ops = [as_op(op) for op in self.ops]

    @staticmethod
    def empty(n:int) -> "Circuit":
        return Circuit(n, [])

    @staticmethod
    def from_wire(n: int, records: Iterable[OpLike]) -> "Circuit":
        """Build from wire-format records ({"gate", "wires", "angle"}) or GateOps."""
        if isinstance(records, (str, bytes, Mapping)) or not isinstance(records, Iterable):
            raise InvalidOperationError(f"circuit must be a list of gate operations, got {records!r}")
        return Circuit(n, list(records))

    def append(self, op: OpLike): self.ops.append(as_op(op)); return self
    def h(self, k:int): return self.append(hadamard(k))
    def x(self, k:int): return self.append(pauli_x(k))
    def z(self, k:int): return self.append(pauli_z(k))
    def rx(self, k:int, theta:float): return self.append(rx(k, theta))
    def ry(self, k:int, theta:float): return self.append(ry(k, theta))
    def rz(self, k:int, theta:float): return self.append(rz(k, theta))
    def cnot(self, c:int, t:int): return self.append(cnot(c, t))

    def __len__(self):
        return len(self.ops)

    def validate(self):
        """Check every op against the register before anything is applied."""
        for pos, op in enumerate(self.ops):
            if op.min_wire() < 0 or op.max_wire() >= self.n:
                raise InvalidOperationError(
                    f"op #{pos} {op.name} on wires {list(op.wires)}: "
                    f"wire out of range for {self.n} wire(s)")

    def to_wire(self) -> List[dict]:
        return [op.to_dict() for op in self.ops]

    def run(self, backend:str=DEFAULT_BACKEND, dtype=DEFAULT_DTYPE, check_norm=True,
            check_norm_tol=None) -> State:
        self.validate()
        be = load_backend(backend)
        st = State.zero(self.n, dtype=dtype)
        logger.debug("running %d op(s) on %d wire(s) with %s backend", len(self.ops), self.n, backend)

        for op in self.ops:
            if op.kind is GateKind.CNOT:
                c, t = op.wires
                be.apply_CNOT(st, c, t)
            elif op.kind in (GateKind.HADAMARD, GateKind.PAULI_X, GateKind.PAULI_Z,
                             GateKind.RX, GateKind.RY, GateKind.RZ):
                (k,) = op.wires
                be.apply_single_qubit(st, matrix_for(op, dtype=st.dtype), k)
            else:
                raise UnknownGateError(f"Unknown gate {op.kind!r}")

        if check_norm:
            st.check_normalized(tol=check_norm_tol)
        return st

    def probabilities(self, rule: str = DEFAULT_PROBABILITY_RULE, **run_kwargs) -> np.ndarray:
        return self.run(**run_kwargs).probabilities(rule)
