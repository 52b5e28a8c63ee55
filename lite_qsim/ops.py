# lite_qsim/ops.py
"""
Gate operations: the closed set of gate kinds and the immutable ops a
circuit is made of.

Wire format used by the host application (one record per op)::

    {"gate": "RX", "wires": [0], "angle": 1.57}
    {"gate": "CNOT", "wires": [0, 1]}

``angle`` is optional and only read by the rotations. ``"CX"`` is accepted
as an alias of ``"CNOT"``.
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from numbers import Integral, Real
from typing import Any, Dict, Mapping, Tuple

from .errors import InvalidOperationError, UnknownGateError

class GateKind(Enum):
    HADAMARD = "Hadamard"
    PAULI_X = "PauliX"
    PAULI_Z = "PauliZ"
    RX = "RX"
    RY = "RY"
    RZ = "RZ"
    CNOT = "CNOT"

    @property
    def arity(self) -> int:
        return 2 if self is GateKind.CNOT else 1

    @property
    def parametrized(self) -> bool:
        return self in (GateKind.RX, GateKind.RY, GateKind.RZ)

ALIASES = {"CX": GateKind.CNOT}

def kind_from_name(name: str) -> GateKind:
    if not isinstance(name, str):
        raise UnknownGateError(f"Gate name must be a string, got {name!r}")
    if name in ALIASES:
        return ALIASES[name]
    try:
        return GateKind(name)
    except ValueError:
        raise UnknownGateError(f"Unknown gate {name!r}") from None

@dataclass(frozen=True)
class GateOp:
    kind: GateKind
    wires: Tuple[int, ...]
    angle: float = field(default=0.0)

    def __post_init__(self):
        if not isinstance(self.kind, GateKind):
            raise UnknownGateError(f"Unknown gate {self.kind!r}")
        if not isinstance(self.wires, (tuple, list)):
            raise InvalidOperationError(f"{self.kind.value}: wires must be a list, got {self.wires!r}")
        wires = tuple(self.wires)
        for w in wires:
            if isinstance(w, bool) or not isinstance(w, Integral):
                raise InvalidOperationError(f"{self.kind.value}: wire {w!r} is not an integer")
        if len(wires) != self.kind.arity:
            raise InvalidOperationError(
                f"{self.kind.value} acts on {self.kind.arity} wire(s), got {len(wires)}")
        if self.kind is GateKind.CNOT and wires[0] == wires[1]:
            raise InvalidOperationError("control and target must differ")
        if isinstance(self.angle, bool) or not isinstance(self.angle, Real):
            raise InvalidOperationError(f"{self.kind.value}: angle {self.angle!r} is not a number")
        if not math.isfinite(self.angle):
            raise InvalidOperationError(f"{self.kind.value}: angle {self.angle!r} is not finite")
        # frozen: go through object.__setattr__ to normalize
        object.__setattr__(self, "wires", tuple(int(w) for w in wires))
        object.__setattr__(self, "angle", float(self.angle))

    @property
    def name(self) -> str:
        return self.kind.value

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "GateOp":
        """Parse one wire-format record."""
        try:
            name = record["gate"]
            wires = record["wires"]
        except KeyError as e:
            raise InvalidOperationError(f"gate record is missing {e.args[0]!r}: {record!r}") from None
        angle = record.get("angle")
        if angle is None:
            angle = 0.0
        if isinstance(wires, Integral) and not isinstance(wires, bool):
            wires = (wires,)
        if not isinstance(wires, (tuple, list)):
            raise InvalidOperationError(f"gate record has bad wires {wires!r}: {record!r}")
        return cls(kind_from_name(name), tuple(wires), angle)

    def to_dict(self) -> Dict[str, Any]:
        out = {"gate": self.kind.value, "wires": list(self.wires)}
        if self.kind.parametrized:
            out["angle"] = self.angle
        return out

    def max_wire(self) -> int:
        return max(self.wires)

    def min_wire(self) -> int:
        return min(self.wires)

# ---------------------------- constructors ----------------------------

def hadamard(wire: int) -> GateOp: return GateOp(GateKind.HADAMARD, (wire,))
def pauli_x(wire: int) -> GateOp: return GateOp(GateKind.PAULI_X, (wire,))
def pauli_z(wire: int) -> GateOp: return GateOp(GateKind.PAULI_Z, (wire,))
def rx(wire: int, angle: float) -> GateOp: return GateOp(GateKind.RX, (wire,), angle)
def ry(wire: int, angle: float) -> GateOp: return GateOp(GateKind.RY, (wire,), angle)
def rz(wire: int, angle: float) -> GateOp: return GateOp(GateKind.RZ, (wire,), angle)
def cnot(control: int, target: int) -> GateOp: return GateOp(GateKind.CNOT, (control, target))
