# lite_qsim/errors.py


class SimulatorError(Exception):
    """Base class for every error raised by the simulator."""


class WireCountError(SimulatorError, ValueError):
    """Wire count outside [MIN_WIRES, MAX_WIRES]."""


class InvalidOperationError(SimulatorError, ValueError):
    """A gate operation that cannot act on the register (bad wires)."""


class UnknownGateError(SimulatorError, ValueError):
    """Gate name or kind outside the supported set."""
