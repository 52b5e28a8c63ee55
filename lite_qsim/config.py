# lite_qsim/config.py
"""
Default parameters for the simulator.
"""

import numpy as np

# Register size limits (dim = 2**wires <= 128)
MIN_WIRES = 1
MAX_WIRES = 7

DEFAULT_DEVICE = "default.qubit"

BACKENDS = ("serial", "numba")
DEFAULT_BACKEND = "serial"

DEFAULT_DTYPE = np.complex128

# Normalization tolerance for ||psi||^2, per precision
NORM_TOL = 1e-9
NORM_TOL_SINGLE = 1e-5

# "magnitude": re^2 + im^2
# "real_part": re^2 only, matches the mobile app's inline simulator
PROBABILITY_RULES = ("magnitude", "real_part")
DEFAULT_PROBABILITY_RULE = "magnitude"
