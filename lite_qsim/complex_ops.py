# lite_qsim/complex_ops.py
"""Scalar complex arithmetic used by the serial kernels and the gate library."""
import numpy as np


def add(a: complex, b: complex) -> complex:
    return complex(a.real + b.real, a.imag + b.imag)


def multiply(a: complex, b: complex) -> complex:
    return complex(a.real*b.real - a.imag*b.imag,
                   a.real*b.imag + a.imag*b.real)


def phase(theta: float) -> complex:
    """e^{i theta} as (cos theta, sin theta)."""
    return complex(np.cos(theta), np.sin(theta))
