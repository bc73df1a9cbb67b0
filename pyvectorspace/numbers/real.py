"""
Real scalars.

A RealScalar is a NumPy floating scalar (numpy.float32 or numpy.float64).
The helpers here build and transform them while keeping the precision of
their input, and follow IEEE-754 for domain errors: sqrt of a negative is
NaN, division by zero is +/-Inf. NumPy's floating-point warnings are
silenced because those results are the contract, not accidents.
"""

from __future__ import annotations

from typing import Any, Union

import numpy as np

from pyvectorspace.core.compute.precision import (
    Precision,
    DEFAULT_PRECISION,
    ROUNDING_DIGITS,
    dtype_for,
)

RealScalar = Union[np.float32, np.float64]


def R(value: Any, precision: Precision = DEFAULT_PRECISION) -> RealScalar:
    """
    Build a RealScalar of the given precision.

    Args:
        value: int, float, or NumPy scalar
        precision: 'float32' or 'float64'
    """
    return dtype_for(precision)(value)


def round_real(x: RealScalar) -> RealScalar:
    """Round to ROUNDING_DIGITS decimal places, keeping the precision."""
    return np.round(x, ROUNDING_DIGITS)


def abs_real(x: RealScalar) -> RealScalar:
    return np.abs(x)


def sqrt(x: RealScalar) -> RealScalar:
    """Square root; NaN for negative input."""
    with np.errstate(invalid='ignore'):
        return np.sqrt(x)


def square(x: RealScalar) -> RealScalar:
    with np.errstate(over='ignore'):
        return x * x


def divide(numerator: RealScalar, denominator: RealScalar) -> RealScalar:
    """Division that yields +/-Inf or NaN on a zero denominator."""
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        return np.divide(numerator, denominator)


def sin(x: RealScalar) -> RealScalar:
    return np.sin(x)


def cos(x: RealScalar) -> RealScalar:
    return np.cos(x)


def tan(x: RealScalar) -> RealScalar:
    return np.tan(x)


def atan(x: RealScalar) -> RealScalar:
    return np.arctan(x)


def atan2(y: RealScalar, x: RealScalar) -> RealScalar:
    return np.arctan2(y, x)


def PI(precision: Precision = DEFAULT_PRECISION) -> RealScalar:
    return R(np.pi, precision)
