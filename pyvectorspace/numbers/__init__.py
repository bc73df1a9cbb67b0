"""
Scalars.

Real scalars are NumPy float32/float64 values; complex scalars are
ComplexNumber (Cartesian) or Polar. RealField and ComplexField describe
each kind of scalar to the generic vector and matrix code.
"""

from pyvectorspace.numbers.real import R, RealScalar
from pyvectorspace.numbers.cartesian import C, ComplexNumber
from pyvectorspace.numbers.polar import P, Polar, normalize_phase
from pyvectorspace.numbers.fields import (
    RealField,
    ComplexField,
    ScalarField,
    infer_field,
    check_same_field,
)

__all__ = [
    "R",
    "RealScalar",
    "C",
    "ComplexNumber",
    "P",
    "Polar",
    "normalize_phase",
    "RealField",
    "ComplexField",
    "ScalarField",
    "infer_field",
    "check_same_field",
]
