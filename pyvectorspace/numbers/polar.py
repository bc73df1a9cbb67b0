"""
Complex numbers in polar form.

Multiplication and division have closed forms on (magnitude, phase);
addition and subtraction do not and round-trip through Cartesian form.
Every result has its phase normalized into [0, 2*pi).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from pyvectorspace.core.compute.precision import Precision, DEFAULT_PRECISION, precision_of
from pyvectorspace.numbers import real as real_ops
from pyvectorspace.numbers.cartesian import ComplexNumber
from pyvectorspace.numbers.real import R, RealScalar


def normalize_phase(phase: RealScalar) -> RealScalar:
    """Map a phase into [0, 2*pi)."""
    full_turn = real_ops.PI(precision_of(phase) or DEFAULT_PRECISION) * 2
    normalized = np.mod(phase, full_turn)
    # np.mod can return full_turn itself for tiny negative phases
    if normalized >= full_turn:
        normalized = normalized - full_turn
    return normalized


@dataclass(frozen=True)
class Polar:
    """
    Complex number as magnitude and phase.

    Attributes:
        magnitude: Modulus of the number
        phase: Argument in radians, in [0, 2*pi) for every computed result
    """
    magnitude: RealScalar
    phase: RealScalar

    __array_ufunc__ = None

    @classmethod
    def P(cls, magnitude: Any, phase: Any, precision: Precision | None = None) -> Polar:
        if precision is None:
            precision = precision_of(magnitude) or precision_of(phase) or DEFAULT_PRECISION
        return cls(R(magnitude, precision), R(phase, precision))

    @classmethod
    def from_cartesian(cls, cartesian: Any) -> Polar:
        cartesian = ComplexNumber.coerce(cartesian)
        return cls(
            cartesian.modulus(),
            normalize_phase(real_ops.atan2(cartesian.imaginary, cartesian.real)),
        )

    def to_cartesian(self) -> ComplexNumber:
        return ComplexNumber(
            self.magnitude * real_ops.cos(self.phase),
            self.magnitude * real_ops.sin(self.phase),
        )

    def add(self, other: Polar) -> Polar:
        return Polar.from_cartesian(self.to_cartesian() + other.to_cartesian())

    def subtract(self, other: Polar) -> Polar:
        return Polar.from_cartesian(self.to_cartesian() - other.to_cartesian())

    def multiply(self, other: Polar) -> Polar:
        return Polar(
            self.magnitude * other.magnitude,
            normalize_phase(self.phase + other.phase),
        )

    def divide(self, other: Polar) -> Polar:
        return Polar(
            real_ops.divide(self.magnitude, other.magnitude),
            normalize_phase(self.phase - other.phase),
        )

    def round(self) -> Polar:
        return Polar(real_ops.round_real(self.magnitude), real_ops.round_real(self.phase))

    def __add__(self, other: Any) -> Polar:
        if not isinstance(other, Polar):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Polar:
        if not isinstance(other, Polar):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> Polar:
        if not isinstance(other, Polar):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: Any) -> Polar:
        if not isinstance(other, Polar):
            return NotImplemented
        return self.divide(other)

    def __str__(self) -> str:
        return f"{self.magnitude} * exp({self.phase}i)"


P = Polar.P
