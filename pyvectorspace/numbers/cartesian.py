"""
Complex numbers in Cartesian form.

ComplexNumber is an immutable pair of RealScalars of one precision. It
accepts plain Python numbers, 2-tuples of numeric literals and Python
complex values wherever a complex operand is expected, so that
``C(5, 7) * (11, 13)`` and ``2 * C(1, 1)`` both work.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real, Complex
from typing import Any, ClassVar

import numpy as np

from pyvectorspace.core.compute.precision import (
    Precision,
    DEFAULT_PRECISION,
    precision_of,
)
from pyvectorspace.core.exceptions import ValidationError
from pyvectorspace.numbers import real as real_ops
from pyvectorspace.numbers.real import R, RealScalar


def is_real_value(value: Any) -> bool:
    """True for Python and NumPy real numbers (bool excluded)."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (Real, np.integer, np.floating))


@dataclass(frozen=True)
class ComplexNumber:
    """
    Complex number a + bi with RealScalar components.

    Attributes:
        real: Real part (numpy.float32 or numpy.float64)
        imaginary: Imaginary part, same precision as real

    Construct with ComplexNumber.C(real, imaginary) rather than the raw
    initializer, which does not coerce its arguments.
    """
    real: RealScalar
    imaginary: RealScalar

    # NumPy scalars defer to our reflected operators instead of
    # broadcasting over us as an object.
    __array_ufunc__ = None

    ZERO: ClassVar[ComplexNumber]
    ONE: ClassVar[ComplexNumber]
    NEGATIVE_ONE: ClassVar[ComplexNumber]
    TWO: ClassVar[ComplexNumber]

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def C(
        cls,
        real_part: Any,
        imaginary_part: Any = 0,
        precision: Precision | None = None,
    ) -> ComplexNumber:
        """
        Build a complex number from two real values.

        Precision defaults to that of the NumPy components supplied, else
        float64.
        """
        if precision is None:
            precision = (
                precision_of(real_part)
                or precision_of(imaginary_part)
                or DEFAULT_PRECISION
            )
        return cls(R(real_part, precision), R(imaginary_part, precision))

    @classmethod
    def coerce(cls, value: Any, precision: Precision | None = None) -> ComplexNumber:
        """
        Implicit conversion to ComplexNumber.

        Accepts a ComplexNumber, a real number, a (real, imaginary) tuple,
        or a Python/NumPy complex.

        Raises:
            ValidationError: If value cannot be read as a complex number
        """
        if isinstance(value, ComplexNumber):
            if precision is None or value.precision == precision:
                return value
            return cls.C(value.real, value.imaginary, precision)
        if isinstance(value, tuple):
            if len(value) != 2:
                raise ValidationError(
                    f"complex tuple must have 2 entries (real, imaginary), got {len(value)}"
                )
            return cls.C(value[0], value[1], precision)
        if is_real_value(value):
            return cls.C(value, 0, precision)
        if isinstance(value, (Complex, np.complexfloating)):
            if precision is None and isinstance(value, np.complex64):
                precision = 'float32'
            return cls.C(value.real, value.imag, precision)
        raise ValidationError(
            f"cannot interpret {type(value).__name__} as a complex number"
        )

    @classmethod
    def zero(cls, precision: Precision = DEFAULT_PRECISION) -> ComplexNumber:
        return cls.C(0, 0, precision)

    @classmethod
    def one(cls, precision: Precision = DEFAULT_PRECISION) -> ComplexNumber:
        return cls.C(1, 0, precision)

    @classmethod
    def negative_one(cls, precision: Precision = DEFAULT_PRECISION) -> ComplexNumber:
        return cls.C(-1, 0, precision)

    @classmethod
    def two(cls, precision: Precision = DEFAULT_PRECISION) -> ComplexNumber:
        return cls.C(2, 0, precision)

    @property
    def precision(self) -> Precision:
        return precision_of(self.real) or DEFAULT_PRECISION

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Any) -> ComplexNumber:
        other = ComplexNumber.coerce(other, self.precision)
        return ComplexNumber(self.real + other.real, self.imaginary + other.imaginary)

    def subtract(self, other: Any) -> ComplexNumber:
        other = ComplexNumber.coerce(other, self.precision)
        return ComplexNumber(self.real - other.real, self.imaginary - other.imaginary)

    def multiply(self, other: Any) -> ComplexNumber:
        """(a+bi)(c+di) = (ac-bd) + (ad+bc)i; a real operand scales both parts."""
        if is_real_value(other):
            return self.scale(other)
        other = ComplexNumber.coerce(other, self.precision)
        with np.errstate(over='ignore', invalid='ignore'):
            return ComplexNumber(
                self.real * other.real - self.imaginary * other.imaginary,
                self.real * other.imaginary + other.real * self.imaginary,
            )

    def scale(self, factor: Any) -> ComplexNumber:
        """Multiply both components by a real factor."""
        factor = R(factor, self.precision)
        with np.errstate(over='ignore', invalid='ignore'):
            return ComplexNumber(self.real * factor, self.imaginary * factor)

    def divide(self, denominator: Any) -> ComplexNumber:
        """
        Divide by conjugate multiplication.

        numerator * conj(d) is divided componentwise by the real part of
        d * conj(d). The imaginary part of d * conj(d) is a*(-b) + a*b, which
        is exactly zero in IEEE arithmetic, so dropping it loses nothing.
        A zero denominator produces NaN/Inf components.
        """
        denominator = ComplexNumber.coerce(denominator, self.precision)
        conjugate = denominator.conjugate()
        numerator_product = self.multiply(conjugate)
        denominator_product = denominator.multiply(conjugate)
        return ComplexNumber(
            real_ops.divide(numerator_product.real, denominator_product.real),
            real_ops.divide(numerator_product.imaginary, denominator_product.real),
        )

    def conjugate(self) -> ComplexNumber:
        return ComplexNumber(self.real, -self.imaginary)

    def modulus(self) -> RealScalar:
        """sqrt(re^2 + im^2)"""
        return real_ops.sqrt(real_ops.square(self.real) + real_ops.square(self.imaginary))

    def square(self) -> ComplexNumber:
        return self.multiply(self)

    def additive_inverse(self) -> ComplexNumber:
        return ComplexNumber(-self.real, -self.imaginary)

    def round(self) -> ComplexNumber:
        """Round both components to six decimal places independently."""
        return ComplexNumber(real_ops.round_real(self.real), real_ops.round_real(self.imaginary))

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def _coercible(self, other: Any) -> bool:
        return isinstance(other, (ComplexNumber, tuple, Complex, np.number))

    def __add__(self, other: Any) -> ComplexNumber:
        if not self._coercible(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> ComplexNumber:
        if not self._coercible(other):
            return NotImplemented
        return ComplexNumber.coerce(other, self.precision).add(self)

    def __sub__(self, other: Any) -> ComplexNumber:
        if not self._coercible(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> ComplexNumber:
        if not self._coercible(other):
            return NotImplemented
        return ComplexNumber.coerce(other, self.precision).subtract(self)

    def __mul__(self, other: Any) -> ComplexNumber:
        if not self._coercible(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> ComplexNumber:
        if not self._coercible(other):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: Any) -> ComplexNumber:
        if not self._coercible(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: Any) -> ComplexNumber:
        if not self._coercible(other):
            return NotImplemented
        return ComplexNumber.coerce(other, self.precision).divide(self)

    def __neg__(self) -> ComplexNumber:
        return self.additive_inverse()

    def __abs__(self) -> RealScalar:
        return self.modulus()

    def __complex__(self) -> complex:
        return complex(float(self.real), float(self.imaginary))

    def __str__(self) -> str:
        return f"({self.real}, {self.imaginary})"


ComplexNumber.ZERO = ComplexNumber.zero()
ComplexNumber.ONE = ComplexNumber.one()
ComplexNumber.NEGATIVE_ONE = ComplexNumber.negative_one()
ComplexNumber.TWO = ComplexNumber.two()

C = ComplexNumber.C
