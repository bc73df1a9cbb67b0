"""
Scalar fields.

A ScalarField is the trait that lets a single vector or matrix
implementation run over real and complex entries: it knows the zero and
one of its scalars, how to coerce literals into them, how to conjugate
(identity over the reals) and round them, and how to lay them out in a
flat float buffer for the addition backends.

Two fields exist per precision:
    RealField('float64'), RealField('float32')
    ComplexField('float64'), ComplexField('float32')
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Complex
from typing import Any, Iterable, Sequence

import numpy as np
from numpy.typing import NDArray

from pyvectorspace.core.compute.precision import (
    Precision,
    DEFAULT_PRECISION,
    dtype_for,
    precision_of,
)
from pyvectorspace.core.exceptions import ValidationError
from pyvectorspace.numbers import real as real_ops
from pyvectorspace.numbers.cartesian import ComplexNumber, is_real_value
from pyvectorspace.numbers.real import R, RealScalar


@dataclass(frozen=True)
class RealField:
    """Real scalars of one precision. Conjugation is the identity."""
    precision: Precision = DEFAULT_PRECISION

    is_complex = False

    @property
    def dtype(self) -> type[np.floating[Any]]:
        return dtype_for(self.precision)

    @property
    def name(self) -> str:
        return f"real_{self.precision}"

    def zero(self) -> RealScalar:
        return R(0, self.precision)

    def one(self) -> RealScalar:
        return R(1, self.precision)

    def coerce(self, value: Any) -> RealScalar:
        """
        Convert a real literal into this field.

        Raises:
            ValidationError: For complex or non-numeric values
        """
        if is_real_value(value):
            return R(value, self.precision)
        raise ValidationError(
            f"{self.name}: cannot use {type(value).__name__} value {value!s} as a real scalar"
        )

    def coerce_scalar(self, value: Any) -> Any:
        """Coerce a multiplier; real fields only accept real multipliers."""
        return self.coerce(value)

    def conjugate(self, value: RealScalar) -> RealScalar:
        return value

    def round(self, value: RealScalar) -> RealScalar:
        return real_ops.round_real(value)

    def real_part(self, value: RealScalar) -> RealScalar:
        return value

    def sqrt_real(self, value: RealScalar) -> RealScalar:
        return real_ops.sqrt(value)

    def reciprocal_real(self, value: RealScalar) -> RealScalar:
        return real_ops.divide(self.one(), value)

    def to_buffer(self, entries: Iterable[RealScalar]) -> NDArray[np.floating[Any]]:
        return np.ascontiguousarray(np.fromiter(entries, dtype=self.dtype))

    def from_buffer(self, buffer: NDArray[np.floating[Any]]) -> tuple[RealScalar, ...]:
        return tuple(self.dtype(x) for x in buffer)


@dataclass(frozen=True)
class ComplexField:
    """Complex scalars whose components have one precision."""
    precision: Precision = DEFAULT_PRECISION

    is_complex = True

    @property
    def dtype(self) -> type[np.floating[Any]]:
        return dtype_for(self.precision)

    @property
    def name(self) -> str:
        return f"complex_{self.precision}"

    def zero(self) -> ComplexNumber:
        return ComplexNumber.zero(self.precision)

    def one(self) -> ComplexNumber:
        return ComplexNumber.one(self.precision)

    def coerce(self, value: Any) -> ComplexNumber:
        return ComplexNumber.coerce(value, self.precision)

    def coerce_scalar(self, value: Any) -> Any:
        """
        Coerce a multiplier.

        Real multipliers stay real so that scaling a complex entry
        multiplies both components, rather than going through the full
        complex product.
        """
        if is_real_value(value):
            return R(value, self.precision)
        return self.coerce(value)

    def conjugate(self, value: ComplexNumber) -> ComplexNumber:
        return value.conjugate()

    def round(self, value: ComplexNumber) -> ComplexNumber:
        return value.round()

    def real_part(self, value: ComplexNumber) -> RealScalar:
        return value.real

    def sqrt_real(self, value: RealScalar) -> RealScalar:
        return real_ops.sqrt(value)

    def reciprocal_real(self, value: RealScalar) -> RealScalar:
        return real_ops.divide(R(1, self.precision), value)

    def to_buffer(self, entries: Iterable[ComplexNumber]) -> NDArray[np.floating[Any]]:
        """Interleave (real, imaginary) pairs into one flat buffer."""
        flat = (part for entry in entries for part in (entry.real, entry.imaginary))
        return np.ascontiguousarray(np.fromiter(flat, dtype=self.dtype))

    def from_buffer(self, buffer: NDArray[np.floating[Any]]) -> tuple[ComplexNumber, ...]:
        pairs = buffer.reshape(-1, 2)
        return tuple(
            ComplexNumber(self.dtype(re), self.dtype(im)) for re, im in pairs
        )


ScalarField = RealField | ComplexField


def _is_complex_literal(value: Any) -> bool:
    if isinstance(value, (ComplexNumber, tuple, np.complexfloating)):
        return True
    return isinstance(value, Complex) and not is_real_value(value)


def _precision_of_value(value: Any) -> Precision | None:
    if isinstance(value, ComplexNumber):
        return value.precision
    if isinstance(value, np.complex64):
        return 'float32'
    if isinstance(value, np.complex128):
        return 'float64'
    return precision_of(value)


def infer_field(
    values: Sequence[Any],
    precision: Precision | None = None,
) -> ScalarField:
    """
    Pick the field for a collection of literal entries.

    The field is complex if any value is a ComplexNumber, a tuple or a
    complex literal, and real otherwise. Precision is the one requested,
    else that of the first NumPy-typed value, else float64.
    """
    is_complex = any(_is_complex_literal(v) for v in values)
    if precision is None:
        precision = next(
            (p for p in (_precision_of_value(v) for v in values) if p is not None),
            DEFAULT_PRECISION,
        )
    else:
        dtype_for(precision)
    return ComplexField(precision) if is_complex else RealField(precision)


def check_same_field(left: ScalarField, right: ScalarField, operation: str) -> None:
    """
    Verify two operands share a scalar field.

    Raises:
        ValidationError: If the fields differ in kind or precision
    """
    if left != right:
        raise ValidationError(
            f"{operation}: scalar fields differ (left={left.name}, right={right.name})"
        )
