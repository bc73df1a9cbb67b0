"""
Row and column vectors.

One implementation serves real and complex entries of either precision:
the entry type is described by the vector's ScalarField, which supplies
zero, coercion, conjugation and rounding. Vectors are immutable; every
operation returns a new vector.

Construction:
    RowVector.U([1, 3])                      real, float64
    ColumnVector.V([(1, 2), (3, -1)])        complex, float64
    RowVector.U([1, 3], precision='float32')
    RowVector.from_function(4, lambda i: i * i)
    ColumnVector.zero(3, ComplexField())
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Complex
from typing import Any, Callable, Iterable, Iterator, TYPE_CHECKING

import numpy as np

from pyvectorspace import algebra
from pyvectorspace.core.capabilities import (
    CAPABILITY_COMPLEX,
    CAPABILITY_CONJUGATE,
    CAPABILITY_INNER_PRODUCT,
)
from pyvectorspace.core.compute.precision import Precision
from pyvectorspace.core.exceptions import ValidationError
from pyvectorspace.core.validation import check_same_length, check_non_negative
from pyvectorspace.matrices.backends import BackendLike, add_buffers
from pyvectorspace.numbers.cartesian import ComplexNumber
from pyvectorspace.numbers.fields import (
    RealField,
    ScalarField,
    check_same_field,
    infer_field,
)
from pyvectorspace.numbers.real import RealScalar

if TYPE_CHECKING:
    from pyvectorspace.matrices.square_matrix import SquareMatrix


def is_scalar(value: Any) -> bool:
    """True for anything a vector or matrix can be multiplied by as a scalar."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (ComplexNumber, Complex, np.number))


@dataclass(frozen=True, eq=False)
class _Vector:
    """
    Fixed-length sequence of scalars from one field.

    RowVector and ColumnVector share this implementation and differ only
    in which type transpose() produces and in how they combine with
    matrices.
    """
    entries: tuple[Any, ...]
    field: ScalarField

    __array_ufunc__ = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[Any],
        precision: Precision | None = None,
        field: ScalarField | None = None,
    ):
        """
        Build a vector from literal entries.

        Args:
            entries: Real literals, ComplexNumbers, (real, imaginary)
                tuples or Python complex values
            precision: 'float32' or 'float64'; inferred if omitted
            field: Explicit field, overriding inference and precision

        Raises:
            ValidationError: If an entry cannot be placed in the field
        """
        values = list(entries)
        if field is None:
            field = infer_field(values, precision)
        return cls(tuple(field.coerce(v) for v in values), field)

    @classmethod
    def from_function(
        cls,
        length: int,
        initializer: Callable[[int], Any],
        field: ScalarField | None = None,
    ):
        """Build a vector whose entry i is initializer(i)."""
        check_non_negative(length, 'length')
        return cls.from_entries((initializer(i) for i in range(length)), field=field)

    @classmethod
    def zero(cls, length: int, field: ScalarField | None = None):
        check_non_negative(length, 'length')
        field = field or RealField()
        return cls(tuple(field.zero() for _ in range(length)), field)

    # ------------------------------------------------------------------
    # Shape and access
    # ------------------------------------------------------------------

    @property
    def length(self) -> int:
        return len(self.entries)

    @property
    def precision(self) -> Precision:
        return self.field.precision

    @property
    def is_complex(self) -> bool:
        return self.field.is_complex

    def supports(self, capability: str) -> bool:
        if capability in (CAPABILITY_CONJUGATE, CAPABILITY_INNER_PRODUCT):
            return True
        if capability == CAPABILITY_COMPLEX:
            return self.field.is_complex
        return False

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> Any:
        return self.entries[index]

    def _check_compatible(self, other: Any, operation: str) -> None:
        if type(other) is not type(self):
            raise ValidationError(
                f"{operation}: expected {type(self).__name__}, got {type(other).__name__}"
            )
        check_same_length(self.length, other.length, operation)
        check_same_field(self.field, other.field, operation)

    def _with_entries(self, entries: Iterable[Any]):
        return type(self)(tuple(entries), self.field)

    # ------------------------------------------------------------------
    # Elementwise operations
    # ------------------------------------------------------------------

    def map(self, element_mapping: Callable[[Any], Any]):
        """Apply element_mapping to every entry, keeping the field."""
        return self._with_entries(self.field.coerce(element_mapping(e)) for e in self.entries)

    def zip(self, other, element_mapping: Callable[[Any, Any], Any]):
        """Combine entries pairwise. Lengths must match."""
        self._check_compatible(other, 'zip')
        return self._with_entries(
            self.field.coerce(element_mapping(a, b))
            for a, b in zip(self.entries, other.entries)
        )

    def add(self, other, *, backend: BackendLike = None):
        """
        Entrywise sum, computed by the selected addition backend.

        Raises:
            DimensionError: If the lengths differ
            AcceleratorError: If the GPU backend reports a failure
        """
        self._check_compatible(other, 'add')
        result = add_buffers(
            self.field.to_buffer(self.entries),
            other.field.to_buffer(other.entries),
            backend,
        )
        return self._with_entries(self.field.from_buffer(result))

    def subtract(self, other):
        self._check_compatible(other, 'subtract')
        return self._with_entries(a - b for a, b in zip(self.entries, other.entries))

    def additive_inverse(self):
        return self._with_entries(-e for e in self.entries)

    def scale(self, scalar: Any):
        """
        Multiply every entry by a scalar.

        Complex vectors accept real and complex scalars; real vectors only
        real ones.
        """
        scalar = self.field.coerce_scalar(scalar)
        with np.errstate(over='ignore', invalid='ignore'):
            return self._with_entries(scalar * e for e in self.entries)

    def multiply(self, scalar: Any):
        """Scalar multiplication; same as scale()."""
        return self.scale(scalar)

    def round(self):
        """Round every entry to six decimal places."""
        return self._with_entries(self.field.round(e) for e in self.entries)

    def conjugate(self):
        return self._with_entries(self.field.conjugate(e) for e in self.entries)

    # ------------------------------------------------------------------
    # Whole-vector operations
    # ------------------------------------------------------------------

    def sum(self) -> Any:
        total = self.field.zero()
        for e in self.entries:
            total = total + e
        return total

    def inner_product(self, other) -> Any:
        """
        <self, other> = sum of self[i] * conj(other[i]).

        Not symmetric over the complex numbers:
        u.inner_product(v) == conj(v.inner_product(u)).
        """
        self._check_compatible(other, 'inner_product')
        total = self.field.zero()
        for a, b in zip(self.entries, other.entries):
            total = total + a * self.field.conjugate(b)
        return total

    def norm(self) -> RealScalar:
        """sqrt of the real part of <v, v>; its imaginary part is zero up to rounding."""
        return self.field.sqrt_real(self.field.real_part(self.inner_product(self)))

    def distance(self, other) -> RealScalar:
        return algebra.distance(self, other)

    def normalized(self):
        """Scale to unit norm. A zero vector yields NaN entries."""
        return self.scale(self.field.reciprocal_real(self.norm()))

    def orthonormal(self):
        """Alias of normalized()."""
        return self.normalized()

    def tensor_product(self, other):
        """
        All pairwise products, right operand varying fastest.

        Entry i * len(other) + j of the result is self[i] * other[j].
        """
        if type(other) is not type(self):
            raise ValidationError(
                f"tensor_product: expected {type(self).__name__}, got {type(other).__name__}"
            )
        check_same_field(self.field, other.field, 'tensor_product')
        return self._with_entries(a * b for a in self.entries for b in other.entries)

    def adjoint(self):
        """Conjugate transpose."""
        return self.transpose().conjugate()

    def are_equivalent(self, other) -> bool:
        """Exact entrywise equality, no rounding."""
        if type(other) is not type(self) or other.length != self.length:
            return False
        return all(bool(a == b) for a, b in zip(self.entries, other.entries))

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, _Vector):
            return NotImplemented
        return self.are_equivalent(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.entries))

    def __add__(self, other: Any):
        if type(other) is not type(self):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any):
        if type(other) is not type(self):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self):
        return self.additive_inverse()

    def __rmul__(self, other: Any):
        if not is_scalar(other):
            return NotImplemented
        return self.scale(other)

    def _format_entries(self) -> str:
        return ", ".join(str(e) for e in self.entries)


class RowVector(_Vector):
    """Row vector (a bra, in physics notation)."""

    @classmethod
    def U(cls, entries: Iterable[Any], precision: Precision | None = None) -> RowVector:
        return cls.from_entries(entries, precision)

    def transpose(self) -> ColumnVector:
        return ColumnVector(self.entries, self.field)

    def multiply(self, other: Any) -> Any:
        """
        Row times column: sum of self[i] * other[i], without conjugation.

        A scalar operand scales the row instead.

        Raises:
            DimensionError: If the lengths differ
        """
        if is_scalar(other):
            return self.scale(other)
        if not isinstance(other, ColumnVector):
            raise ValidationError(
                f"multiply: expected ColumnVector, got {type(other).__name__}"
            )
        check_same_length(self.length, other.length, 'multiply')
        check_same_field(self.field, other.field, 'multiply')
        total = self.field.zero()
        for a, b in zip(self.entries, other.entries):
            total = total + a * b
        return total

    def act(self, matrix: SquareMatrix) -> RowVector:
        """Row vector acting on a matrix from the left."""
        return matrix.act_left(self)

    def __mul__(self, other: Any):
        if isinstance(other, ColumnVector):
            return self.multiply(other)
        if is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other: Any):
        if isinstance(other, ColumnVector):
            return self.multiply(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"RowVector.U([{self._format_entries()}])"


class ColumnVector(_Vector):
    """Column vector (a ket, in physics notation)."""

    @classmethod
    def V(cls, entries: Iterable[Any], precision: Precision | None = None) -> ColumnVector:
        return cls.from_entries(entries, precision)

    def transpose(self) -> RowVector:
        return RowVector(self.entries, self.field)

    def __mul__(self, other: Any):
        if is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ColumnVector.V([{self._format_entries()}])"
