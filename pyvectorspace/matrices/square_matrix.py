"""
Square matrices.

SquareMatrix is an immutable m x m grid of scalars from one field, real
or complex. Matrix operations decompose into row and column operations;
addition goes through the selected addition backend like vector
addition.

Structural predicates (is_identity, is_hermitian, is_unitary) compare
after rounding every entry to six decimals. Over a real field
conjugation is the identity, so is_hermitian checks symmetry and
is_unitary checks orthogonality.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Sequence

import numpy as np

from pyvectorspace import algebra
from pyvectorspace.core.capabilities import CAPABILITY_COMPLEX, CAPABILITY_CONJUGATE
from pyvectorspace.core.compute.precision import Precision
from pyvectorspace.core.exceptions import ValidationError
from pyvectorspace.core.validation import (
    check_non_negative,
    check_rows,
    check_same_dimension,
    check_square,
)
from pyvectorspace.matrices.backends import BackendLike, add_buffers
from pyvectorspace.matrices.vector import ColumnVector, RowVector, is_scalar
from pyvectorspace.numbers.fields import (
    RealField,
    ScalarField,
    check_same_field,
    infer_field,
)


@dataclass(frozen=True, eq=False)
class SquareMatrix:
    """
    m x m grid of scalars.

    Attributes:
        entries: Tuple of m rows, each a tuple of m scalars
        field: Scalar field of every entry

    Construction:
        SquareMatrix.M([[1, 3], [7, 13]])
        SquareMatrix.M([[(1, 0), (0, 1)], [(0, -1), (1, 0)]])
        SquareMatrix.from_function(3, lambda i, j: i + j)
        SquareMatrix.identity(4, ComplexField())
    """
    entries: tuple[tuple[Any, ...], ...]
    field: ScalarField

    __array_ufunc__ = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def M(
        cls,
        grid: Iterable[Iterable[Any]],
        precision: Precision | None = None,
        field: ScalarField | None = None,
    ) -> SquareMatrix:
        """
        Build a matrix from a grid of literal entries.

        Raises:
            DimensionError: If the grid is not square
            ValidationError: If a row is not a sequence, or an entry cannot be placed in the field
        """
        rows = check_rows(grid, 'M')
        check_square(rows, 'M')
        if field is None:
            field = infer_field([e for row in rows for e in row], precision)
        return cls(
            tuple(tuple(field.coerce(e) for e in row) for row in rows),
            field,
        )

    @classmethod
    def from_function(
        cls,
        m: int,
        initializer: Callable[[int, int], Any],
        field: ScalarField | None = None,
    ) -> SquareMatrix:
        """Build a matrix whose entry (i, j) is initializer(i, j)."""
        check_non_negative(m, 'm')
        return cls.M(
            [[initializer(i, j) for j in range(m)] for i in range(m)],
            field=field,
        )

    @classmethod
    def zero(cls, m: int, field: ScalarField | None = None) -> SquareMatrix:
        check_non_negative(m, 'm')
        field = field or RealField()
        return cls(tuple(tuple(field.zero() for _ in range(m)) for _ in range(m)), field)

    @classmethod
    def identity(cls, m: int, field: ScalarField | None = None) -> SquareMatrix:
        check_non_negative(m, 'm')
        field = field or RealField()
        return cls(
            tuple(
                tuple(field.one() if i == j else field.zero() for j in range(m))
                for i in range(m)
            ),
            field,
        )

    # ------------------------------------------------------------------
    # Shape and access
    # ------------------------------------------------------------------

    @property
    def m(self) -> int:
        """Number of rows."""
        return len(self.entries)

    @property
    def n(self) -> int:
        """Number of columns (always equal to m)."""
        return len(self.entries)

    @property
    def dimension(self) -> int:
        return len(self.entries)

    @property
    def precision(self) -> Precision:
        return self.field.precision

    @property
    def is_complex(self) -> bool:
        return self.field.is_complex

    def supports(self, capability: str) -> bool:
        if capability == CAPABILITY_CONJUGATE:
            return True
        if capability == CAPABILITY_COMPLEX:
            return self.field.is_complex
        return False

    def __getitem__(self, index: tuple[int, int]) -> Any:
        i, j = index
        return self.entries[i][j]

    def row(self, i: int) -> tuple[Any, ...]:
        return self.entries[i]

    def column(self, j: int) -> tuple[Any, ...]:
        return tuple(row[j] for row in self.entries)

    def rows(self) -> Iterator[tuple[Any, ...]]:
        return iter(self.entries)

    def columns(self) -> Iterator[tuple[Any, ...]]:
        return (self.column(j) for j in range(self.n))

    def flatten(self) -> tuple[Any, ...]:
        """Entries in row-major order."""
        return tuple(e for row in self.entries for e in row)

    def _check_compatible(self, other: Any, operation: str) -> None:
        if not isinstance(other, SquareMatrix):
            raise ValidationError(
                f"{operation}: expected SquareMatrix, got {type(other).__name__}"
            )
        check_same_dimension(self.dimension, other.dimension, operation)
        check_same_field(self.field, other.field, operation)

    def _check_vector(self, vector: Any, vector_type: type, operation: str) -> None:
        if not isinstance(vector, vector_type):
            raise ValidationError(
                f"{operation}: expected {vector_type.__name__}, got {type(vector).__name__}"
            )
        check_same_dimension(self.dimension, vector.length, operation, right_is_vector=True)
        check_same_field(self.field, vector.field, operation)

    def _with_function(self, initializer: Callable[[int, int], Any]) -> SquareMatrix:
        m = self.dimension
        return SquareMatrix(
            tuple(tuple(initializer(i, j) for j in range(m)) for i in range(m)),
            self.field,
        )

    def _with_flat(self, flat: Sequence[Any]) -> SquareMatrix:
        m = self.dimension
        return SquareMatrix(
            tuple(tuple(flat[i * m:(i + 1) * m]) for i in range(m)),
            self.field,
        )

    # ------------------------------------------------------------------
    # Elementwise operations
    # ------------------------------------------------------------------

    def map(self, element_mapping: Callable[[Any], Any]) -> SquareMatrix:
        coerce = self.field.coerce
        return SquareMatrix(
            tuple(tuple(coerce(element_mapping(e)) for e in row) for row in self.entries),
            self.field,
        )

    def zip(
        self,
        other: SquareMatrix,
        element_mapping: Callable[[Any, Any], Any],
    ) -> SquareMatrix:
        self._check_compatible(other, 'zip')
        coerce = self.field.coerce
        return SquareMatrix(
            tuple(
                tuple(coerce(element_mapping(a, b)) for a, b in zip(left_row, right_row))
                for left_row, right_row in zip(self.entries, other.entries)
            ),
            self.field,
        )

    def add(self, other: SquareMatrix, *, backend: BackendLike = None) -> SquareMatrix:
        """
        Entrywise sum, computed by the selected addition backend.

        Raises:
            DimensionError: If the dimensions differ
            AcceleratorError: If the GPU backend reports a failure
        """
        self._check_compatible(other, 'add')
        result = add_buffers(
            self.field.to_buffer(self.flatten()),
            other.field.to_buffer(other.flatten()),
            backend,
        )
        return self._with_flat(self.field.from_buffer(result))

    def subtract(self, other: SquareMatrix) -> SquareMatrix:
        self._check_compatible(other, 'subtract')
        return self._with_function(lambda i, j: self.entries[i][j] - other.entries[i][j])

    def additive_inverse(self) -> SquareMatrix:
        return self._with_function(lambda i, j: -self.entries[i][j])

    def round(self) -> SquareMatrix:
        return self._with_function(lambda i, j: self.field.round(self.entries[i][j]))

    def transpose(self) -> SquareMatrix:
        return self._with_function(lambda i, j: self.entries[j][i])

    def conjugate(self) -> SquareMatrix:
        return self._with_function(lambda i, j: self.field.conjugate(self.entries[i][j]))

    def adjoint(self) -> SquareMatrix:
        return self.transpose().conjugate()

    def scale(self, scalar: Any) -> SquareMatrix:
        scalar = self.field.coerce_scalar(scalar)
        with np.errstate(over='ignore', invalid='ignore'):
            return self._with_function(lambda i, j: scalar * self.entries[i][j])

    # ------------------------------------------------------------------
    # Matrix operations
    # ------------------------------------------------------------------

    def _dot(self, left: Iterable[Any], right: Iterable[Any]) -> Any:
        total = self.field.zero()
        for a, b in zip(left, right):
            total = total + a * b
        return total

    def multiply(self, other: Any) -> SquareMatrix:
        """
        Matrix product: C[i, j] = sum_k A[i, k] * B[k, j].

        A scalar operand scales the matrix instead.

        Raises:
            DimensionError: If the dimensions differ
        """
        if is_scalar(other):
            return self.scale(other)
        self._check_compatible(other, 'multiply')
        columns = list(other.columns())
        return self._with_function(lambda i, j: self._dot(self.entries[i], columns[j]))

    def act(self, vector: ColumnVector) -> ColumnVector:
        """result[i] = sum_j M[i, j] * v[j]"""
        self._check_vector(vector, ColumnVector, 'act')
        return ColumnVector(
            tuple(self._dot(row, vector.entries) for row in self.entries),
            self.field,
        )

    def act_left(self, vector: RowVector) -> RowVector:
        """Row vector acting from the left: result[j] = sum_i v[i] * M[i, j]"""
        self._check_vector(vector, RowVector, 'act_left')
        return RowVector(
            tuple(self._dot(vector.entries, column) for column in self.columns()),
            self.field,
        )

    def tensor_product(self, other: SquareMatrix) -> SquareMatrix:
        """
        Kronecker product.

        result[j, k] = A[j // dim(B), k // dim(B)] * B[j % dim(B), k % dim(B)]
        """
        if not isinstance(other, SquareMatrix):
            raise ValidationError(
                f"tensor_product: expected SquareMatrix, got {type(other).__name__}"
            )
        check_same_field(self.field, other.field, 'tensor_product')
        d = other.dimension
        m = self.dimension * d
        return SquareMatrix(
            tuple(
                tuple(
                    self.entries[j // d][k // d] * other.entries[j % d][k % d]
                    for k in range(m)
                )
                for j in range(m)
            ),
            self.field,
        )

    def commutator(self, other: SquareMatrix) -> SquareMatrix:
        """AB - BA"""
        return algebra.commutator(self, other)

    # ------------------------------------------------------------------
    # Structural predicates
    # ------------------------------------------------------------------

    def is_identity(self) -> bool:
        """Diagonal entries round to 1, all others to 0."""
        one = self.field.one()
        zero = self.field.zero()
        rounded = self.round()
        return all(
            bool(rounded.entries[i][j] == (one if i == j else zero))
            for i in range(self.dimension)
            for j in range(self.dimension)
        )

    def is_hermitian(self) -> bool:
        """Equal to its own adjoint after rounding."""
        return algebra.are_equal_after_rounding(self, self.adjoint())

    def is_unitary(self) -> bool:
        """M * adjoint(M) and adjoint(M) * M are both the identity after rounding."""
        adjoint = self.adjoint()
        return self.multiply(adjoint).is_identity() and adjoint.multiply(self).is_identity()

    def are_equivalent(self, other: Any) -> bool:
        """Exact entrywise equality in row-major order, no rounding."""
        if not isinstance(other, SquareMatrix) or other.dimension != self.dimension:
            return False
        return all(bool(a == b) for a, b in zip(self.flatten(), other.flatten()))

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self.are_equivalent(other)

    def __hash__(self) -> int:
        return hash(self.entries)

    def __add__(self, other: Any) -> SquareMatrix:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> SquareMatrix:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> SquareMatrix:
        return self.additive_inverse()

    def __mul__(self, other: Any):
        if isinstance(other, SquareMatrix):
            return self.multiply(other)
        if isinstance(other, ColumnVector):
            return self.act(other)
        if is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Any):
        if isinstance(other, RowVector):
            return self.act_left(other)
        if is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other: Any):
        if isinstance(other, SquareMatrix):
            return self.multiply(other)
        if isinstance(other, ColumnVector):
            return self.act(other)
        return NotImplemented

    def __rmatmul__(self, other: Any):
        if isinstance(other, RowVector):
            return self.act_left(other)
        return NotImplemented

    def __repr__(self) -> str:
        rows = ", ".join(
            "[" + ", ".join(str(e) for e in row) + "]" for row in self.entries
        )
        return f"SquareMatrix.M([{rows}])"
