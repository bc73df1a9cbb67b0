"""
Tests for SquareMatrix.

Validates:
    - Construction and shape checks
    - Entrywise operations and matrix products
    - Matrix-vector actions from both sides
    - Kronecker product and commutator
    - Identity, Hermitian and unitary predicates after rounding
"""

import numpy as np
import pytest

from pyvectorspace.core.exceptions import DimensionError, ValidationError
from pyvectorspace.matrices.square_matrix import SquareMatrix
from pyvectorspace.matrices.vector import ColumnVector, RowVector
from pyvectorspace.numbers.cartesian import C
from pyvectorspace.numbers.fields import ComplexField, RealField

M = SquareMatrix.M
SQRT_HALF = 1 / np.sqrt(2)


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_real(self):
        a = M([[1, 3], [7, 13]])
        assert a.dimension == 2
        assert a.m == a.n == 2
        assert a.field == RealField('float64')
        assert a[1, 0] == 7.0

    def test_complex(self):
        a = M([[(1, 2), 0], [0, 1]])
        assert a.field == ComplexField('float64')
        assert a[0, 1] == C(0, 0)

    def test_float32(self):
        a = M([[1, 2], [3, 4]], precision='float32')
        assert all(isinstance(e, np.float32) for e in a.flatten())

    def test_rectangular_rejected(self):
        with pytest.raises(DimensionError):
            M([[1, 2, 3], [4, 5, 6]])

    def test_ragged_rejected(self):
        with pytest.raises(DimensionError):
            M([[1, 2], [3]])

    def test_flat_list_rejected(self):
        with pytest.raises(ValidationError, match="M: row 0"):
            M([1, 2])

    def test_from_function(self):
        assert SquareMatrix.from_function(2, lambda i, j: 10 * i + j) == M([[0, 1], [10, 11]])

    def test_zero(self):
        assert SquareMatrix.zero(2) == M([[0, 0], [0, 0]])

    def test_identity(self):
        assert SquareMatrix.identity(2, ComplexField()) == M([[(1, 0), 0], [0, (1, 0)]])

    def test_rows_and_columns(self):
        a = M([[1, 2], [3, 4]])
        assert a.row(1) == (3.0, 4.0)
        assert a.column(1) == (2.0, 4.0)
        assert list(a.rows()) == [(1.0, 2.0), (3.0, 4.0)]
        assert list(a.columns()) == [(1.0, 3.0), (2.0, 4.0)]
        assert a.flatten() == (1.0, 2.0, 3.0, 4.0)

    def test_repr(self):
        assert repr(M([[1, 2], [3, 4]])) == "SquareMatrix.M([[1.0, 2.0], [3.0, 4.0]])"


# ═══════════════════════════════════════════════════════════════════════
# Entrywise operations
# ═══════════════════════════════════════════════════════════════════════


class TestEntrywise:

    def test_add(self):
        assert M([[1, 2], [3, 4]]) + M([[10, 20], [30, 40]]) == M([[11, 22], [33, 44]])

    def test_add_complex(self):
        result = M([[(1, 1), 0], [0, (2, -2)]]) + M([[(1, 0), (0, 1)], [(3, 0), (0, 2)]])
        assert result == M([[(2, 1), (0, 1)], [(3, 0), (2, 0)]])

    def test_add_dimension_mismatch(self):
        with pytest.raises(DimensionError, match="2x2.*3x3"):
            M([[1, 2], [3, 4]]).add(SquareMatrix.identity(3))

    def test_subtract(self):
        assert M([[11, 22], [33, 44]]) - M([[10, 20], [30, 40]]) == M([[1, 2], [3, 4]])

    def test_additive_inverse(self):
        assert -M([[1, -2], [3, 0]]) == M([[-1, 2], [-3, 0]])

    def test_map(self):
        assert M([[1, 2], [3, 4]]).map(lambda e: e * e) == M([[1, 4], [9, 16]])

    def test_zip(self):
        result = M([[1, 2], [3, 4]]).zip(M([[1, 1], [2, 2]]), lambda a, b: a - b)
        assert result == M([[0, 1], [1, 2]])

    def test_scale(self):
        a = M([[1, 2], [3, 4]])
        assert 2 * a == M([[2, 4], [6, 8]])
        assert a * 2 == a.multiply(2)

    def test_round(self):
        assert M([[0.9999999, 0], [0, 0.0000001]]).round() == M([[1, 0], [0, 0]])

    def test_transpose(self):
        assert M([[1, 2], [3, 4]]).transpose() == M([[1, 3], [2, 4]])

    def test_adjoint(self):
        a = M([[(1, 2), (3, 4)], [(5, 6), (7, 8)]])
        assert a.adjoint() == M([[(1, -2), (5, -6)], [(3, -4), (7, -8)]])
        assert a.adjoint().adjoint() == a


# ═══════════════════════════════════════════════════════════════════════
# Products
# ═══════════════════════════════════════════════════════════════════════


class TestProducts:

    def test_multiply(self):
        a = M([[1, 3], [7, 13]])
        b = M([[23, 31], [41, 47]])
        assert a.multiply(b) == M([[146, 172], [694, 828]])
        assert a * b == a @ b == a.multiply(b)

    def test_multiply_dimension_mismatch(self):
        with pytest.raises(DimensionError):
            M([[1, 3], [7, 13]]) * SquareMatrix.identity(3)

    def test_identity_is_neutral(self):
        a = M([[(1, 2), (3, 4)], [(5, 6), (7, 8)]])
        identity = SquareMatrix.identity(2, ComplexField())
        assert a * identity == a
        assert identity * a == a

    def test_identity_acts_trivially(self):
        v = ColumnVector.V([(1, 2), (3, -4), (0, 5)])
        assert SquareMatrix.identity(3, ComplexField()).act(v) == v

    def test_act_on_column(self):
        a = M([[1, 2], [3, 4]])
        assert a * ColumnVector.V([5, 6]) == ColumnVector.V([17, 39])
        assert a @ ColumnVector.V([5, 6]) == ColumnVector.V([17, 39])

    def test_act_left_on_row(self):
        a = M([[1, 2], [3, 4]])
        expected = RowVector.U([23, 34])
        assert a.act_left(RowVector.U([5, 6])) == expected
        assert RowVector.U([5, 6]) * a == expected
        assert RowVector.U([5, 6]) @ a == expected
        assert RowVector.U([5, 6]).act(a) == expected

    def test_act_length_mismatch(self):
        with pytest.raises(DimensionError) as excinfo:
            M([[1, 2], [3, 4]]).act(ColumnVector.V([1, 2, 3]))
        assert excinfo.value.right_shape == (3,)

    def test_act_wrong_vector_type(self):
        with pytest.raises(ValidationError):
            M([[1, 2], [3, 4]]).act(RowVector.U([1, 2]))

    def test_tensor_product(self):
        a = M([[1, 2], [3, 4]])
        b = M([[0, 5], [6, 7]])
        assert a.tensor_product(b) == M([
            [0, 5, 0, 10],
            [6, 7, 12, 14],
            [0, 15, 0, 20],
            [18, 21, 24, 28],
        ])

    def test_tensor_product_dimensions_multiply(self):
        result = SquareMatrix.identity(2).tensor_product(SquareMatrix.identity(3))
        assert result.dimension == 6
        assert result.is_identity()

    def test_commutator(self):
        x = M([[0, 1], [1, 0]])
        z = M([[1, 0], [0, -1]])
        assert x.commutator(z) == M([[0, -2], [2, 0]])
        assert x.commutator(x) == SquareMatrix.zero(2)


# ═══════════════════════════════════════════════════════════════════════
# Structural predicates
# ═══════════════════════════════════════════════════════════════════════


class TestIsIdentity:

    def test_identity(self):
        assert SquareMatrix.identity(3).is_identity()

    def test_up_to_rounding(self):
        assert M([[0.9999999, 0.0000001], [0, 1]]).is_identity()

    def test_not_identity(self):
        assert not M([[1, 0.00001], [0, 1]]).is_identity()


class TestIsHermitian:

    def test_complex_hermitian(self):
        assert M([[7, (6, 5)], [(6, -5), -3]]).is_hermitian()

    def test_three_by_three(self):
        assert M([
            [(5, 0), (4, 5), (6, -16)],
            [(4, -5), (13, 0), (7, 0)],
            [(6, 16), (7, 0), (-2.1, 0)],
        ]).is_hermitian()

    def test_not_hermitian(self):
        assert not M([[7, (6, 5)], [(6, 5), 3]]).is_hermitian()

    def test_real_field_checks_symmetry(self):
        assert M([[1, 2, 3], [2, 2, 3], [3, 3, 9]]).is_hermitian()
        assert not M([[1, 2], [3, 4]]).is_hermitian()

    def test_inner_product_property(self):
        hermitian = M([[7, (6, 5)], [(6, -5), -3]])
        a = ColumnVector.V([(1, 2), (3, 5)])
        b = ColumnVector.V([(7, 11), (13, 19)])
        assert (hermitian * a).inner_product(b) == a.inner_product(hermitian * b)


class TestIsUnitary:

    def test_complex_unitary(self):
        assert M([
            [(SQRT_HALF, 0), (SQRT_HALF, 0)],
            [(0, SQRT_HALF), (0, -SQRT_HALF)],
        ]).is_unitary()

    def test_diagonal_phase(self):
        assert M([[(1, 0), (0, 0)], [(0, 0), (0, 1)]]).is_unitary()

    def test_real_rotation_is_orthogonal(self):
        theta = 0.7
        rotation = M([
            [np.cos(theta), -np.sin(theta)],
            [np.sin(theta), np.cos(theta)],
        ])
        assert rotation.is_unitary()

    def test_kronecker_of_unitaries(self):
        hadamard = M([[SQRT_HALF, SQRT_HALF], [SQRT_HALF, -SQRT_HALF]])
        swap = M([[0, 1], [1, 0]])
        product = hadamard.tensor_product(swap)
        assert product.is_unitary()
        perturbed = product.zip(
            SquareMatrix.from_function(4, lambda i, j: 2e-5 if (i, j) == (2, 1) else 0),
            lambda a, b: a + b,
        )
        assert not perturbed.is_unitary()

    def test_not_unitary(self):
        assert not M([[1, 1], [0, 1]]).is_unitary()

    def test_perturbation_breaks_unitarity(self):
        perturbed = M([
            [(SQRT_HALF + 1e-4, 0), (SQRT_HALF, 0)],
            [(0, SQRT_HALF), (0, -SQRT_HALF)],
        ])
        assert not perturbed.is_unitary()


class TestEquality:

    def test_exact(self):
        assert M([[1, 2], [3, 4]]).are_equivalent(M([[1, 2], [3, 4]]))
        assert not M([[1, 2], [3, 4]]).are_equivalent(M([[1, 2], [3, 4.0000001]]))

    def test_different_dimensions(self):
        assert M([[1]]) != SquareMatrix.identity(2)

    def test_hashable(self):
        assert len({M([[1, 2], [3, 4]]), M([[1, 2], [3, 4]])}) == 1
