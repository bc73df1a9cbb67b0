"""
Tests for Cartesian complex numbers.

Validates:
    - Construction and implicit coercion from literals
    - Arithmetic against hand-computed values
    - Division by conjugate multiplication
    - Rounding at the sixth decimal
    - Mixed arithmetic with Python and NumPy scalars
"""

import numpy as np
import pytest

from pyvectorspace.core.exceptions import ValidationError
from pyvectorspace.numbers.cartesian import C, ComplexNumber


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_components(self):
        z = C(5, 7)
        assert z.real == 5.0
        assert z.imaginary == 7.0
        assert isinstance(z.real, np.float64)

    def test_imaginary_defaults_to_zero(self):
        assert C(3) == C(3, 0)

    def test_float32(self):
        z = C(1, 2, 'float32')
        assert isinstance(z.real, np.float32)
        assert isinstance(z.imaginary, np.float32)
        assert z.precision == 'float32'

    def test_precision_from_numpy_components(self):
        assert C(np.float32(1), 2).precision == 'float32'

    def test_constants(self):
        assert ComplexNumber.ZERO == C(0, 0)
        assert ComplexNumber.ONE == C(1, 0)
        assert ComplexNumber.NEGATIVE_ONE == C(-1, 0)
        assert ComplexNumber.TWO == C(2, 0)
        assert ComplexNumber.one('float32').precision == 'float32'


class TestCoerce:

    def test_tuple(self):
        assert ComplexNumber.coerce((1, 2)) == C(1, 2)

    def test_real(self):
        assert ComplexNumber.coerce(4.5) == C(4.5, 0)

    def test_python_complex(self):
        assert ComplexNumber.coerce(1 + 2j) == C(1, 2)

    def test_complex_number_passthrough(self):
        z = C(1, 2)
        assert ComplexNumber.coerce(z) is z

    def test_precision_conversion(self):
        assert ComplexNumber.coerce(C(1, 2), 'float32').precision == 'float32'

    def test_wrong_tuple_length(self):
        with pytest.raises(ValidationError, match="2 entries"):
            ComplexNumber.coerce((1, 2, 3))

    def test_string_rejected(self):
        with pytest.raises(ValidationError):
            ComplexNumber.coerce("1+2i")


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_add(self):
        assert C(1, 2) + C(3, -5) == C(4, -3)

    def test_subtract(self):
        assert C(1, 2) - C(3, -5) == C(-2, 7)

    def test_multiply(self):
        assert C(5, 7) * C(11, 13) == C(-36, 142)

    def test_multiply_by_real_scales_both_parts(self):
        assert C(1, -2).multiply(3) == C(3, -6)

    def test_square(self):
        assert C(1, 1).square() == C(0, 2)

    def test_i_squared(self):
        assert C(0, 1) * C(0, 1) == ComplexNumber.NEGATIVE_ONE

    def test_conjugate(self):
        assert C(3, 4).conjugate() == C(3, -4)

    def test_modulus(self):
        assert C(3, 4).modulus() == 5.0
        assert abs(C(-3, 4)) == 5.0

    def test_additive_inverse(self):
        assert -C(3, -4) == C(-3, 4)

    def test_precision_preserved(self):
        z = C(1, 2, 'float32') * C(3, 4, 'float32')
        assert isinstance(z.real, np.float32)


class TestDivision:

    def test_divide(self):
        assert C(-36, 142) / C(11, 13) == C(5, 7)

    def test_denominator_times_conjugate_is_real(self):
        d = C(11, 13)
        product = d.multiply(d.conjugate())
        assert product.imaginary == 0.0
        assert product.real == 290.0

    def test_divide_by_self_is_one(self):
        z = C(2.5, -1.5)
        result = z / z
        np.testing.assert_allclose([result.real, result.imaginary], [1.0, 0.0])

    def test_divide_by_zero_gives_nan(self):
        result = C(1, 1) / C(0, 0)
        assert np.isnan(result.real)
        assert np.isnan(result.imaginary)

    def test_divide_by_real(self):
        assert C(4, 6) / 2 == C(2, 3)


class TestRounding:

    def test_boundary(self):
        assert C(0.9999999, 0.0000001).round() == C(1, 0)
        rounded = C(0.999999, 0.000001).round()
        np.testing.assert_allclose([rounded.real, rounded.imaginary], [0.999999, 0.000001])
        assert C(0.9999999, 0.0000001).round() != rounded

    def test_components_rounded_independently(self):
        z = C(1.23456789, -9.87654321).round()
        np.testing.assert_allclose([z.real, z.imaginary], [1.234568, -9.876543])


class TestMixedOperands:
    """Python and NumPy scalars and tuples work on either side."""

    def test_int_times_complex(self):
        assert 2 * C(1, 1) == C(2, 2)

    def test_numpy_scalar_times_complex(self):
        result = np.float64(2) * C(1, 1)
        assert isinstance(result, ComplexNumber)
        assert result == C(2, 2)

    def test_complex_plus_tuple(self):
        assert C(1, 2) + (3, 4) == C(4, 6)

    def test_real_minus_complex(self):
        assert 1 - C(1, 2) == C(0, -2)

    def test_real_over_complex(self):
        assert 2 / C(0, 1) == C(0, -2)

    def test_unsupported_operand(self):
        with pytest.raises(TypeError):
            C(1, 2) + "x"

    def test_to_python_complex(self):
        assert complex(C(1, -2)) == 1 - 2j

    def test_str(self):
        assert str(C(1, 2)) == "(1.0, 2.0)"
