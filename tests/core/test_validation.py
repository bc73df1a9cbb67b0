"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_same_length / check_same_dimension: operand shape agreement
    - check_rows: grid rows are sequences
    - check_square: grid shape
    - check_non_negative: lengths and dimensions
    - check_buffer / check_matching_buffers: addition buffers
"""

import numpy as np
import pytest

from pyvectorspace.core.exceptions import DimensionError, ValidationError
from pyvectorspace.core.validation import (
    check_buffer,
    check_matching_buffers,
    check_non_negative,
    check_rows,
    check_same_dimension,
    check_same_length,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# Operand shapes
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSameLength:

    def test_equal_passes(self):
        check_same_length(3, 3, 'add')

    def test_mismatch_names_both_lengths(self):
        with pytest.raises(DimensionError, match="left=2, right=3") as excinfo:
            check_same_length(2, 3, 'add')
        assert excinfo.value.operation == 'add'
        assert excinfo.value.left_shape == (2,)
        assert excinfo.value.right_shape == (3,)


class TestCheckSameDimension:

    def test_equal_passes(self):
        check_same_dimension(4, 4, 'multiply')

    def test_matrix_mismatch(self):
        with pytest.raises(DimensionError, match="2x2") as excinfo:
            check_same_dimension(2, 3, 'multiply')
        assert excinfo.value.left_shape == (2, 2)
        assert excinfo.value.right_shape == (3, 3)

    def test_vector_mismatch(self):
        with pytest.raises(DimensionError) as excinfo:
            check_same_dimension(2, 3, 'act', right_is_vector=True)
        assert excinfo.value.right_shape == (3,)


class TestCheckRows:

    def test_materializes_rows(self):
        assert check_rows(((1, 2), iter([3, 4])), 'M') == [[1, 2], [3, 4]]

    def test_scalar_row_rejected(self):
        with pytest.raises(ValidationError, match="row 0 is a int"):
            check_rows([1, 2], 'M')

    def test_string_row_rejected(self):
        with pytest.raises(ValidationError, match="row 1 is a str"):
            check_rows([[1, 2], '34'], 'M')


class TestCheckSquare:

    def test_square_returns_dimension(self):
        assert check_square([[1, 2], [3, 4]], 'M') == 2

    def test_empty_grid(self):
        assert check_square([], 'M') == 0

    def test_rectangular_rejected(self):
        with pytest.raises(DimensionError, match="row 0 has 3 entries"):
            check_square([[1, 2, 3], [4, 5, 6]], 'M')

    def test_ragged_rejected(self):
        with pytest.raises(DimensionError, match="row 1"):
            check_square([[1, 2], [3]], 'M')


class TestCheckNonNegative:

    def test_zero_passes(self):
        check_non_negative(0, 'length')

    def test_numpy_integer_passes(self):
        check_non_negative(np.int64(3), 'length')

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="non-negative"):
            check_non_negative(-1, 'length')

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="integer"):
            check_non_negative(2.0, 'length')

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            check_non_negative(True, 'length')


# ═══════════════════════════════════════════════════════════════════════
# Addition buffers
# ═══════════════════════════════════════════════════════════════════════


class TestCheckBuffer:

    def test_float64_passes(self):
        check_buffer(np.zeros(3), 'left')

    def test_float32_passes(self):
        check_buffer(np.zeros(3, dtype=np.float32), 'left')

    def test_list_rejected(self):
        with pytest.raises(ValidationError, match="ndarray"):
            check_buffer([1.0, 2.0], 'left')

    def test_integer_dtype_rejected(self):
        with pytest.raises(ValidationError, match="dtype"):
            check_buffer(np.zeros(3, dtype=np.int64), 'left')

    def test_non_contiguous_rejected(self):
        with pytest.raises(ValidationError, match="contiguous"):
            check_buffer(np.zeros(6)[::2], 'left')


class TestCheckMatchingBuffers:

    def test_matching_passes(self):
        check_matching_buffers(np.zeros(3), np.ones(3), 'add')

    def test_shape_mismatch(self):
        with pytest.raises(DimensionError) as excinfo:
            check_matching_buffers(np.zeros(3), np.zeros(4), 'add')
        assert excinfo.value.left_shape == (3,)
        assert excinfo.value.right_shape == (4,)

    def test_dtype_mismatch(self):
        with pytest.raises(ValidationError, match="dtypes differ"):
            check_matching_buffers(
                np.zeros(3, dtype=np.float32), np.zeros(3, dtype=np.float64), 'add'
            )
