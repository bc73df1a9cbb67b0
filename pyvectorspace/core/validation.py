"""
Input validation utilities for PyVectorSpace.

These validators follow the "fail fast, fail loud" principle. They raise
before any computation with messages that name the operation and the
actual shapes, rather than truncating or padding operands.

Design principles:
    - Each function validates ONE thing
    - Operation names included in all error messages
    - No validator ever inspects values for NaN/Inf (IEEE-754 policy)
"""

from collections.abc import Iterable
from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from pyvectorspace.core.exceptions import ValidationError, DimensionError


def check_same_length(left: int, right: int, operation: str) -> None:
    """
    Verify two vector operands have the same length.

    Args:
        left: Length of the left operand
        right: Length of the right operand
        operation: Operation name for error messages

    Raises:
        DimensionError: If the lengths differ
    """
    if left != right:
        raise DimensionError(
            f"{operation}: vector lengths differ (left={left}, right={right})",
            operation=operation,
            left_shape=(left,),
            right_shape=(right,),
        )


def check_same_dimension(
    left: int,
    right: int,
    operation: str,
    right_is_vector: bool = False,
) -> None:
    """
    Verify a square matrix agrees in dimension with a matrix or a vector.

    Args:
        left: Dimension of the matrix operand
        right: Dimension of the other matrix, or length of the vector
        operation: Operation name for error messages
        right_is_vector: True if the other operand is a vector

    Raises:
        DimensionError: If the dimensions differ
    """
    if left != right:
        right_shape = (right,) if right_is_vector else (right, right)
        right_str = f"{right}" if right_is_vector else f"{right}x{right}"
        raise DimensionError(
            f"{operation}: dimensions differ (left={left}x{left}, right={right_str})",
            operation=operation,
            left_shape=(left, left),
            right_shape=right_shape,
        )


def check_rows(grid: Iterable[Any], name: str) -> list[list[Any]]:
    """
    Materialize a grid into a list of row lists.

    Args:
        grid: Iterable of rows, each an iterable of entries
        name: Parameter name for error messages

    Raises:
        ValidationError: If a row is a scalar or a string rather than a
            sequence of entries
    """
    rows = []
    for i, row in enumerate(grid):
        if isinstance(row, (str, bytes)) or not isinstance(row, Iterable):
            raise ValidationError(
                f"{name}: row {i} is a {type(row).__name__}, expected a sequence of entries"
            )
        rows.append(list(row))
    return rows


def check_square(rows: Sequence[Sequence[Any]], name: str) -> int:
    """
    Verify a grid of entries is square and return its dimension.

    Args:
        rows: Sequence of row sequences
        name: Parameter name for error messages

    Returns:
        The dimension m of the m x m grid

    Raises:
        DimensionError: If any row length differs from the number of rows
    """
    m = len(rows)
    for i, row in enumerate(rows):
        if len(row) != m:
            raise DimensionError(
                f"{name}: expected a square {m}x{m} grid, row {i} has {len(row)} entries",
                operation=name,
                left_shape=(m, len(row)),
            )
    return m


def check_non_negative(value: int, name: str) -> None:
    """
    Verify a length or dimension is a non-negative integer.

    Raises:
        ValidationError: If value is negative or not an integer
    """
    if not isinstance(value, (int, np.integer)) or isinstance(value, bool):
        raise ValidationError(f"{name}: expected an integer, got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")


def check_buffer(buffer: NDArray[Any], name: str) -> None:
    """
    Verify an addition buffer is a contiguous float32 or float64 array.

    Raises:
        ValidationError: If the dtype is not float32/float64 or the buffer
            is not C-contiguous
    """
    if not isinstance(buffer, np.ndarray):
        raise ValidationError(f"{name}: expected numpy.ndarray, got {type(buffer).__name__}")
    if buffer.dtype not in (np.float32, np.float64):
        raise ValidationError(
            f"{name}: unsupported dtype {buffer.dtype}, expected float32 or float64"
        )
    if not buffer.flags['C_CONTIGUOUS']:
        raise ValidationError(f"{name}: buffer must be C-contiguous")


def check_matching_buffers(
    left: NDArray[Any],
    right: NDArray[Any],
    operation: str,
) -> None:
    """
    Verify two addition buffers agree in shape and dtype.

    Raises:
        ValidationError: If either buffer is invalid or dtypes differ
        DimensionError: If the shapes differ
    """
    check_buffer(left, f"{operation}: left")
    check_buffer(right, f"{operation}: right")
    if left.shape != right.shape:
        raise DimensionError(
            f"{operation}: buffer shapes differ (left={left.shape}, right={right.shape})",
            operation=operation,
            left_shape=tuple(left.shape),
            right_shape=tuple(right.shape),
        )
    if left.dtype != right.dtype:
        raise ValidationError(
            f"{operation}: buffer dtypes differ (left={left.dtype}, right={right.dtype})"
        )
