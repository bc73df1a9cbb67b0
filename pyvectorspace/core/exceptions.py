"""
Exception hierarchy for PyVectorSpace.

All exceptions inherit from VectorSpaceError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages name the mismatched shapes or the backend status
    - Scalar domain errors (sqrt of a negative, division by zero) are NOT
      exceptions: they follow IEEE-754 and produce NaN/Inf
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyvectorspace.matrices.backends.gpu import AcceleratorStatus


class VectorSpaceError(Exception):
    """Base exception for all PyVectorSpace errors."""
    pass


class ValidationError(VectorSpaceError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks (non-numeric
    entries, unknown backend names, malformed buffers).
    """
    pass


class DimensionError(ValidationError):
    """
    Operand shapes are incompatible.

    Raised before any computation when an operation that requires equal
    vector lengths or equal matrix dimensions receives mismatched operands,
    or when a matrix grid is not square.

    Attributes:
        operation: Name of the rejected operation
        left_shape: Shape of the left (or only) operand
        right_shape: Shape of the right operand, if any
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class AcceleratorError(VectorSpaceError):
    """
    The accelerated addition primitive reported a failure.

    The result buffer of the failed call is discarded; the error is
    reported once and never retried.

    Attributes:
        status: AcceleratorStatus returned by the device primitive, or the
            raw integer code when it is not a known status
        backend_name: Identifier of the backend that failed
    """

    def __init__(
        self,
        message: str,
        status: AcceleratorStatus | int,
        backend_name: str | None = None,
    ):
        super().__init__(message)
        self.status = status
        self.backend_name = backend_name
