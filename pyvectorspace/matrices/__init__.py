"""
Row vectors, column vectors and square matrices.

Public API:
    RowVector.U(entries), ColumnVector.V(entries), SquareMatrix.M(grid)

Addition of vectors and matrices goes through the addition backend
selected with get_backend / set_default_backend / using_backend; see
pyvectorspace.matrices.backends.
"""

from pyvectorspace.matrices.backends import (
    get_backend,
    get_default_backend,
    set_default_backend,
    using_backend,
)
from pyvectorspace.matrices.vector import RowVector, ColumnVector
from pyvectorspace.matrices.square_matrix import SquareMatrix

__all__ = [
    "RowVector",
    "ColumnVector",
    "SquareMatrix",
    "get_backend",
    "get_default_backend",
    "set_default_backend",
    "using_backend",
]
