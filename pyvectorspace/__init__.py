"""
PyVectorSpace: linear algebra over real and complex scalar fields.

Vectors, square matrices and scalars are immutable and generic over their
scalar field (real or complex, float32 or float64). Vector and matrix
addition can be routed through an optional GPU-accelerated backend.

Submodules:
    numbers: Real scalars, Cartesian and polar complex numbers, fields
    matrices: Row/column vectors, square matrices, addition backends
    algebra: Generic operations written against the capability protocols
    core: Exceptions, protocols, validation and device detection
"""

__version__ = "0.1.0"

from pyvectorspace.core.exceptions import (
    VectorSpaceError,
    ValidationError,
    DimensionError,
    AcceleratorError,
)
from pyvectorspace.numbers import (
    C,
    P,
    R,
    ComplexNumber,
    Polar,
    RealField,
    ComplexField,
)
from pyvectorspace import algebra
from pyvectorspace.matrices import (
    RowVector,
    ColumnVector,
    SquareMatrix,
    get_backend,
    get_default_backend,
    set_default_backend,
    using_backend,
)

__all__ = [
    "__version__",
    # Scalars
    "C",
    "P",
    "R",
    "ComplexNumber",
    "Polar",
    "RealField",
    "ComplexField",
    # Vectors and matrices
    "RowVector",
    "ColumnVector",
    "SquareMatrix",
    "algebra",
    # Backends
    "get_backend",
    "get_default_backend",
    "set_default_backend",
    "using_backend",
    # Exceptions
    "VectorSpaceError",
    "ValidationError",
    "DimensionError",
    "AcceleratorError",
]
