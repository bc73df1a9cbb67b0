"""
Core infrastructure for PyVectorSpace.

Shared abstractions used by the scalar, vector and matrix modules.

Key components:
    protocols: Capability protocols and the AdditionBackend protocol
    capabilities: Capability string constants
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Device detection and precision tags
"""

from pyvectorspace.core.exceptions import (
    VectorSpaceError,
    ValidationError,
    DimensionError,
    AcceleratorError,
)
from pyvectorspace.core.protocols import (
    Addable,
    ScalarMultipliable,
    TensorProductable,
    Composable,
    Conjugatable,
    Roundable,
    Mappable,
    HasInnerProduct,
    HasNorm,
    AdditionBackend,
)

__all__ = [
    # Protocols
    "Addable",
    "ScalarMultipliable",
    "TensorProductable",
    "Composable",
    "Conjugatable",
    "Roundable",
    "Mappable",
    "HasInnerProduct",
    "HasNorm",
    "AdditionBackend",
    # Exceptions
    "VectorSpaceError",
    "ValidationError",
    "DimensionError",
    "AcceleratorError",
]
