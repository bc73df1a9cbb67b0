"""
Numerical precision constants and utilities.

Every scalar in PyVectorSpace is tagged with one of two IEEE-754
precisions. Equality "up to rounding" always means equality after
rounding to ROUNDING_DIGITS decimal places.
"""

from typing import Literal, Any

import numpy as np


Precision = Literal['float32', 'float64']

# Number of decimal digits kept by every round() in the library
ROUNDING_DIGITS: int = 6

DEFAULT_PRECISION: Precision = 'float64'

_DTYPES: dict[str, type[np.floating[Any]]] = {
    'float32': np.float32,
    'float64': np.float64,
}


def dtype_for(precision: Precision) -> type[np.floating[Any]]:
    """
    Map a precision tag to its NumPy scalar type.

    Raises:
        ValueError: If the tag is not 'float32' or 'float64'
    """
    try:
        return _DTYPES[precision]
    except KeyError:
        raise ValueError(
            f"Unknown precision: {precision!r}. Must be 'float32' or 'float64'."
        ) from None


def precision_of(value: Any) -> Precision | None:
    """
    Precision tag of a NumPy floating scalar or array, None otherwise.

    Plain Python numbers carry no precision of their own.
    """
    dtype = getattr(value, 'dtype', None)
    if dtype is None:
        return None
    if dtype == np.float32:
        return 'float32'
    if dtype == np.float64:
        return 'float64'
    return None

