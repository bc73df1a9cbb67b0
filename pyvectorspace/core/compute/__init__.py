"""
Shared compute infrastructure for PyVectorSpace.

Submodules:
    device: Hardware detection and device selection
    precision: Precision tags, dtype mapping and rounding digits
"""

from pyvectorspace.core.compute.device import (
    DeviceInfo,
    detect_gpu,
    get_cpu_info,
    select_device,
)
from pyvectorspace.core.compute.precision import (
    Precision,
    DEFAULT_PRECISION,
    ROUNDING_DIGITS,
    dtype_for,
    precision_of,
)

__all__ = [
    # Device detection
    "DeviceInfo",
    "detect_gpu",
    "get_cpu_info",
    "select_device",
    # Precision
    "Precision",
    "DEFAULT_PRECISION",
    "ROUNDING_DIGITS",
    "dtype_for",
    "precision_of",
]
