"""
CPU backend for vector addition.

Reference implementation: NumPy addition in host memory. Stateless and
lock-free, so any number of threads may call it concurrently.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyvectorspace.core.capabilities import (
    CAPABILITY_FLOAT32,
    CAPABILITY_FLOAT64,
    CAPABILITY_CONCURRENT,
)
from pyvectorspace.core.validation import check_matching_buffers


class CPUAdditionBackend:
    """CPU-managed addition of float32/float64 buffers using NumPy."""

    _CAPABILITIES = frozenset({
        CAPABILITY_FLOAT32,
        CAPABILITY_FLOAT64,
        CAPABILITY_CONCURRENT,
    })

    @property
    def name(self) -> str:
        return 'cpu_addition'

    def supports(self, capability: str) -> bool:
        return capability in self._CAPABILITIES

    def add(
        self,
        left: NDArray[np.floating[Any]],
        right: NDArray[np.floating[Any]],
    ) -> NDArray[np.floating[Any]]:
        check_matching_buffers(left, right, self.name)
        result = np.empty_like(left)
        with np.errstate(over='ignore', invalid='ignore'):
            np.add(left, right, out=result)
        return result

    def __repr__(self) -> str:
        return 'CPUAdditionBackend()'
