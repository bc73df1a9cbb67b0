"""
Capability string constants for PyVectorSpace.

This module is the SINGLE SOURCE OF TRUTH for capability strings.
Import from here, never use raw strings.

Usage:
    from pyvectorspace.core.capabilities import CAPABILITY_FLOAT64

    if backend.supports(CAPABILITY_FLOAT64):
        result = backend.add(left, right)
"""

# Backend can add single-precision buffers
CAPABILITY_FLOAT32 = 'float32'

# Backend can add double-precision buffers
CAPABILITY_FLOAT64 = 'float64'

# Backend calls may run in parallel from several threads without a lock
CAPABILITY_CONCURRENT = 'concurrent'

# Backend runs on an accelerator device rather than in host memory
CAPABILITY_ACCELERATED = 'accelerated'

# Entries are complex and conjugation is not the identity
CAPABILITY_COMPLEX = 'complex'

# Value can be conjugated / adjointed (always true, identity for reals)
CAPABILITY_CONJUGATE = 'conjugate'

# Value has an inner product, and hence a norm and a distance
CAPABILITY_INNER_PRODUCT = 'inner_product'

# All capabilities as a frozenset for validation
ALL_CAPABILITIES = frozenset({
    CAPABILITY_FLOAT32,
    CAPABILITY_FLOAT64,
    CAPABILITY_CONCURRENT,
    CAPABILITY_ACCELERATED,
    CAPABILITY_COMPLEX,
    CAPABILITY_CONJUGATE,
    CAPABILITY_INNER_PRODUCT,
})

__all__ = [
    'CAPABILITY_FLOAT32',
    'CAPABILITY_FLOAT64',
    'CAPABILITY_CONCURRENT',
    'CAPABILITY_ACCELERATED',
    'CAPABILITY_COMPLEX',
    'CAPABILITY_CONJUGATE',
    'CAPABILITY_INNER_PRODUCT',
    'ALL_CAPABILITIES',
]
