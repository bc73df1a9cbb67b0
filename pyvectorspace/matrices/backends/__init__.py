"""
Addition backends.

Vector and matrix addition are the only operations with a swappable
implementation. The choice is made independently of the rest of the
algebra:

    - per call: ``u.add(v, backend='gpu')``
    - for a block: ``with using_backend('gpu'): w = u + v``
    - process-wide: ``set_default_backend('auto')``

Available backends:
    CPUAdditionBackend: NumPy reference implementation (the default)
    GPUAdditionBackend: PyTorch adapter serialized behind ACCELERATOR_LOCK
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator, Literal, Union
import warnings

import numpy as np
from numpy.typing import NDArray

from pyvectorspace.core.compute.device import select_device
from pyvectorspace.core.exceptions import ValidationError
from pyvectorspace.core.protocols import AdditionBackend
from pyvectorspace.matrices.backends.cpu import CPUAdditionBackend


BackendChoice = Literal['auto', 'cpu', 'gpu']
BackendLike = Union[BackendChoice, AdditionBackend, None]

_default_backend: AdditionBackend = CPUAdditionBackend()
_scoped_backend: ContextVar[AdditionBackend | None] = ContextVar(
    'pyvectorspace_scoped_backend', default=None
)


def get_backend(backend: BackendChoice) -> AdditionBackend:
    """
    Select an addition backend by name.

    Args:
        backend: 'cpu', 'gpu' (raises if unavailable) or 'auto' (GPU if
            available, else CPU)

    Raises:
        RuntimeError: If 'gpu' requested but no GPU available
        ValidationError: If the name is unknown
    """
    if backend == 'cpu':
        return CPUAdditionBackend()

    if backend == 'auto':
        device = select_device('auto')
        if device.is_gpu:
            try:
                from pyvectorspace.matrices.backends.gpu import GPUAdditionBackend
                return GPUAdditionBackend(device=device)
            except (ImportError, RuntimeError) as e:
                warnings.warn(
                    f"GPU detected but accelerated addition unavailable ({e}), "
                    f"falling back to CPU"
                )
        return CPUAdditionBackend()

    if backend == 'gpu':
        device = select_device('gpu')
        from pyvectorspace.matrices.backends.gpu import GPUAdditionBackend
        return GPUAdditionBackend(device=device)

    raise ValidationError(f"Unknown backend: {backend!r}")


def _as_backend(backend: BackendChoice | AdditionBackend) -> AdditionBackend:
    if isinstance(backend, str):
        return get_backend(backend)
    if not isinstance(backend, AdditionBackend):
        raise ValidationError(
            f"backend must be 'auto', 'cpu', 'gpu' or an AdditionBackend, "
            f"got {type(backend).__name__}"
        )
    return backend


def get_default_backend() -> AdditionBackend:
    """Backend used when an operation is not given one explicitly."""
    scoped = _scoped_backend.get()
    return scoped if scoped is not None else _default_backend


def set_default_backend(backend: BackendChoice | AdditionBackend) -> AdditionBackend:
    """
    Set the process-wide default addition backend.

    Returns:
        The backend now in effect
    """
    global _default_backend
    _default_backend = _as_backend(backend)
    return _default_backend


@contextmanager
def using_backend(backend: BackendChoice | AdditionBackend) -> Iterator[AdditionBackend]:
    """
    Route additions in the current context through a backend.

    Usage:
        with using_backend('gpu'):
            w = u + v
    """
    token = _scoped_backend.set(_as_backend(backend))
    try:
        yield _scoped_backend.get()
    finally:
        _scoped_backend.reset(token)


def resolve_backend(backend: BackendLike = None) -> AdditionBackend:
    """Turn a per-call backend argument into a backend instance."""
    if backend is None:
        return get_default_backend()
    return _as_backend(backend)


def add_buffers(
    left: NDArray[np.floating[Any]],
    right: NDArray[np.floating[Any]],
    backend: BackendLike = None,
) -> NDArray[np.floating[Any]]:
    """Add two equal-shape buffers with the selected backend."""
    return resolve_backend(backend).add(left, right)


__all__ = [
    "BackendChoice",
    "CPUAdditionBackend",
    "add_buffers",
    "get_backend",
    "get_default_backend",
    "resolve_backend",
    "set_default_backend",
    "using_backend",
]
