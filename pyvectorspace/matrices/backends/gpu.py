"""
GPU backend for vector addition using PyTorch.

The accelerator is an external resource that is NOT safe for concurrent
use. Every call into it goes through ACCELERATOR_LOCK, a single
process-wide lock shared by all GPUAdditionBackend instances, whatever
the precision or the calling thread. Callers block until the lock is
free; there is no timeout and no cancellation.

The adapter talks to a device primitive with one entry point per
precision. Each entry point fills a caller-allocated output buffer and
returns an AcceleratorStatus; any status other than SUCCEEDED is raised
as AcceleratorError and the output buffer is discarded. Failed calls are
never retried.

Supports CUDA (Linux/Windows) and MPS (macOS Apple Silicon). MPS has no
float64, so double-precision additions fail with UNSUPPORTED_PRECISION
there.
"""

from __future__ import annotations

from enum import IntEnum
import threading
from typing import Any, Callable, Protocol

import numpy as np
from numpy.typing import NDArray

from pyvectorspace.core.capabilities import (
    CAPABILITY_FLOAT32,
    CAPABILITY_FLOAT64,
    CAPABILITY_ACCELERATED,
)
from pyvectorspace.core.compute.device import DeviceInfo, select_device
from pyvectorspace.core.exceptions import AcceleratorError
from pyvectorspace.core.validation import check_matching_buffers


ACCELERATOR_LOCK = threading.Lock()


class AcceleratorStatus(IntEnum):
    """Status codes returned by a device addition primitive."""
    SUCCEEDED = 0
    SET_DEVICE_FAILED = 1
    DEVICE_RESET_FAILED = 2
    MALLOC_FAILED = 3
    MEMCPY_FAILED = 4
    KERNEL_FAILED = 5
    DEVICE_SYNCHRONIZE_FAILED = 6
    UNSUPPORTED_PRECISION = 7


def _as_status(code: int) -> AcceleratorStatus | int:
    """Enum member for a known status code, the raw integer otherwise."""
    try:
        return AcceleratorStatus(code)
    except ValueError:
        return int(code)


class DevicePrimitive(Protocol):
    """
    Native addition primitive.

    Both entry points add the first `length` elements of `left` and
    `right` into `out`, which the caller allocates, and report the outcome
    as a status code. They are only ever called while ACCELERATOR_LOCK is
    held.

    last_error holds the exception behind the most recent failure, if the
    primitive has one.
    """

    last_error: BaseException | None

    def single_precision_vector_addition(
        self,
        left: NDArray[np.float32],
        right: NDArray[np.float32],
        out: NDArray[np.float32],
        length: int,
    ) -> AcceleratorStatus:
        ...

    def double_precision_vector_addition(
        self,
        left: NDArray[np.float64],
        right: NDArray[np.float64],
        out: NDArray[np.float64],
        length: int,
    ) -> AcceleratorStatus:
        ...


class TorchAdditionPrimitive:
    """
    Device primitive implemented with PyTorch.

    Each stage of the transfer/compute/copy-back pipeline maps its
    failures onto the matching status code.
    """

    def __init__(self, device: DeviceInfo):
        import torch

        if not device.is_gpu:
            raise ValueError(
                f"TorchAdditionPrimitive requires GPU device, got {device.device_type}"
            )
        self._torch_device = device.torch_device
        self.device = device
        self.last_error: BaseException | None = None

    def single_precision_vector_addition(self, left, right, out, length):
        import torch
        return self._vector_addition(left, right, out, length, torch.float32)

    def double_precision_vector_addition(self, left, right, out, length):
        import torch
        if not self.device.supports_float64:
            self.last_error = None
            return AcceleratorStatus.UNSUPPORTED_PRECISION
        return self._vector_addition(left, right, out, length, torch.float64)

    def _vector_addition(self, left, right, out, length, dtype) -> AcceleratorStatus:
        import torch

        self.last_error = None

        try:
            device = torch.device(self._torch_device)
            if device.type == 'cuda':
                torch.cuda.set_device(device)
        except RuntimeError as e:
            self.last_error = e
            return AcceleratorStatus.SET_DEVICE_FAILED

        try:
            left_gpu = torch.empty(length, dtype=dtype, device=device)
            right_gpu = torch.empty(length, dtype=dtype, device=device)
        except RuntimeError as e:  # includes torch.cuda.OutOfMemoryError
            self.last_error = e
            return AcceleratorStatus.MALLOC_FAILED

        try:
            left_gpu.copy_(torch.from_numpy(left[:length]))
            right_gpu.copy_(torch.from_numpy(right[:length]))
        except RuntimeError as e:
            self.last_error = e
            return AcceleratorStatus.MEMCPY_FAILED

        try:
            result_gpu = torch.add(left_gpu, right_gpu)
        except RuntimeError as e:
            self.last_error = e
            return AcceleratorStatus.KERNEL_FAILED

        try:
            if device.type == 'cuda':
                torch.cuda.synchronize(device)
            elif device.type == 'mps':
                torch.mps.synchronize()
        except RuntimeError as e:
            self.last_error = e
            return AcceleratorStatus.DEVICE_SYNCHRONIZE_FAILED

        try:
            out[:length] = result_gpu.cpu().numpy()
        except RuntimeError as e:
            self.last_error = e
            return AcceleratorStatus.MEMCPY_FAILED

        return AcceleratorStatus.SUCCEEDED


class GPUAdditionBackend:
    """
    Accelerated addition of float32/float64 buffers.

    Buffers are validated for shape, dtype and contiguity before the call;
    the result is a freshly allocated buffer of the same shape, written by
    the device primitive while ACCELERATOR_LOCK is held.
    """

    def __init__(
        self,
        device: DeviceInfo | None = None,
        primitive: DevicePrimitive | None = None,
    ):
        """
        Initialize GPU backend.

        Parameters
        ----------
        device : DeviceInfo, optional
            Device info from select_device(). If None and no primitive is
            given, selects the GPU (raises RuntimeError if there is none).
        primitive : DevicePrimitive, optional
            Device primitive to call. Defaults to TorchAdditionPrimitive on
            the selected device.
        """
        if primitive is None:
            if device is None:
                device = select_device('gpu')
            elif not device.is_gpu:
                raise ValueError(
                    f"GPUAdditionBackend requires GPU device, got {device.device_type}"
                )
            primitive = TorchAdditionPrimitive(device)
        self.device = device
        self._primitive = primitive

    @property
    def name(self) -> str:
        return 'gpu_addition'

    def supports(self, capability: str) -> bool:
        if capability == CAPABILITY_FLOAT64:
            return self.device is None or self.device.supports_float64
        return capability in (CAPABILITY_FLOAT32, CAPABILITY_ACCELERATED)

    def _entry_point(self, dtype: np.dtype) -> Callable[..., AcceleratorStatus]:
        if dtype == np.float32:
            return self._primitive.single_precision_vector_addition
        return self._primitive.double_precision_vector_addition

    def add(
        self,
        left: NDArray[np.floating[Any]],
        right: NDArray[np.floating[Any]],
    ) -> NDArray[np.floating[Any]]:
        """
        Add two buffers on the accelerator.

        Blocks until ACCELERATOR_LOCK is free.

        Raises:
            DimensionError: If the buffers differ in shape
            ValidationError: If a buffer is not a contiguous float32/float64 array
            AcceleratorError: If the device primitive reports a failure
        """
        check_matching_buffers(left, right, self.name)
        entry_point = self._entry_point(left.dtype)
        result = np.empty_like(left)

        with ACCELERATOR_LOCK:
            status = entry_point(
                left.reshape(-1),
                right.reshape(-1),
                result.reshape(-1),
                left.size,
            )
            cause = getattr(self._primitive, 'last_error', None)

        if status != AcceleratorStatus.SUCCEEDED:
            status = _as_status(status)
            label = status.name if isinstance(status, AcceleratorStatus) else 'UNKNOWN'
            raise AcceleratorError(
                f"{self.name}: accelerated {left.dtype} addition of {left.size} "
                f"elements failed with status {label} ({int(status)})",
                status=status,
                backend_name=self.name,
            ) from cause
        return result

    def warmup(self) -> None:
        """Run one single-element addition to initialize the device context."""
        one = np.ones(1, dtype=np.float32)
        self.add(one, one)

    def __repr__(self) -> str:
        return f'GPUAdditionBackend(device={self.device})'
