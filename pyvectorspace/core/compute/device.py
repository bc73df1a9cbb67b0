"""
Accelerator detection.

Finds the device the GPU addition backend would run on. PyTorch is the
only way we talk to a GPU, so no torch means no GPU, and torch is only
imported when a caller actually asks for one.
"""

from dataclasses import dataclass
from typing import Literal
import platform

DevicePreference = Literal['cpu', 'gpu', 'auto']


@dataclass(frozen=True)
class DeviceInfo:
    """
    A device that can hold addition buffers.

    Attributes:
        device_type: 'cpu', 'cuda' or 'mps'
        device_index: Ordinal of a CUDA device, 0 for MPS, None for CPU
        name: Human-readable device name
        memory_bytes: Total device memory, None if the backend hides it
        supports_float64: False on MPS, which has no double precision
    """
    device_type: Literal['cpu', 'cuda', 'mps']
    device_index: int | None
    name: str
    memory_bytes: int | None
    supports_float64: bool

    @property
    def is_gpu(self) -> bool:
        return self.device_type != 'cpu'

    @property
    def torch_device(self) -> str:
        """PyTorch device string, e.g. 'cuda:1' or 'mps'."""
        if self.device_type == 'cuda':
            return f'cuda:{self.device_index or 0}'
        return self.device_type

    def __str__(self) -> str:
        if not self.is_gpu:
            return f"CPU ({self.name})"
        details = self.name
        if self.memory_bytes is not None:
            details += f", {self.memory_bytes / 1024**3:.1f}GB"
        return f"{self.device_type.upper()}:{self.device_index} ({details})"


def _cuda_device(torch) -> DeviceInfo | None:
    if not torch.cuda.is_available():
        return None
    index = torch.cuda.current_device()
    properties = torch.cuda.get_device_properties(index)
    return DeviceInfo(
        device_type='cuda',
        device_index=index,
        name=properties.name,
        memory_bytes=properties.total_memory,
        supports_float64=True,
    )


def _mps_device(torch) -> DeviceInfo | None:
    mps = getattr(torch.backends, 'mps', None)
    if mps is None or not mps.is_available():
        return None
    return DeviceInfo(
        device_type='mps',
        device_index=0,
        name='Apple Silicon GPU',
        memory_bytes=None,
        supports_float64=False,
    )


def detect_gpu() -> DeviceInfo | None:
    """
    The best available accelerator, CUDA before MPS.

    Returns:
        DeviceInfo, or None when torch is missing or sees no device
    """
    try:
        import torch
    except ImportError:
        return None
    return _cuda_device(torch) or _mps_device(torch)


def get_cpu_info() -> DeviceInfo:
    return DeviceInfo(
        device_type='cpu',
        device_index=None,
        name=platform.processor() or platform.machine() or "Unknown CPU",
        memory_bytes=None,
        supports_float64=True,
    )


def select_device(prefer: DevicePreference = 'auto') -> DeviceInfo:
    """
    Resolve a device preference.

    Args:
        prefer: 'cpu' never probes for a GPU, 'gpu' insists on one and
            'auto' takes a GPU when there is one

    Raises:
        RuntimeError: If 'gpu' requested but no GPU available
    """
    if prefer == 'cpu':
        return get_cpu_info()

    gpu = detect_gpu()
    if gpu is not None:
        return gpu
    if prefer == 'gpu':
        raise RuntimeError(
            "GPU requested but no CUDA or MPS device was found. "
            "Install PyTorch with CUDA/MPS support to use accelerated addition."
        )
    return get_cpu_info()
