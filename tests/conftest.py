"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyvectorspace.matrices.backends import get_default_backend, set_default_backend
from pyvectorspace.numbers.fields import ComplexField, RealField


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(params=['float32', 'float64'])
def precision(request):
    return request.param


@pytest.fixture(params=[RealField('float64'), ComplexField('float64')], ids=['real', 'complex'])
def field(request):
    """Both scalar fields at double precision."""
    return request.param


@pytest.fixture
def restore_default_backend():
    """Put the process-wide default addition backend back after a test."""
    previous = get_default_backend()
    yield
    set_default_backend(previous)
