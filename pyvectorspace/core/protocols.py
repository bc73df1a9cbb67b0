"""
Core protocols for PyVectorSpace.

Each protocol is one small capability set. Vectors and matrices implement
them once, generic over their scalar field, and the free functions in
pyvectorspace.algebra are written against the protocols rather than the
concrete classes.

We use Protocol (structural typing) rather than ABC (nominal typing) so
that RowVector, ColumnVector and SquareMatrix share no base class beyond
what they actually need.

Design Principles:
    - Minimal contracts: one capability per protocol
    - Capability-driven: use supports() for optional features
    - Type-safe: Self and the scalar TypeVar preserve types through pipelines
"""

from typing import Protocol, TypeVar, Any, Callable, Self, runtime_checkable

import numpy as np
from numpy.typing import NDArray

S = TypeVar('S')  # Scalar type (RealScalar or ComplexNumber)


@runtime_checkable
class Addable(Protocol):
    """Values of one shape forming an additive group."""

    def add(self, other: Self) -> Self:
        ...

    def subtract(self, other: Self) -> Self:
        ...

    def additive_inverse(self) -> Self:
        ...


@runtime_checkable
class ScalarMultipliable(Protocol[S]):
    """Values that can be scaled by a scalar of their field."""

    def scale(self, scalar: S) -> Self:
        ...


@runtime_checkable
class TensorProductable(Protocol):
    """Values closed under the (associative) tensor product."""

    def tensor_product(self, other: Self) -> Self:
        ...


@runtime_checkable
class Composable(Protocol):
    """Values with an associative (not necessarily commutative) product."""

    def multiply(self, other: Self) -> Self:
        ...


@runtime_checkable
class Conjugatable(Protocol):
    """Values with a conjugate (the identity over the reals) and an adjoint."""

    def conjugate(self) -> Self:
        ...

    def adjoint(self) -> Any:
        ...


@runtime_checkable
class Roundable(Protocol):
    """Values that can be rounded entrywise and compared exactly."""

    def round(self) -> Self:
        ...

    def are_equivalent(self, other: Self) -> bool:
        ...


@runtime_checkable
class Mappable(Protocol[S]):
    """Containers transformed entrywise into a container of the same shape."""

    def map(self, element_mapping: Callable[[S], S]) -> Self:
        ...

    def zip(self, other: Self, element_mapping: Callable[[S, S], S]) -> Self:
        ...


@runtime_checkable
class HasInnerProduct(Protocol[S]):
    """Values of an inner-product space."""

    def inner_product(self, other: Self) -> S:
        ...


@runtime_checkable
class HasNorm(Protocol):
    """Values with a real-valued norm."""

    def norm(self) -> np.floating[Any]:
        ...


@runtime_checkable
class AdditionBackend(Protocol):
    """
    Protocol for vector-addition backends.

    A backend adds two equal-shape float32 or float64 buffers and returns a
    newly allocated result buffer. Vector and matrix addition route through
    whichever backend is selected; nothing else in the algebra does.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_addition'
        Examples: 'cpu_addition', 'gpu_addition'
        """
        ...

    def supports(self, capability: str) -> bool:
        """
        Check if this backend supports a given capability.

        Note:
            Unknown capabilities MUST return False, never raise.
        """
        ...

    def add(
        self,
        left: NDArray[np.floating[Any]],
        right: NDArray[np.floating[Any]],
    ) -> NDArray[np.floating[Any]]:
        """
        Add two buffers of identical shape and dtype.

        Raises:
            DimensionError: If the buffers differ in shape
            ValidationError: If the buffers are not float32/float64
            AcceleratorError: If an accelerator reports a failure
        """
        ...
