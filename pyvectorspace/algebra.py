"""
Generic algebra over the capability protocols.

Every function here is written once against pyvectorspace.core.protocols
and runs unchanged over row vectors, column vectors and square matrices,
with real or complex entries of either precision. The concrete classes
delegate their derived operations (distance, normalization, commutator,
...) to these functions.
"""

from __future__ import annotations

from functools import reduce
from typing import Any, Callable, Iterable, TypeVar

from pyvectorspace.core.exceptions import ValidationError
from pyvectorspace.core.compute.precision import DEFAULT_PRECISION, precision_of
from pyvectorspace.core.protocols import (
    Addable,
    Composable,
    Conjugatable,
    HasInnerProduct,
    HasNorm,
    Mappable,
    Roundable,
    ScalarMultipliable,
    TensorProductable,
)
from pyvectorspace.numbers import real as real_ops
from pyvectorspace.numbers.real import R, RealScalar

T = TypeVar('T')


def _require(value: Any, protocol: type, operation: str) -> None:
    if not isinstance(value, protocol):
        raise ValidationError(
            f"{operation}: {type(value).__name__} does not implement {protocol.__name__}"
        )


def add(left: T, right: T) -> T:
    _require(left, Addable, 'add')
    return left.add(right)


def subtract(left: T, right: T) -> T:
    _require(left, Addable, 'subtract')
    return left.subtract(right)


def scale(scalar: Any, value: T) -> T:
    _require(value, ScalarMultipliable, 'scale')
    return value.scale(scalar)


def linear_combination(coefficients: Iterable[Any], values: Iterable[T]) -> T:
    """
    Sum of coefficient * value over paired sequences.

    Raises:
        ValidationError: If the sequences are empty or differ in length
    """
    coefficients = list(coefficients)
    values = list(values)
    if not values:
        raise ValidationError("linear_combination: requires at least one value")
    if len(coefficients) != len(values):
        raise ValidationError(
            f"linear_combination: {len(coefficients)} coefficients for {len(values)} values"
        )
    terms = [scale(c, v) for c, v in zip(coefficients, values)]
    return reduce(add, terms)


def map_entries(element_mapping: Callable[[Any], Any], value: T) -> T:
    """Apply element_mapping to every entry of a vector or matrix."""
    _require(value, Mappable, 'map_entries')
    return value.map(element_mapping)


def zip_entries(left: T, right: T, element_mapping: Callable[[Any, Any], Any]) -> T:
    _require(left, Mappable, 'zip_entries')
    return left.zip(right, element_mapping)


def tensor_product(left: T, right: T) -> T:
    _require(left, TensorProductable, 'tensor_product')
    return left.tensor_product(right)


def tensor_product_all(first: T, *rest: T) -> T:
    """Fold the tensor product left to right; associativity makes the grouping irrelevant."""
    return reduce(tensor_product, rest, first)


def inner_product(left: Any, right: Any) -> Any:
    _require(left, HasInnerProduct, 'inner_product')
    return left.inner_product(right)


def norm(value: Any) -> RealScalar:
    """
    sqrt of the real part of <v, v>.

    Values implementing HasNorm compute it themselves. Otherwise the
    imaginary part of <v, v> is zero up to rounding, so only the real part
    is kept.
    """
    if isinstance(value, HasNorm):
        return value.norm()
    self_product = inner_product(value, value)
    return real_ops.sqrt(self_product.real)


def distance(left: T, right: T) -> RealScalar:
    return norm(subtract(left, right))


def normalized(value: T) -> T:
    """
    Scale to unit norm.

    A zero vector yields NaN entries rather than an error.
    """
    length = norm(value)
    one = R(1, precision_of(length) or DEFAULT_PRECISION)
    return scale(real_ops.divide(one, length), value)


def adjoint(value: Any) -> Any:
    _require(value, Conjugatable, 'adjoint')
    return value.adjoint()


def commutator(left: T, right: T) -> T:
    """AB - BA"""
    _require(left, Composable, 'commutator')
    return subtract(left.multiply(right), right.multiply(left))


def are_equivalent(left: Any, right: Any) -> bool:
    """Exact entrywise equality."""
    _require(left, Roundable, 'are_equivalent')
    return left.are_equivalent(right)


def are_equal_after_rounding(left: Any, right: Any) -> bool:
    """Entrywise equality after rounding both operands to six decimals."""
    _require(left, Roundable, 'are_equal_after_rounding')
    _require(right, Roundable, 'are_equal_after_rounding')
    return left.round().are_equivalent(right.round())


__all__ = [
    "add",
    "adjoint",
    "are_equal_after_rounding",
    "are_equivalent",
    "commutator",
    "distance",
    "inner_product",
    "linear_combination",
    "map_entries",
    "norm",
    "normalized",
    "scale",
    "subtract",
    "tensor_product",
    "tensor_product_all",
    "zip_entries",
]
