"""Prime fields GF(p) for the fold engine.

Uses galois library for all field arithmetic. The modulus is configuration:
`prime_field(p)` returns the galois FieldArray class for any prime the caller
selects, from the small reference prime up to production-size primes like
Goldilocks.
"""

import functools
from typing import Iterable, Union

import galois
import numpy as np

from fri_fold.errors import FieldMismatchError

# --- Field Construction ---

DEMO_PRIME = 293
"""Small reference modulus used by the worked folding examples."""

GOLDILOCKS_PRIME = 0xFFFFFFFF00000001
"""Goldilocks prime p = 2^64 - 2^32 + 1."""

# Known multiplicative generators, passed to galois to skip its search
_GENERATORS = {
    GOLDILOCKS_PRIME: 7,
}

FieldLike = Union[int, galois.FieldArray]


@functools.lru_cache(maxsize=None)
def prime_field(modulus: int) -> type:
    """Return the galois class for GF(modulus).

    Raises:
        ValueError: If modulus is not prime.
    """
    modulus = int(modulus)
    if modulus < 2 or not galois.is_prime(modulus):
        raise ValueError(f"Field modulus must be prime, got {modulus}")

    generator = _GENERATORS.get(modulus)
    if generator is not None:
        return galois.GF(modulus, primitive_element=generator, verify=False)
    return galois.GF(modulus)


# --- Lifting Python Values Into a Field ---


def lift(field: type, values: Union[Iterable[FieldLike], galois.FieldArray]) -> galois.FieldArray:
    """Lift a sequence of ints (or a FieldArray) into a 1-D array over `field`.

    Ints are reduced modulo the field order. A FieldArray over another field
    is rejected rather than silently reinterpreted.
    """
    if isinstance(values, galois.FieldArray):
        _check_same_field(field, type(values))
        return values
    reduced = [_reduce(field, v) for v in values]
    if not reduced:
        return field.Zeros(0)
    return field(reduced)


def lift_scalar(field: type, value: FieldLike) -> galois.FieldArray:
    """Lift a single int or field element into `field`."""
    if isinstance(value, galois.FieldArray):
        _check_same_field(field, type(value))
        if value.ndim != 0:
            raise ValueError(f"Expected a scalar field element, got shape {value.shape}")
        return value
    return field(_reduce(field, value))


def field_of(*arrays: galois.FieldArray) -> type:
    """Return the common field of the given arrays."""
    field = type(arrays[0])
    for arr in arrays[1:]:
        _check_same_field(field, type(arr))
    return field


def to_ints(values: galois.FieldArray) -> list:
    """Convert a FieldArray to a list of plain Python ints."""
    return [int(v) for v in np.atleast_1d(values)]


# --- Helpers ---


def _reduce(field: type, value: FieldLike) -> int:
    if isinstance(value, galois.FieldArray):
        _check_same_field(field, type(value))
    return int(value) % field.order


def _check_same_field(expected: type, actual: type) -> None:
    if expected is not actual:
        raise FieldMismatchError(
            f"Field mismatch: expected GF({expected.order}), got GF({actual.order})"
        )
