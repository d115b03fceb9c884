"""Evaluation domains closed under negation.

A FRI domain of even size m is laid out so that d[i + m/2] == -d[i]; squaring
the first half then yields the whole next domain. Multiplicative cosets of the
order-m subgroup have exactly this layout, since w^(m/2) = -1.
"""

import galois
import numpy as np

from fri_fold.errors import DomainError
from fri_fold.primitives.field import FieldLike, lift_scalar


def evaluation_domain(field: type, size: int, offset: FieldLike = 1) -> galois.FieldArray:
    """Return the coset [offset * w^i for i in range(size)], w a primitive size-th root.

    Raises:
        DomainError: If size is not a positive power of two dividing p - 1,
            or offset is zero.
    """
    if size <= 0 or (size & (size - 1)) != 0:
        raise DomainError(f"Domain size must be a positive power of 2, got {size}")
    if (field.order - 1) % size != 0:
        raise DomainError(f"GF({field.order}) has no subgroup of order {size}")

    offset = lift_scalar(field, offset)
    if offset == 0:
        raise DomainError("Domain offset must be non-zero")

    omega = field.primitive_root_of_unity(size) if size > 1 else field(1)
    roots = field.Zeros(size)
    roots[0] = field(1)
    for i in range(1, size):
        roots[i] = roots[i - 1] * omega
    return roots * offset


def is_negation_symmetric(domain: galois.FieldArray) -> bool:
    """Whether the second half of the domain is the negation of the first."""
    if domain.ndim != 1 or len(domain) % 2 != 0:
        return False
    half = len(domain) // 2
    return bool(np.array_equal(domain[half:], -domain[:half]))


def check_domain(domain: galois.FieldArray) -> None:
    """Raise DomainError unless the domain is closed under negation."""
    if domain.ndim != 1:
        raise DomainError(f"Expected 1-D domain, got {domain.ndim}D")
    if len(domain) % 2 != 0:
        raise DomainError(f"Domain size must be even, got {len(domain)}")
    if not is_negation_symmetric(domain):
        raise DomainError("Domain is not closed under negation: d[i + m/2] != -d[i]")
