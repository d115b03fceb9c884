"""Primitives - Prime fields, polynomials and evaluation domains."""

from fri_fold.primitives.domain import (
    check_domain,
    evaluation_domain,
    is_negation_symmetric,
)
from fri_fold.primitives.field import (
    DEMO_PRIME,
    GOLDILOCKS_PRIME,
    lift,
    lift_scalar,
    prime_field,
    to_ints,
)
from fri_fold.primitives.polynomial import Polynomial

__all__ = [
    # Field
    "DEMO_PRIME",
    "GOLDILOCKS_PRIME",
    "prime_field",
    "lift",
    "lift_scalar",
    "to_ints",
    # Polynomial
    "Polynomial",
    # Domain
    "evaluation_domain",
    "is_negation_symmetric",
    "check_domain",
]
