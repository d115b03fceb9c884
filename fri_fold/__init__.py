"""
FRI Fold Engine

The prover-side FRI layer transition: fold a polynomial's coefficients by
parity with a random scalar, square the evaluation domain down to half size,
and evaluate the folded polynomial over the new domain.

This package provides:
- Prime field arithmetic over any modulus (via galois)
- Coefficient-form polynomials
- Negation-symmetric evaluation domains
- FRI folding primitives and a layer iterator

Usage:
    from fri_fold import Polynomial, prime_field, next_fri_layer

    GF = prime_field(293)
    p0 = Polynomial([3, 1, 2, 7, 3, 5], GF)
    layer = next_fri_layer(p0, GF([5, 7, 13, 20, 1, 1, 1, 1]), beta=4)
    layer.polynomial, layer.domain, layer.evaluations
"""

from fri_fold.errors import DomainError, FieldMismatchError, FriFoldError
from fri_fold.primitives import (
    DEMO_PRIME,
    GOLDILOCKS_PRIME,
    Polynomial,
    check_domain,
    evaluation_domain,
    is_negation_symmetric,
    prime_field,
)
from fri_fold.protocol import (
    FRI,
    FoldConfig,
    FriFolder,
    FriLayer,
    fold_polynomial,
    next_domain,
    next_fri_layer,
    next_layer,
)

__version__ = "0.1.0"
__all__ = [
    # Errors
    "FriFoldError",
    "DomainError",
    "FieldMismatchError",
    # Field
    "DEMO_PRIME",
    "GOLDILOCKS_PRIME",
    "prime_field",
    # Polynomial
    "Polynomial",
    # Domain
    "evaluation_domain",
    "is_negation_symmetric",
    "check_domain",
    # FRI
    "FRI",
    "FriLayer",
    "fold_polynomial",
    "next_domain",
    "next_layer",
    "next_fri_layer",
    "FoldConfig",
    "FriFolder",
]
