"""FRI layer folding: coefficient fold, domain fold and layer evaluation.

One call to `next_fri_layer` is one prover-side FRI round. Writing
p(x) = g(x^2) + x*h(x^2), the folded polynomial is q(y) = g(y) + beta*h(y),
the next domain is the square of the first half of the current one, and the
layer's evaluation table is q over that next domain. Everything here is a pure
function; the caller threads (polynomial, domain) between rounds and supplies
beta from its transcript.
"""

from typing import Iterable, NamedTuple, Union

import galois

from fri_fold.errors import DomainError
from fri_fold.primitives.field import FieldLike, lift, lift_scalar
from fri_fold.primitives.polynomial import Polynomial

# --- Type Aliases ---

Domain = galois.FieldArray  # 1-D evaluation points
Evaluations = galois.FieldArray  # 1-D values, same order as the domain


class FriLayer(NamedTuple):
    """One layer transition: folded polynomial, next domain, its evaluations."""
    polynomial: Polynomial
    domain: Domain
    evaluations: Evaluations


# --- FRI Folding ---


def fold_polynomial(polynomial: Polynomial, beta: FieldLike) -> Polynomial:
    """Fold coefficients by parity: even + beta * odd.

    The result has ceil(n/2) coefficients; the odd half is zero-padded when
    n is odd. Degenerate inputs (0 or 1 coefficients) fold to themselves.
    """
    coeffs = polynomial.coefficients
    beta = lift_scalar(polynomial.field, beta)

    even = Polynomial(coeffs[0::2])
    odd_mul_beta = Polynomial(coeffs[1::2] * beta)

    even, odd_mul_beta = Polynomial.pad_with_zero_coefficients(even, odd_mul_beta)
    return even + odd_mul_beta


def next_domain(domain: Domain) -> Domain:
    """Square the first half of the domain (floor(m/2) points)."""
    if not isinstance(domain, galois.FieldArray):
        raise TypeError(f"Domain must be a galois FieldArray, got {type(domain).__name__}")
    if domain.ndim != 1:
        raise DomainError(f"Expected 1-D domain, got {domain.ndim}D")

    half = len(domain) // 2
    return domain[:half] ** 2


def next_layer(polynomial: Polynomial, domain: Union[Domain, Iterable[FieldLike]]) -> Evaluations:
    """Evaluate the polynomial at every point of the domain, in order."""
    points = lift(polynomial.field, domain)
    if points.ndim != 1:
        raise DomainError(f"Expected 1-D domain, got {points.ndim}D")
    return polynomial.evaluate_many(points)


def next_fri_layer(polynomial: Polynomial, domain: Domain, beta: FieldLike) -> FriLayer:
    """Run one FRI round.

    Returns:
        * polynomial folded with beta
        * next (half-size) domain
        * evaluations of the folded polynomial over the next domain
    """
    folded = fold_polynomial(polynomial, beta)
    domain = next_domain(lift(polynomial.field, domain))
    evaluations = next_layer(folded, domain)
    return FriLayer(folded, domain, evaluations)


class FRI:
    """FRI folding operations, grouped for callers that prefer a namespace."""

    fold_polynomial = staticmethod(fold_polynomial)
    next_domain = staticmethod(next_domain)
    next_layer = staticmethod(next_layer)
    next_fri_layer = staticmethod(next_fri_layer)
