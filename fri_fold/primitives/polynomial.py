"""Coefficient-form polynomials over a galois prime field.

Coefficients are stored in ascending order [c0, c1, c2, ...] with index 0 the
constant term. galois.Poly uses descending order and trims leading zeros, which
loses the coefficient positions the fold relies on, so the engine keeps its own
thin wrapper around a FieldArray and converts only at the boundary.
"""

from typing import Iterable, Optional, Tuple, Union

import galois
import numpy as np

from fri_fold.primitives.field import FieldLike, field_of, lift, lift_scalar


class Polynomial:
    """Immutable polynomial over GF(p). coeffs[0] = constant term.

    Trailing zero coefficients are kept: `len(p)` is the raw coefficient
    count, while equality and `degree` ignore them.
    """

    __slots__ = ("_coeffs",)

    def __init__(
        self,
        coefficients: Union[galois.FieldArray, Iterable[FieldLike]],
        field: Optional[type] = None,
    ) -> None:
        if field is None:
            if not isinstance(coefficients, galois.FieldArray):
                raise TypeError("field is required when coefficients are not a FieldArray")
            field = type(coefficients)

        coeffs = lift(field, coefficients)
        if coeffs.ndim != 1:
            raise ValueError(f"Expected 1-D coefficients, got {coeffs.ndim}D")

        # Own a private read-only copy so callers cannot mutate us
        coeffs = coeffs.copy()
        coeffs.flags.writeable = False
        self._coeffs = coeffs

    # --- Accessors ---

    @property
    def coefficients(self) -> galois.FieldArray:
        """Coefficients in ascending order (read-only)."""
        return self._coeffs

    @property
    def field(self) -> type:
        return type(self._coeffs)

    @property
    def degree(self) -> int:
        """Index of the highest non-zero coefficient (0 for the zero polynomial)."""
        nonzero = np.flatnonzero(self._coeffs.view(np.ndarray))
        return int(nonzero[-1]) if nonzero.size else 0

    def is_zero(self) -> bool:
        return not np.any(self._coeffs.view(np.ndarray))

    def trimmed(self) -> galois.FieldArray:
        """Coefficients without trailing zeros."""
        if self.is_zero():
            return self.field.Zeros(0)
        return self._coeffs[: self.degree + 1]

    def __len__(self) -> int:
        return len(self._coeffs)

    # --- Arithmetic ---

    @staticmethod
    def pad_with_zero_coefficients(a: "Polynomial", b: "Polynomial") -> Tuple["Polynomial", "Polynomial"]:
        """Pad the shorter polynomial with trailing zeros so both have equal length."""
        field = field_of(a.coefficients, b.coefficients)
        n = max(len(a), len(b))
        return a._padded(field, n), b._padded(field, n)

    def _padded(self, field: type, n: int) -> "Polynomial":
        if len(self) == n:
            return self
        out = field.Zeros(n)
        out[: len(self)] = self._coeffs
        return Polynomial(out)

    def __add__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        a, b = Polynomial.pad_with_zero_coefficients(self, other)
        return Polynomial(a._coeffs + b._coeffs)

    def scale(self, scalar: FieldLike) -> "Polynomial":
        """Multiply every coefficient by `scalar`."""
        return Polynomial(self._coeffs * lift_scalar(self.field, scalar))

    # --- Evaluation ---

    def evaluate(self, x: FieldLike) -> galois.FieldArray:
        """Evaluate polynomial at x using Horner's method."""
        x = lift_scalar(self.field, x)
        result = self.field(0)
        for coeff in self._coeffs[::-1]:
            result = result * x + coeff
        return result

    def evaluate_many(self, points: Union[galois.FieldArray, Iterable[FieldLike]]) -> galois.FieldArray:
        """Evaluate at every point, Horner's method vectorised over the points."""
        points = lift(self.field, points)
        result = self.field.Zeros(len(points))
        for coeff in self._coeffs[::-1]:
            result = result * points + coeff
        return result

    # --- Conversion ---

    def to_galois(self) -> galois.Poly:
        """Convert to a galois.Poly (descending order, trailing zeros dropped)."""
        trimmed = self.trimmed()
        if len(trimmed) == 0:
            return galois.Poly.Zero(field=self.field)
        return galois.Poly(trimmed[::-1], field=self.field)

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        if self.field is not other.field:
            return False
        return bool(np.array_equal(self.trimmed(), other.trimmed()))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        coeffs = ", ".join(str(int(c)) for c in self._coeffs)
        return f"Polynomial([{coeffs}], GF({self.field.order}))"
