"""Exceptions raised by the fold engine and its helpers.

The four folding operations themselves are total and never raise on
well-typed input. These are raised by input lifting, domain construction
and the optional domain checks.
"""


class FriFoldError(Exception):
    """Base class for every error raised by this package."""


class DomainError(FriFoldError, ValueError):
    """Evaluation domain has the wrong shape, size or symmetry."""


class FieldMismatchError(FriFoldError, TypeError):
    """Operands belong to different prime fields."""
