"""
Pytest configuration for fri_fold tests.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to the path so `fri_fold` imports without installing
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from fri_fold.primitives.field import DEMO_PRIME, prime_field  # noqa: E402
from fri_fold.primitives.polynomial import Polynomial  # noqa: E402
from tests.fri_vectors import P0_COEFFS  # noqa: E402


@pytest.fixture
def gf():
    """GF(293), the field of the reference vectors."""
    return prime_field(DEMO_PRIME)


@pytest.fixture
def p0(gf):
    """p0 = 3 + x + 2x^2 + 7x^3 + 3x^4 + 5x^5."""
    return Polynomial(P0_COEFFS, gf)
