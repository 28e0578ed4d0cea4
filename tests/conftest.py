"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Allow running the suite from a plain checkout without installing
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from sumcheck.common.hypercube import iter_assignments
from sumcheck.common.polynomial import create_example_polynomial, create_linear_sum
from sumcheck.protocol.prover import Prover


def brute_force_sum(oracle, num_vars, prefix=()):
    """Sum the oracle over all completions of a fixed prefix."""
    prefix = tuple(prefix)
    free = num_vars - len(prefix)
    return sum(oracle(prefix + suffix) for suffix in iter_assignments(free))


@pytest.fixture
def linear_poly():
    """f(x0, x1) = x0 + x1, true sum 4."""
    return create_linear_sum(2)


@pytest.fixture
def linear_prover(linear_poly):
    return Prover(linear_poly, 2)


@pytest.fixture
def example_poly():
    """2*x0^2 + x1 + x0*x1*x2 - x3 + x1*x4^3, true sum 44."""
    return create_example_polynomial()


@pytest.fixture
def example_prover(example_poly):
    return Prover(example_poly, 5)


@pytest.fixture
def brute_force():
    return brute_force_sum
