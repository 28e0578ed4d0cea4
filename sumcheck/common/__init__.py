"""
Common utilities for the SumCheck toolkit.

This module provides:
    - Hypercube enumeration (decode_index, iter_assignments, hypercube)
    - The oracle capability (Oracle, FunctionOracle, CountingOracle)
    - Polynomial oracles (Polynomial, Term)
    - Challenge sources (RandomBitSource, FixedChallenges)
    - Error types
"""

from .errors import SumCheckError, PreconditionError, ChallengeError
from .hypercube import decode_index, iter_assignments, hypercube, write_suffix
from .oracle import Oracle, FunctionOracle, CountingOracle, as_oracle
from .polynomial import (
    Term,
    Polynomial,
    EXAMPLE_POLYNOMIAL,
    example_function,
    create_example_polynomial,
    create_linear_sum,
    create_product,
    parse_polynomial,
)
from .randomness import ChallengeSource, RandomBitSource, FixedChallenges

__all__ = [
    "SumCheckError",
    "PreconditionError",
    "ChallengeError",
    "decode_index",
    "iter_assignments",
    "hypercube",
    "write_suffix",
    "Oracle",
    "FunctionOracle",
    "CountingOracle",
    "as_oracle",
    "Term",
    "Polynomial",
    "EXAMPLE_POLYNOMIAL",
    "example_function",
    "create_example_polynomial",
    "create_linear_sum",
    "create_product",
    "parse_polynomial",
    "ChallengeSource",
    "RandomBitSource",
    "FixedChallenges",
]
