"""
SumCheck Toolkit
================

An educational implementation of the SumCheck protocol: a Prover claims
that a function summed over all of {0,1}^n equals C, and a Verifier checks
the claim in n rounds with one random bit per round instead of 2^n
evaluations.

Modules:
    - common: Hypercube decoding, oracles, polynomials, challenge sources
    - protocol: Prover, Verifier, results, configuration
    - visualizer: Round reporters and transcript tables
    - analysis: Cost model and soundness analysis

Quick Start:
    >>> from sumcheck.protocol import Prover, Verifier
    >>> from sumcheck.common import EXAMPLE_POLYNOMIAL, RandomBitSource
    >>> prover = Prover(EXAMPLE_POLYNOMIAL, 5)
    >>> verifier = Verifier(5, RandomBitSource(seed=42))
    >>> verifier.verify(prover.calculate_sum(), prover)
    True
"""

__version__ = "0.1.0"

from . import common
from . import protocol
from . import visualizer
from . import analysis
