"""
SumCheck Protocol Kernel.

The two roles of the protocol and the types they exchange.

Key Components:
    - Prover: Computes the claimed sum and each round's (f(0), f(1))
    - Verifier: Drives the n rounds, checks f(0) + f(1), samples challenges
    - RoundData / VerificationResult: Structured record of a run
    - ProtocolConfig / run_sumcheck: Configuration and one-call orchestration

Usage:
    >>> from sumcheck.protocol import Prover, Verifier
    >>> from sumcheck.common import FixedChallenges
    >>>
    >>> prover = Prover(lambda x: x[0] + x[1], num_vars=2)
    >>> verifier = Verifier(2, randomness=FixedChallenges([1, 0]))
    >>> verifier.verify(prover.calculate_sum(), prover)
    True
"""

from ..common.errors import SumCheckError, PreconditionError, ChallengeError
from .prover import Prover
from .verifier import Verifier, RoundData, VerificationResult, interpolate
from .config import ProtocolConfig, create_demo_config, create_deterministic_config
from .session import run_sumcheck

__all__ = [
    "Prover",
    "Verifier",
    "RoundData",
    "VerificationResult",
    "interpolate",
    "ProtocolConfig",
    "create_demo_config",
    "create_deterministic_config",
    "run_sumcheck",
    "SumCheckError",
    "PreconditionError",
    "ChallengeError",
]
