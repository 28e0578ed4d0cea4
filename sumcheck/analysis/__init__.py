"""
SumCheck Cost and Soundness Analysis

Tools for measuring what the protocol costs and how much it guarantees.

Key Components:
    - estimate_costs / measure_costs: Oracle-call accounting per round
    - CostMetrics: Results and summary
    - DishonestProver: A prover that hides a wrong claim in round 0
    - analyze_soundness: Verify a claim under every challenge sequence

Usage:
    >>> from sumcheck.analysis import estimate_costs, analyze_soundness, DishonestProver
    >>> from sumcheck.common import EXAMPLE_POLYNOMIAL
    >>> from sumcheck.protocol import Prover
    >>>
    >>> print(estimate_costs(5).summary())
    >>> cheat = DishonestProver(Prover(EXAMPLE_POLYNOMIAL, 5), offset=3)
    >>> report = analyze_soundness(cheat, cheat.calculate_sum())
    >>> print(f"Acceptance: {report.acceptance_rate:.0%}")
"""

from .cost import (
    RoundCost,
    CostMetrics,
    estimate_costs,
    measure_costs,
    cost_table,
    cost_breakdown,
    VERIFIER_OPS_PER_ROUND,
)
from .soundness import (
    DishonestProver,
    SoundnessReport,
    analyze_soundness,
    enumerate_challenge_sequences,
)

__all__ = [
    "RoundCost",
    "CostMetrics",
    "estimate_costs",
    "measure_costs",
    "cost_table",
    "cost_breakdown",
    "VERIFIER_OPS_PER_ROUND",
    "DishonestProver",
    "SoundnessReport",
    "analyze_soundness",
    "enumerate_challenge_sequences",
]
