"""
SumCheck Cost Model.

Counts oracle calls, the only expensive operation in this protocol.

    Prover:
        calculate_sum()              2^n calls
        round i message (f0, f1)     2 × 2^(n-i-1) = 2^(n-i) calls
        all n rounds                 2^n + 2^(n-1) + ... + 2 = 2^(n+1) - 2

    Verifier:
        per round                    one addition, one comparison and one
                                     interpolation; no oracle calls at all

The point of the protocol is the Verifier column: n constant-size rounds
instead of 2^n evaluations. The Prover still pays exponentially, and in
this naive scheme it pays roughly three times the plain summation.

estimate_costs() gives the closed-form numbers; measure_costs() runs the
real Prover and Verifier over a CountingOracle and records what happened.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from tabulate import tabulate

from ..common.oracle import CountingOracle, Oracle
from ..common.randomness import FixedChallenges
from ..protocol.prover import Prover
from ..protocol.verifier import Verifier
from ..visualizer.core import RoundReporter

# f0 + f1, the comparison, and f0 * (1 - r) + f1 * r (sub, 2 mul, add)
VERIFIER_OPS_PER_ROUND = 6


@dataclass
class RoundCost:
    """Cost of a single round."""
    round_index: int
    free_vars: int
    oracle_calls: int
    verifier_ops: int = VERIFIER_OPS_PER_ROUND


@dataclass
class CostMetrics:
    """
    Oracle-call accounting for one protocol run.

    Attributes:
        num_vars: Number of variables n
        sum_calls: Oracle calls made by calculate_sum()
        round_costs: Per-round breakdown
        measured: True if counted from a real run, False if estimated
    """
    num_vars: int
    sum_calls: int
    round_costs: List[RoundCost] = field(default_factory=list)
    measured: bool = False

    @property
    def round_calls(self) -> List[int]:
        return [rc.oracle_calls for rc in self.round_costs]

    @property
    def protocol_calls(self) -> int:
        """Oracle calls spent answering the Verifier."""
        return sum(self.round_calls)

    @property
    def total_prover_calls(self) -> int:
        return self.sum_calls + self.protocol_calls

    @property
    def verifier_ops(self) -> int:
        return sum(rc.verifier_ops for rc in self.round_costs)

    @property
    def verifier_advantage(self) -> float:
        """Brute-force evaluations avoided per verifier operation."""
        if self.verifier_ops == 0:
            return 0.0
        return self.sum_calls / self.verifier_ops

    def summary(self) -> str:
        kind = "measured" if self.measured else "estimated"
        return (
            f"CostMetrics ({kind}):\n"
            f"  Variables: {self.num_vars}\n"
            f"  calculate_sum calls: {self.sum_calls:,}\n"
            f"  Round calls: {self.round_calls}\n"
            f"  Protocol calls: {self.protocol_calls:,}\n"
            f"  Total prover calls: {self.total_prover_calls:,}\n"
            f"  Verifier operations: {self.verifier_ops}\n"
            f"  Verifier advantage: {self.verifier_advantage:.1f}x"
        )

    def __repr__(self) -> str:
        return (f"CostMetrics(n={self.num_vars}, prover_calls={self.total_prover_calls:,}, "
                f"verifier_ops={self.verifier_ops})")


def estimate_costs(num_vars: int) -> CostMetrics:
    """Closed-form costs for an n-variable run that accepts."""
    if num_vars < 1:
        raise ValueError("num_vars must be at least 1")
    rounds = [
        RoundCost(round_index=i, free_vars=num_vars - i - 1,
                  oracle_calls=1 << (num_vars - i))
        for i in range(num_vars)
    ]
    return CostMetrics(num_vars=num_vars, sum_calls=1 << num_vars, round_costs=rounds)


class _CallCountReporter(RoundReporter):
    """Snapshots a CountingOracle after every round."""

    def __init__(self, counter: CountingOracle, num_vars: int):
        self.counter = counter
        self.num_vars = num_vars
        self.round_costs: List[RoundCost] = []
        self._last = 0

    def report(self, round_data):
        calls = self.counter.calls - self._last
        self._last = self.counter.calls
        self.round_costs.append(RoundCost(
            round_index=round_data.round_index,
            free_vars=self.num_vars - round_data.round_index - 1,
            oracle_calls=calls,
        ))


def measure_costs(oracle: Oracle, num_vars: int,
                  challenges: Optional[Sequence[int]] = None) -> CostMetrics:
    """
    Run an honest session over a counting oracle and record call counts.

    Args:
        oracle: Function to sum
        num_vars: Number of variables
        challenges: Challenge bits to use (default: all zeros)
    """
    counter = CountingOracle(oracle)
    prover = Prover(counter, num_vars)

    claimed_sum = prover.calculate_sum()
    sum_calls = counter.calls
    counter.reset()

    if challenges is None:
        challenges = [0] * num_vars
    reporter = _CallCountReporter(counter, num_vars)
    verifier = Verifier(num_vars, FixedChallenges(challenges), reporter)
    verifier.run(claimed_sum, prover)

    return CostMetrics(
        num_vars=num_vars,
        sum_calls=sum_calls,
        round_costs=reporter.round_costs,
        measured=True,
    )


def cost_table(max_vars: int, tablefmt: str = "simple") -> str:
    """Tabulate estimated costs for n = 1 .. max_vars."""
    rows = []
    for n in range(1, max_vars + 1):
        m = estimate_costs(n)
        rows.append([n, m.sum_calls, m.protocol_calls, m.total_prover_calls,
                     m.verifier_ops, f"{m.verifier_advantage:.1f}x"])
    headers = ["n", "Sum calls", "Round calls", "Prover total",
               "Verifier ops", "Advantage"]
    return tabulate(rows, headers=headers, tablefmt=tablefmt)


def cost_breakdown(metrics: CostMetrics) -> Dict[str, float]:
    """Share of Prover oracle calls spent on the sum versus the rounds."""
    total = metrics.total_prover_calls
    if total == 0:
        return {"sum": 0.0, "rounds": 0.0}
    return {
        "sum": metrics.sum_calls / total,
        "rounds": metrics.protocol_calls / total,
    }
