"""
Soundness Analysis by Exhaustive Challenge Enumeration.

With bit challenges there are only 2^n possible challenge sequences, so for
small n we can run the Verifier under every one of them and count exactly
how often a claim is accepted.

What to expect:
    - Honest Prover, true sum:       accepted under every sequence
    - Honest Prover, wrong sum:      rejected in round 0 under every sequence
    - DishonestProver (lies in round 0 to cover a wrong sum):
          n = 1  → always accepted (no later round can notice)
          n ≥ 2  → accepted exactly half the time; when r_0 = 0 the lie is
                   carried into round 1 and caught there

The last case is the price of bit challenges: a one-round lie survives with
probability 1/2, where field-element challenges would make it 1/|F|-ish.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from ..common.hypercube import hypercube
from ..common.randomness import FixedChallenges
from ..protocol.prover import Prover
from ..protocol.verifier import Verifier


class DishonestProver:
    """
    A Prover that shifts its claim by `offset` and hides it in round 0.

    calculate_sum() returns the true sum plus offset. In round 0 the
    reported f(0) is raised by offset so that f(0) + f(1) matches the false
    claim; every later round is answered honestly.

    Args:
        prover: Honest prover to wrap
        offset: Amount added to the true sum (non-zero for a real lie)
    """

    def __init__(self, prover: Prover, offset: int):
        self.prover = prover
        self.offset = offset

    @property
    def num_vars(self) -> int:
        return self.prover.num_vars

    def calculate_sum(self) -> int:
        return self.prover.calculate_sum() + self.offset

    def evaluate_polynomial(self, fixed_inputs: Sequence[int],
                            var_index: int) -> Tuple[int, int]:
        f0, f1 = self.prover.evaluate_polynomial(fixed_inputs, var_index)
        if var_index == 0:
            f0 += self.offset
        return f0, f1

    def __repr__(self) -> str:
        return f"DishonestProver({self.prover!r}, offset={self.offset})"


def enumerate_challenge_sequences(num_vars: int) -> np.ndarray:
    """All 2^n challenge sequences as rows of a 0/1 matrix."""
    return hypercube(num_vars)


@dataclass
class SoundnessReport:
    """
    Outcome of verifying one claim under every challenge sequence.

    Attributes:
        num_vars: Number of variables n
        claimed_sum: The claim that was checked
        outcomes: Boolean array, outcomes[i] for challenge sequence row i
        rejection_rounds: Histogram {round index: number of rejections}
        accepting_sequences: Challenge sequences that led to acceptance
    """
    num_vars: int
    claimed_sum: int
    outcomes: np.ndarray
    rejection_rounds: Dict[int, int] = field(default_factory=dict)
    accepting_sequences: List[Tuple[int, ...]] = field(default_factory=list)

    @property
    def num_sequences(self) -> int:
        return int(self.outcomes.size)

    @property
    def accepted(self) -> int:
        return int(np.count_nonzero(self.outcomes))

    @property
    def acceptance_rate(self) -> float:
        if self.num_sequences == 0:
            return 0.0
        return float(np.mean(self.outcomes))

    @property
    def rejection_rate(self) -> float:
        return 1.0 - self.acceptance_rate

    def summary(self) -> str:
        rounds = ", ".join(f"round {r}: {c}" for r, c in sorted(self.rejection_rounds.items()))
        return (
            f"SoundnessReport:\n"
            f"  Claimed sum: {self.claimed_sum}\n"
            f"  Challenge sequences: {self.num_sequences}\n"
            f"  Accepted: {self.accepted} ({self.acceptance_rate:.1%})\n"
            f"  Rejections by round: {rounds or 'none'}"
        )


def analyze_soundness(prover, claimed_sum: int,
                      num_vars: Optional[int] = None) -> SoundnessReport:
    """
    Verify `claimed_sum` against `prover` under all 2^n challenge sequences.

    Args:
        prover: Prover (honest or not) exposing evaluate_polynomial()
        claimed_sum: The claim to check
        num_vars: Defaults to prover.num_vars

    Returns:
        SoundnessReport with per-sequence outcomes
    """
    if num_vars is None:
        num_vars = prover.num_vars
    sequences = enumerate_challenge_sequences(num_vars)
    verifier = Verifier(num_vars)

    outcomes = np.zeros(len(sequences), dtype=bool)
    rejection_rounds: Dict[int, int] = {}
    accepting: List[Tuple[int, ...]] = []

    for row, challenges in enumerate(sequences):
        bits = [int(b) for b in challenges]
        result = verifier.run(claimed_sum, prover, FixedChallenges(bits))
        outcomes[row] = result.verified
        if result.verified:
            accepting.append(tuple(bits))
        else:
            rejection_rounds[result.rejected_round] = (
                rejection_rounds.get(result.rejected_round, 0) + 1
            )

    return SoundnessReport(
        num_vars=num_vars,
        claimed_sum=claimed_sum,
        outcomes=outcomes,
        rejection_rounds=rejection_rounds,
        accepting_sequences=accepting,
    )
