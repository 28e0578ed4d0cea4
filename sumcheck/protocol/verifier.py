"""
SumCheck Verifier.

The Verifier knows only n and a source of challenge bits. It never sees the
oracle. Starting from the claimed sum C it runs n rounds:

    Round i:
        1. Ask the Prover for (f0, f1) = (s_i(0), s_i(1))
        2. Check  f0 + f1 == running_sum        (else REJECT, stop)
        3. Sample a challenge r_i ∈ {0, 1}
        4. running_sum = f0 * (1 - r_i) + f1 * r_i
        5. Fix variable i to r_i and continue

    All n rounds pass → ACCEPT.

Challenges are bits rather than field elements, so s_i(r_i) is just the
linear interpolation between the two points the Prover sent. This is the
weaker two-point variant of the protocol, kept on purpose: a lie planted in
round i survives whenever the next challenge picks the side that carries it.

The round transcript (fixed inputs and running sum) lives in local
variables of run(); a Verifier instance holds no per-run state, so one
instance can drive any number of independent runs.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, TYPE_CHECKING

from ..common.errors import ChallengeError, PreconditionError
from ..common.randomness import ChallengeSource, RandomBitSource

if TYPE_CHECKING:
    from .prover import Prover
    from ..visualizer.core import RoundReporter


@dataclass
class RoundData:
    """
    Everything observed in one round.

    Attributes:
        round_index: Round number (0-indexed, equals the variable index)
        expected_sum: running_sum at the start of the round
        f0: Prover's value with the round variable set to 0
        f1: Prover's value with the round variable set to 1
        challenge: Sampled challenge, None if the round rejected
        next_sum: f(challenge), None if the round rejected
        passed: Whether f0 + f1 matched expected_sum
    """
    round_index: int
    expected_sum: int
    f0: int
    f1: int
    challenge: Optional[int] = None
    next_sum: Optional[int] = None
    passed: bool = True

    @property
    def round_sum(self) -> int:
        return self.f0 + self.f1

    def __repr__(self) -> str:
        status = "pass" if self.passed else "fail"
        return (f"RoundData(round={self.round_index}, f0={self.f0}, f1={self.f1}, "
                f"r={self.challenge}, {status})")


@dataclass
class VerificationResult:
    """
    Complete outcome of one verification run.

    Attributes:
        claimed_sum: The sum the Prover claimed
        num_vars: Number of variables (= number of rounds on acceptance)
        challenges: Challenges sampled, in order
        rounds: Per-round data for every executed round
        verified: True iff every round passed
        rejected_round: Index of the failing round, None on acceptance
        final_sum: running_sum after the last round, None on rejection
    """
    claimed_sum: int
    num_vars: int
    challenges: List[int] = field(default_factory=list)
    rounds: List[RoundData] = field(default_factory=list)
    verified: bool = False
    rejected_round: Optional[int] = None
    final_sum: Optional[int] = None

    @property
    def num_rounds(self) -> int:
        """Rounds actually executed (fewer than num_vars on early rejection)."""
        return len(self.rounds)

    @property
    def mismatch(self) -> Optional[Tuple[int, int]]:
        """(expected, actual) totals of the rejecting round, or None."""
        if self.rejected_round is None:
            return None
        failed = self.rounds[self.rejected_round]
        return failed.expected_sum, failed.round_sum

    def __bool__(self) -> bool:
        return self.verified

    def summary(self) -> str:
        lines = [
            f"VerificationResult:",
            f"  Claimed sum: {self.claimed_sum}",
            f"  Rounds: {self.num_rounds}/{self.num_vars}",
            f"  Challenges: {self.challenges}",
        ]
        if self.verified:
            lines.append(f"  Final sum: {self.final_sum}")
            lines.append("  Verdict: ACCEPT")
        else:
            expected, actual = self.mismatch
            lines.append(f"  Rejected in round {self.rejected_round}: "
                         f"expected {expected}, got f(0) + f(1) = {actual}")
            lines.append("  Verdict: REJECT")
        return "\n".join(lines)


def interpolate(f0: int, f1: int, challenge: int) -> int:
    """
    Evaluate the line through (0, f0) and (1, f1) at the challenge.

    With challenge ∈ {0, 1} this selects f0 or f1.
    """
    return f0 * (1 - challenge) + f1 * challenge


class Verifier:
    """
    SumCheck verifier for boolean challenges.

    Example:
        >>> prover = Prover(lambda x: x[0] + x[1], num_vars=2)
        >>> verifier = Verifier(2, randomness=FixedChallenges([0, 1]))
        >>> verifier.verify(4, prover)
        True
    """

    def __init__(self, num_vars: int,
                 randomness: Optional[ChallengeSource] = None,
                 reporter: Optional['RoundReporter'] = None):
        """
        Args:
            num_vars: Number of variables n (at least 1)
            randomness: Challenge source (default: unseeded RandomBitSource)
            reporter: Optional sink notified of every round and the result
        """
        if not isinstance(num_vars, int) or isinstance(num_vars, bool) or num_vars < 1:
            raise PreconditionError(f"num_vars must be an integer >= 1, got {num_vars!r}")
        self.num_vars = num_vars
        self.randomness = randomness if randomness is not None else RandomBitSource()
        self.reporter = reporter

    def verify(self, claimed_sum: int, prover: 'Prover',
               randomness: Optional[ChallengeSource] = None) -> bool:
        """Run the protocol and return True iff every round passes."""
        return self.run(claimed_sum, prover, randomness).verified

    def run(self, claimed_sum: int, prover: 'Prover',
            randomness: Optional[ChallengeSource] = None) -> VerificationResult:
        """
        Run the protocol and return the full result.

        Args:
            claimed_sum: The Prover's claimed total
            prover: Anything with evaluate_polynomial(fixed_inputs, i)
            randomness: Challenge source for this run only (overrides the
                one given at construction)

        Raises:
            PreconditionError: If the Prover's num_vars differs from ours
            ChallengeError: If the challenge source yields a non-bit
        """
        prover_vars = getattr(prover, "num_vars", self.num_vars)
        if prover_vars != self.num_vars:
            raise PreconditionError(
                f"Prover has {prover_vars} variables, verifier expects {self.num_vars}"
            )
        source = randomness if randomness is not None else self.randomness

        result = VerificationResult(claimed_sum=claimed_sum, num_vars=self.num_vars)
        fixed_inputs: List[int] = []
        running_sum = claimed_sum

        for i in range(self.num_vars):
            f0, f1 = prover.evaluate_polynomial(fixed_inputs, i)
            round_data = RoundData(round_index=i, expected_sum=running_sum, f0=f0, f1=f1)

            if running_sum != f0 + f1:
                round_data.passed = False
                result.rounds.append(round_data)
                result.rejected_round = i
                self._report(round_data)
                break

            r = source.sample_bit()
            if r not in (0, 1):
                raise ChallengeError(f"Challenge for round {i} must be 0 or 1, got {r!r}")
            next_sum = interpolate(f0, f1, r)

            round_data.challenge = r
            round_data.next_sum = next_sum
            result.rounds.append(round_data)
            self._report(round_data)

            fixed_inputs.append(r)
            running_sum = next_sum
        else:
            result.verified = True
            result.final_sum = running_sum

        result.challenges = list(fixed_inputs)
        if self.reporter is not None:
            self.reporter.finish(result)
        return result

    def _report(self, round_data: RoundData):
        if self.reporter is not None:
            self.reporter.report(round_data)

    def __repr__(self) -> str:
        return f"Verifier(num_vars={self.num_vars}, randomness={self.randomness!r})"
