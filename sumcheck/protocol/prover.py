"""
SumCheck Prover.

The Prover owns the oracle f over {0,1}^n. It does two things:

    1. calculate_sum(): the full claim  C = Σ f(x)  for x ∈ {0,1}^n
       (2^n oracle calls; the Prover must know the true sum)

    2. evaluate_polynomial(r, i): the round-i message

            s_i(X) = Σ f(r_0, ..., r_{i-1}, X, x_{i+1}, ..., x_{n-1})

       summed over all boolean values of the free variables, returned as
       the pair (s_i(0), s_i(1)). Round i costs 2^(n-i) oracle calls.

The Prover recomputes every round from scratch; nothing is cached between
rounds and nothing about the Prover changes while it is being queried.
"""

from __future__ import annotations
from typing import List, Sequence, Tuple

from ..common.errors import PreconditionError
from ..common.hypercube import decode_index, write_suffix
from ..common.oracle import Oracle, as_oracle


class Prover:
    """
    Honest SumCheck prover over a boolean-input oracle.

    Example:
        >>> prover = Prover(lambda x: x[0] + x[1], num_vars=2)
        >>> prover.calculate_sum()
        4
        >>> prover.evaluate_polynomial([], 0)
        (1, 3)
    """

    def __init__(self, oracle: Oracle, num_vars: int):
        """
        Args:
            oracle: The function to sum (an Oracle or a plain callable)
            num_vars: Number of boolean variables n (at least 1)
        """
        if not isinstance(num_vars, int) or isinstance(num_vars, bool) or num_vars < 1:
            raise PreconditionError(f"num_vars must be an integer >= 1, got {num_vars!r}")
        self.oracle = as_oracle(oracle)
        self.num_vars = num_vars

    def calculate_sum(self) -> int:
        """Sum the oracle over all 2^n boolean assignments."""
        total = 0
        for index in range(1 << self.num_vars):
            total += self.oracle.evaluate(decode_index(index, self.num_vars))
        return total

    def evaluate_polynomial(self, fixed_inputs: Sequence[int],
                            var_index: int) -> Tuple[int, int]:
        """
        Compute the round message (f(0), f(1)) for variable `var_index`.

        Args:
            fixed_inputs: Challenges for variables 0 .. var_index-1
            var_index: The variable this round is about

        Returns:
            (f0, f1): the oracle summed over all completions of
            fixed_inputs + [0] and fixed_inputs + [1]

        Raises:
            PreconditionError: If var_index is out of range, the prefix
                length differs from var_index, or a prefix entry is not 0/1
        """
        self._check_round_inputs(fixed_inputs, var_index)

        remaining = self.num_vars - (var_index + 1)
        evaluations: List[int] = [0, 0]

        for val in (0, 1):
            # Placeholders past var_index are overwritten by the suffix sweep
            assignment = list(fixed_inputs) + [val] + [0] * remaining
            total = 0
            for index in range(1 << remaining):
                write_suffix(assignment, var_index + 1, index, remaining)
                total += self.oracle.evaluate(tuple(assignment))
            evaluations[val] = total

        return evaluations[0], evaluations[1]

    def _check_round_inputs(self, fixed_inputs: Sequence[int], var_index: int):
        if not 0 <= var_index < self.num_vars:
            raise PreconditionError(
                f"var_index {var_index} out of range for {self.num_vars} variables"
            )
        if len(fixed_inputs) != var_index:
            raise PreconditionError(
                f"Round {var_index} needs {var_index} fixed inputs, "
                f"got {len(fixed_inputs)}"
            )
        for position, value in enumerate(fixed_inputs):
            if value not in (0, 1):
                raise PreconditionError(
                    f"Fixed input {position} must be 0 or 1, got {value!r}"
                )

    def __repr__(self) -> str:
        return f"Prover({self.oracle.name}, num_vars={self.num_vars})"
