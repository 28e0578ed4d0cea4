"""
Exceptions raised by the SumCheck toolkit.

A failed consistency check is NOT an exception: the Verifier reports it as
a rejected run. These classes cover misuse (wrong arities, mismatched
variable counts) and broken challenge sources.
"""


class SumCheckError(Exception):
    """Base class for toolkit errors."""


class PreconditionError(SumCheckError, ValueError):
    """
    A caller broke a protocol precondition.

    Examples: fixed_inputs length differs from var_index, a fixed input is
    not 0 or 1, or Prover and Verifier disagree on num_vars.
    """


class ChallengeError(SumCheckError, ValueError):
    """A challenge source produced a non-binary value or ran out of bits."""
