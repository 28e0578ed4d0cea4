"""
SumCheck Round Visualizer

Observation tools for SumCheck runs: reporters that watch each round,
and table rendering for finished transcripts.

Key Components:
    - RoundReporter: Base class for round observers
    - ConsoleReporter: Prints every round as it happens
    - RecordingReporter: Keeps rounds and result for inspection
    - format_transcript: Tabulates a finished VerificationResult

Usage:
    >>> from sumcheck.protocol import Prover, Verifier
    >>> from sumcheck.visualizer import ConsoleReporter, format_transcript
    >>>
    >>> prover = Prover(lambda x: x[0] + x[1], num_vars=2)
    >>> verifier = Verifier(2, reporter=ConsoleReporter())
    >>> result = verifier.run(prover.calculate_sum(), prover)
    >>> print(format_transcript(result))
"""

from .core import (
    RoundReporter,
    ConsoleReporter,
    RecordingReporter,
    format_transcript,
    print_header,
    print_result,
)

__all__ = [
    "RoundReporter",
    "ConsoleReporter",
    "RecordingReporter",
    "format_transcript",
    "print_header",
    "print_result",
]
