"""
SumCheck Round Reporting.

Reporters observe a verification run round by round. They are handed each
RoundData after the Verifier has already decided the round's outcome, so
nothing a reporter does can change the verdict.

    Verifier.run()
        ├── round 0 → reporter.report(RoundData)
        ├── round 1 → reporter.report(RoundData)
        ├── ...
        └── done    → reporter.finish(VerificationResult)

Two reporters ship with the toolkit:
    - ConsoleReporter: prints every round as it happens
    - RecordingReporter: keeps everything for later inspection

format_transcript() turns a finished result into a table.
"""

from __future__ import annotations
from typing import List, Optional, TYPE_CHECKING

from tabulate import tabulate

if TYPE_CHECKING:
    from ..protocol.verifier import RoundData, VerificationResult


class RoundReporter:
    """Base reporter: ignores everything. Subclass and override."""

    def report(self, round_data: 'RoundData'):
        pass

    def finish(self, result: 'VerificationResult'):
        pass


class ConsoleReporter(RoundReporter):
    """
    Prints each round to stdout.

    Example output:
        ✓ Round 0: f(0)=4, f(1)=40, r=1 → f(r)=40
        ✗ Round 0: mismatch. Expected total 45 != f(0) + f(1) = 4 + 40 = 44
    """

    def __init__(self, verbose: bool = True):
        self.verbose = verbose

    def report(self, round_data: 'RoundData'):
        if not self.verbose:
            return
        rd = round_data
        if rd.passed:
            print(f"✓ Round {rd.round_index}: f(0)={rd.f0}, f(1)={rd.f1}, "
                  f"r={rd.challenge} → f(r)={rd.next_sum}")
        else:
            print(f"✗ Round {rd.round_index}: mismatch. Expected total "
                  f"{rd.expected_sum} != f(0) + f(1) = {rd.f0} + {rd.f1} = {rd.round_sum}")

    def finish(self, result: 'VerificationResult'):
        if result.verified:
            print("✓ Verifier: SumCheck passed!")
        else:
            print("✗ Verifier: SumCheck failed!")


class RecordingReporter(RoundReporter):
    """
    Stores every round and the final result.

    Attributes:
        rounds: RoundData objects in the order they were reported
        result: The finished VerificationResult (None until finish())
    """

    def __init__(self):
        self.rounds: List['RoundData'] = []
        self.result: Optional['VerificationResult'] = None

    def report(self, round_data: 'RoundData'):
        self.rounds.append(round_data)

    def finish(self, result: 'VerificationResult'):
        self.result = result

    def reset(self):
        self.rounds = []
        self.result = None


TRANSCRIPT_HEADERS = ["Round", "Expected", "f(0)", "f(1)", "f(0)+f(1)", "r", "f(r)", "Check"]


def format_transcript(result: 'VerificationResult', tablefmt: str = "simple") -> str:
    """
    Render all executed rounds of a result as a table.

    Args:
        result: A finished verification run
        tablefmt: Any tabulate table format

    Returns:
        The table as a string
    """
    rows = []
    for rd in result.rounds:
        rows.append([
            rd.round_index,
            rd.expected_sum,
            rd.f0,
            rd.f1,
            rd.round_sum,
            "-" if rd.challenge is None else rd.challenge,
            "-" if rd.next_sum is None else rd.next_sum,
            "✓" if rd.passed else "✗",
        ])
    return tabulate(rows, headers=TRANSCRIPT_HEADERS, tablefmt=tablefmt)


def print_header(title: str, width: int = 70):
    """Print a boxed section header."""
    print("\n" + "═" * width)
    print(title.center(width).rstrip())
    print("═" * width)


def print_result(result: 'VerificationResult'):
    """Print the transcript table and verdict of a finished run."""
    print(format_transcript(result))
    print()
    print(result.summary())
