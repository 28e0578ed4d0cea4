"""
Protocol session: wires a Prover and a Verifier together for one run.

This is the orchestration step every demo repeats: build the Prover over
an oracle, let it compute its claim, build the Verifier from a config and
run verification.
"""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING

from ..common.oracle import Oracle
from .config import ProtocolConfig
from .prover import Prover
from .verifier import Verifier, VerificationResult

if TYPE_CHECKING:
    from ..visualizer.core import RoundReporter


def run_sumcheck(oracle: Oracle, config: ProtocolConfig,
                 reporter: Optional['RoundReporter'] = None,
                 claimed_sum: Optional[int] = None) -> VerificationResult:
    """
    Run one full SumCheck session.

    Args:
        oracle: Function to sum (Oracle or plain callable)
        config: Run configuration
        reporter: Optional round reporter; when None and config.verbose is
            set, a ConsoleReporter is used
        claimed_sum: Claim to check; defaults to the Prover's honest sum

    Returns:
        VerificationResult of the run
    """
    prover = Prover(oracle, config.num_vars)
    if claimed_sum is None:
        claimed_sum = prover.calculate_sum()

    if reporter is None and config.verbose:
        from ..visualizer.core import ConsoleReporter
        reporter = ConsoleReporter()
        print(f"The prover claims the total sum is: {claimed_sum}")

    verifier = Verifier(config.num_vars, config.challenge_source(), reporter)
    return verifier.run(claimed_sum, prover)
