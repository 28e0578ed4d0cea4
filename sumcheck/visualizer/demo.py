"""
SumCheck Visualizer Demo

This script walks through the SumCheck protocol with several examples,
from a 2-variable function you can check by hand to the 5-variable demo
polynomial.

Run with:
    python -m sumcheck.visualizer.demo
"""

from sumcheck.common.hypercube import iter_assignments
from sumcheck.common.polynomial import create_example_polynomial, create_linear_sum
from sumcheck.common.randomness import FixedChallenges
from sumcheck.protocol.config import create_demo_config
from sumcheck.protocol.prover import Prover
from sumcheck.protocol.session import run_sumcheck
from sumcheck.protocol.verifier import Verifier, interpolate
from sumcheck.visualizer.core import (
    ConsoleReporter,
    format_transcript,
    print_header,
)


def demo_tiny_example():
    """
    Minimal example: f(x0, x1) = x0 + x1.

    Small enough to verify every number by hand.
    """
    print_header("DEMO 1: TINY EXAMPLE (2 variables)")
    poly = create_linear_sum(2)
    print(f"\n{poly}")

    print("\nManual sum calculation:")
    total = 0
    for assignment in iter_assignments(2):
        value = poly(assignment)
        total += value
        print(f"  f{assignment} = {value}")
    print(f"  Sum = {total}")

    prover = Prover(poly, 2)
    verifier = Verifier(2, FixedChallenges([1, 0]), ConsoleReporter())
    result = verifier.run(prover.calculate_sum(), prover)
    print()
    print(format_transcript(result))
    return result


def demo_false_claim():
    """
    Same function, but the Prover claims 5 instead of 4.

    The very first check compares the claim with f(0) + f(1), which only
    depends on the true sum, so the lie is caught in round 0.
    """
    print_header("DEMO 2: FALSE CLAIM")
    prover = Prover(create_linear_sum(2), 2)
    print(f"\nTrue sum: {prover.calculate_sum()}, claimed: 5")

    verifier = Verifier(2, FixedChallenges([0, 0]), ConsoleReporter())
    result = verifier.run(5, prover)
    print()
    print(result.summary())
    return result


def demo_example_polynomial():
    """The 5-variable demo polynomial with seeded random challenges."""
    print_header("DEMO 3: FIVE VARIABLES")
    poly = create_example_polynomial()
    print(f"\n{poly.summary()}")
    print()

    result = run_sumcheck(poly, create_demo_config(verbose=True))
    print()
    print(format_transcript(result))
    return result


def demo_step_by_step():
    """
    Drive the rounds by hand instead of calling Verifier.run().

    Shows exactly what the Verifier tracks between rounds: the challenges
    fixed so far and the running sum.
    """
    print_header("DEMO 4: STEP-BY-STEP WALKTHROUGH")
    poly = create_example_polynomial()
    prover = Prover(poly, poly.num_vars)
    challenges = [1, 0, 1, 1, 0]

    running_sum = prover.calculate_sum()
    fixed_inputs = []
    print(f"\nClaimed sum: {running_sum}")

    for i, r in enumerate(challenges):
        print("\n" + "-" * 50)
        print(f"ROUND {i}  (fixed so far: {fixed_inputs})")
        print("-" * 50)
        f0, f1 = prover.evaluate_polynomial(fixed_inputs, i)
        print(f"  Prover sends f(0) = {f0}, f(1) = {f1}")
        print(f"  Check: {f0} + {f1} = {f0 + f1} (should be {running_sum})")
        if f0 + f1 != running_sum:
            print("  ✗ Mismatch, rejecting")
            return False
        running_sum = interpolate(f0, f1, r)
        fixed_inputs.append(r)
        print(f"  Challenge r_{i} = {r} → new running sum f({r}) = {running_sum}")

    print(f"\nAll rounds passed. Final point: {tuple(fixed_inputs)}")
    print(f"f{tuple(fixed_inputs)} = {poly(fixed_inputs)}, last running sum = {running_sum}")
    return True


def demo_challenge_sweep():
    """Run the tiny example under every possible challenge sequence."""
    print_header("DEMO 5: EVERY CHALLENGE SEQUENCE")
    prover = Prover(create_linear_sum(2), 2)
    claimed = prover.calculate_sum()
    verifier = Verifier(2)

    outcomes = []
    for challenges in iter_assignments(2):
        accepted = verifier.verify(claimed, prover, FixedChallenges(challenges))
        outcomes.append(accepted)
        print(f"  challenges={list(challenges)} → {'ACCEPT' if accepted else 'REJECT'}")

    print(f"\nAccepted {sum(outcomes)}/{len(outcomes)} runs for the true sum {claimed}")
    return outcomes


DEMOS = [
    ("Tiny Example", demo_tiny_example),
    ("False Claim", demo_false_claim),
    ("Five Variables", demo_example_polynomial),
    ("Step by Step", demo_step_by_step),
    ("Challenge Sweep", demo_challenge_sweep),
]


def main(interactive: bool = True):
    """Run all demos."""
    print("╔" + "═" * 68 + "╗")
    print("║" + " " * 15 + "SUMCHECK VISUALIZER DEMONSTRATION" + " " * 20 + "║")
    print("╚" + "═" * 68 + "╝")

    print("\nA Prover claims Σ f(x) over {0,1}^n. The Verifier checks the claim")
    print("in n rounds, fixing one variable per round with a random bit.")
    print("\n" + "─" * 70)

    for name, demo_func in DEMOS:
        demo_func()
        print("\n" + "─" * 70)
        if interactive:
            input(f"Finished '{name}'. Press Enter to continue...")

    print_header("DEMOS COMPLETE")
    print("\nKey takeaways:")
    print("  1. The Verifier does O(1) work per round, n rounds in total")
    print("  2. Each round the Prover sends f(0) and f(1)")
    print("  3. The Verifier checks f(0) + f(1) against the running sum")
    print("  4. A wrong total is caught in round 0")
    print("  5. Bit challenges make the next claim f(0) or f(1) exactly")


if __name__ == "__main__":
    main()
