"""
SumCheck Toolkit - Main Entry Point

This script provides a menu over the toolkit's demos:
    1. Protocol run - the 5-variable demo polynomial, round by round
    2. False claim - watch the Verifier reject
    3. Challenge sweep - every challenge sequence for a small example
    4. Cost and soundness analysis

Run with:
    python -m sumcheck.main
"""

from sumcheck.common.polynomial import EXAMPLE_POLYNOMIAL


def print_banner():
    """Print the toolkit banner."""
    print()
    print("╔" + "═" * 68 + "╗")
    print("║" + " " * 68 + "║")
    print("║" + " " * 24 + "SUMCHECK TOOLKIT" + " " * 28 + "║")
    print("║" + " " * 68 + "║")
    print("║" + " " * 11 + "Prover and Verifier over the boolean hypercube" + " " * 11 + "║")
    print("║" + " " * 68 + "║")
    print("╚" + "═" * 68 + "╝")
    print()


def print_menu():
    """Print the main menu."""
    print(f"Demo polynomial: {EXAMPLE_POLYNOMIAL}")
    print()
    print("  [1] Protocol run")
    print("      Prover computes the sum, Verifier checks it round by round")
    print()
    print("  [2] False claim")
    print("      Prover claims the wrong sum → rejected in round 0")
    print()
    print("  [3] Challenge sweep")
    print("      Verify under every possible challenge sequence")
    print()
    print("  [4] Cost and soundness analysis")
    print("      Oracle calls per round, and how often a cheater wins")
    print()
    print("  [q] Quit")
    print()


def run_protocol(seed: int = 42):
    """Run the demo polynomial with seeded challenges."""
    print("\n" + "=" * 70)
    print("RUNNING SUMCHECK")
    print("=" * 70)

    from sumcheck.protocol.config import ProtocolConfig
    from sumcheck.protocol.session import run_sumcheck
    from sumcheck.visualizer.core import print_result

    config = ProtocolConfig(name="demo", num_vars=EXAMPLE_POLYNOMIAL.num_vars,
                            seed=seed, verbose=True)
    result = run_sumcheck(EXAMPLE_POLYNOMIAL, config)
    print()
    print_result(result)
    return result


def run_false_claim(offset: int = 1):
    """Claim the true sum plus `offset` and show the rejection."""
    print("\n" + "=" * 70)
    print("RUNNING FALSE CLAIM")
    print("=" * 70)

    from sumcheck.protocol.config import ProtocolConfig
    from sumcheck.protocol.prover import Prover
    from sumcheck.protocol.session import run_sumcheck

    true_sum = Prover(EXAMPLE_POLYNOMIAL, EXAMPLE_POLYNOMIAL.num_vars).calculate_sum()
    claimed = true_sum + offset
    print(f"\nTrue sum: {true_sum}, claimed: {claimed}")

    config = ProtocolConfig(name="false-claim", num_vars=EXAMPLE_POLYNOMIAL.num_vars,
                            seed=7, verbose=True)
    result = run_sumcheck(EXAMPLE_POLYNOMIAL, config, claimed_sum=claimed)
    print()
    print(result.summary())
    return result


def run_sweep():
    """Verify the true sum under all 2^n challenge sequences."""
    print("\n" + "=" * 70)
    print("RUNNING CHALLENGE SWEEP")
    print("=" * 70)

    from sumcheck.analysis.soundness import analyze_soundness
    from sumcheck.protocol.prover import Prover

    prover = Prover(EXAMPLE_POLYNOMIAL, EXAMPLE_POLYNOMIAL.num_vars)
    report = analyze_soundness(prover, prover.calculate_sum())
    print()
    print(report.summary())
    return report


def run_analysis(max_vars: int = 8, offset: int = 3):
    """Print the cost table and the soundness numbers for a cheater."""
    print("\n" + "=" * 70)
    print("RUNNING ANALYSIS")
    print("=" * 70)

    from sumcheck.analysis.cost import cost_table, measure_costs
    from sumcheck.analysis.soundness import DishonestProver, analyze_soundness
    from sumcheck.protocol.prover import Prover

    print("\n--- Oracle calls (estimated) ---")
    print(cost_table(max_vars))

    print("\n--- Oracle calls (measured on the demo polynomial) ---")
    measured = measure_costs(EXAMPLE_POLYNOMIAL, EXAMPLE_POLYNOMIAL.num_vars)
    print(measured.summary())

    print(f"\n--- Dishonest prover (claim off by {offset}) ---")
    honest = Prover(EXAMPLE_POLYNOMIAL, EXAMPLE_POLYNOMIAL.num_vars)
    cheat = DishonestProver(honest, offset)
    report = analyze_soundness(cheat, cheat.calculate_sum())
    print(report.summary())

    print("\nKey insight: bit challenges let a one-round lie survive half the time.")
    return measured, report


def main():
    """Main entry point."""
    print_banner()

    while True:
        print_menu()

        choice = input("Enter your choice: ").strip().lower()

        if choice == '1':
            run_protocol()
        elif choice == '2':
            run_false_claim()
        elif choice == '3':
            run_sweep()
        elif choice == '4':
            run_analysis()
        elif choice == 'q':
            print("\nGoodbye!")
            break
        else:
            print("\nInvalid choice. Please try again.")

        print()
        input("Press Enter to continue...")
        print("\n" * 2)


if __name__ == "__main__":
    main()
