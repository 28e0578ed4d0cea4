"""
Analysis tests: cost.py, soundness.py
"""
import numpy as np
import pytest

from sumcheck.analysis import (
    DishonestProver,
    VERIFIER_OPS_PER_ROUND,
    analyze_soundness,
    cost_breakdown,
    cost_table,
    enumerate_challenge_sequences,
    estimate_costs,
    measure_costs,
)
from sumcheck.common.polynomial import EXAMPLE_POLYNOMIAL, create_linear_sum
from sumcheck.protocol import Prover


# =====================================================================
# Cost model
# =====================================================================

class TestEstimateCosts:
    def test_five_variables(self):
        metrics = estimate_costs(5)
        assert metrics.sum_calls == 32
        assert metrics.round_calls == [32, 16, 8, 4, 2]
        assert metrics.protocol_calls == 2 ** 6 - 2
        assert metrics.total_prover_calls == 32 + 62
        assert metrics.verifier_ops == 5 * VERIFIER_OPS_PER_ROUND
        assert not metrics.measured

    @pytest.mark.parametrize("num_vars", [1, 4, 10])
    def test_protocol_calls_closed_form(self, num_vars):
        assert estimate_costs(num_vars).protocol_calls == 2 ** (num_vars + 1) - 2

    def test_free_vars(self):
        assert [rc.free_vars for rc in estimate_costs(3).round_costs] == [2, 1, 0]

    def test_invalid(self):
        with pytest.raises(ValueError):
            estimate_costs(0)

    def test_verifier_advantage_grows(self):
        assert estimate_costs(20).verifier_advantage > estimate_costs(5).verifier_advantage

    def test_breakdown(self):
        shares = cost_breakdown(estimate_costs(5))
        assert shares["sum"] == pytest.approx(32 / 94)
        assert shares["sum"] + shares["rounds"] == pytest.approx(1.0)


class TestMeasureCosts:
    def test_measured_equals_estimate(self):
        measured = measure_costs(EXAMPLE_POLYNOMIAL, 5)
        estimated = estimate_costs(5)
        assert measured.measured
        assert measured.sum_calls == estimated.sum_calls
        assert measured.round_calls == estimated.round_calls

    def test_challenges_do_not_change_cost(self):
        a = measure_costs(EXAMPLE_POLYNOMIAL, 5, [1, 1, 1, 1, 1])
        b = measure_costs(EXAMPLE_POLYNOMIAL, 5, [0, 1, 0, 1, 0])
        assert a.round_calls == b.round_calls

    def test_summary_and_table(self):
        assert "Protocol calls: 62" in measure_costs(EXAMPLE_POLYNOMIAL, 5).summary()
        table = cost_table(4)
        assert "Verifier ops" in table
        assert len(table.splitlines()) == 2 + 4


# =====================================================================
# Soundness
# =====================================================================

class TestEnumerateChallenges:
    def test_shape_and_uniqueness(self):
        sequences = enumerate_challenge_sequences(4)
        assert sequences.shape == (16, 4)
        assert len({tuple(row) for row in sequences.tolist()}) == 16


class TestAnalyzeSoundness:
    def test_honest_true_sum(self, example_prover):
        report = analyze_soundness(example_prover, 44)
        assert report.num_sequences == 32
        assert report.accepted == 32
        assert report.acceptance_rate == 1.0
        assert report.rejection_rounds == {}

    def test_honest_wrong_sum(self, example_prover):
        report = analyze_soundness(example_prover, 47)
        assert report.accepted == 0
        assert report.rejection_rate == 1.0
        assert report.rejection_rounds == {0: 32}
        assert report.accepting_sequences == []

    def test_dishonest_prover_wins_half(self, example_prover):
        cheat = DishonestProver(example_prover, offset=3)
        claimed = cheat.calculate_sum()
        assert claimed == 47
        report = analyze_soundness(cheat, claimed)
        assert report.acceptance_rate == pytest.approx(0.5)
        assert report.rejection_rounds == {1: 16}
        assert all(seq[0] == 1 for seq in report.accepting_sequences)

    def test_dishonest_prover_single_variable(self):
        cheat = DishonestProver(Prover(create_linear_sum(1), 1), offset=-1)
        report = analyze_soundness(cheat, cheat.calculate_sum())
        assert report.acceptance_rate == 1.0

    def test_dishonest_round_zero_message(self, example_prover):
        cheat = DishonestProver(example_prover, offset=3)
        assert cheat.num_vars == 5
        assert cheat.evaluate_polynomial([], 0) == (7, 40)
        assert cheat.evaluate_polynomial([0], 1) == example_prover.evaluate_polynomial([0], 1)

    def test_outcomes_array(self, linear_prover):
        report = analyze_soundness(linear_prover, 4)
        assert report.outcomes.dtype == np.bool_
        assert report.outcomes.tolist() == [True] * 4
        assert "Accepted: 4 (100.0%)" in report.summary()
