"""
Visualizer and entry point tests: core.py, demo.py, main.py
"""
import pytest

from sumcheck import main as toolkit_main
from sumcheck.common.randomness import FixedChallenges
from sumcheck.protocol import Verifier
from sumcheck.visualizer import demo
from sumcheck.visualizer.core import (
    ConsoleReporter,
    RecordingReporter,
    RoundReporter,
    format_transcript,
    print_header,
)


class TestConsoleReporter:
    def test_passing_rounds(self, linear_prover, capsys):
        Verifier(2, FixedChallenges([1, 0]), ConsoleReporter()).run(4, linear_prover)
        out = capsys.readouterr().out
        assert "✓ Round 0: f(0)=1, f(1)=3, r=1 → f(r)=3" in out
        assert "✓ Round 1: f(0)=1, f(1)=2, r=0 → f(r)=1" in out
        assert "SumCheck passed" in out

    def test_mismatch_line(self, linear_prover, capsys):
        Verifier(2, reporter=ConsoleReporter()).run(5, linear_prover)
        out = capsys.readouterr().out
        assert "✗ Round 0: mismatch. Expected total 5 != f(0) + f(1) = 1 + 3 = 4" in out
        assert "SumCheck failed" in out

    def test_quiet_rounds(self, linear_prover, capsys):
        Verifier(2, FixedChallenges([0, 0]), ConsoleReporter(verbose=False)).run(4, linear_prover)
        out = capsys.readouterr().out
        assert "Round" not in out
        assert "SumCheck passed" in out

    def test_reporter_does_not_change_outcome(self, example_prover):
        challenges = [1, 0, 0, 1, 1]
        plain = Verifier(5, FixedChallenges(challenges)).run(44, example_prover)
        observed = Verifier(5, FixedChallenges(challenges), RoundReporter()).run(44, example_prover)
        assert plain == observed


class TestRecordingReporter:
    def test_reset(self, linear_prover):
        reporter = RecordingReporter()
        Verifier(2, FixedChallenges([0, 0]), reporter).run(4, linear_prover)
        assert len(reporter.rounds) == 2
        reporter.reset()
        assert reporter.rounds == []
        assert reporter.result is None


class TestFormatTranscript:
    def test_accepting_transcript(self, example_prover):
        result = Verifier(5, FixedChallenges([0] * 5)).run(44, example_prover)
        table = format_transcript(result)
        lines = table.splitlines()
        assert "f(0)+f(1)" in lines[0]
        assert len(lines) == 2 + 5
        assert "✗" not in table

    def test_rejecting_transcript(self, linear_prover):
        result = Verifier(2).run(9, linear_prover)
        table = format_transcript(result)
        assert len(table.splitlines()) == 3
        assert "✗" in table

    def test_print_header(self, capsys):
        print_header("TITLE", width=20)
        out = capsys.readouterr().out
        assert "═" * 20 in out
        assert "TITLE" in out


class TestDemos:
    def test_tiny_example(self, capsys):
        result = demo.demo_tiny_example()
        assert result.verified
        assert "Sum = 4" in capsys.readouterr().out

    def test_false_claim(self):
        result = demo.demo_false_claim()
        assert not result.verified
        assert result.rejected_round == 0

    def test_example_polynomial(self):
        assert demo.demo_example_polynomial().verified

    def test_step_by_step(self):
        assert demo.demo_step_by_step() is True

    def test_challenge_sweep(self):
        assert demo.demo_challenge_sweep() == [True] * 4

    def test_main_non_interactive(self, capsys):
        demo.main(interactive=False)
        assert "DEMOS COMPLETE" in capsys.readouterr().out


class TestMain:
    def test_run_protocol(self, capsys):
        result = toolkit_main.run_protocol()
        assert result.verified
        assert result.claimed_sum == 44
        assert "Verdict: ACCEPT" in capsys.readouterr().out

    def test_run_false_claim(self):
        result = toolkit_main.run_false_claim(offset=2)
        assert not result.verified
        assert result.mismatch == (46, 44)

    def test_run_sweep(self):
        assert toolkit_main.run_sweep().acceptance_rate == 1.0

    def test_run_analysis(self):
        measured, report = toolkit_main.run_analysis(max_vars=4)
        assert measured.protocol_calls == 62
        assert report.acceptance_rate == pytest.approx(0.5)

    def test_menu_quit(self, monkeypatch, capsys):
        answers = iter(["x", "", "q"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
        toolkit_main.main()
        out = capsys.readouterr().out
        assert "Invalid choice" in out
        assert "Goodbye!" in out
