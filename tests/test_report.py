"""End-to-end tests for running and reporting strategies."""

import io
import re

import pytest

import simulations.report as report_module
from simulations.common import format_announcement
from simulations.report import main, report
from simulations.run import run_all, run_strategy
from src.higher_lower.sampler import InvalidDistributionError
from src.higher_lower.strategies import AlwaysLowerStrategy, NormalComparisonStrategy

RESULT_LINE = re.compile(r"^  Probability of correct guess: (\d+\.\d{2})%$")


def _bad_normal():
    return NormalComparisonStrategy(mean=0.0, stddev=-1.0)


def test_run_strategy_by_key():
    result = run_strategy("uniform_comparison", trials=1_000, seed=5)
    assert result.strategy == "Comparison with a uniform random draw"
    assert result.trials == 1_000


def test_run_strategy_custom_range():
    result = run_strategy("always_lower", trials=100, seed=5, low=0, high=0)
    assert result.success_ratio == 1.0


def test_run_all_in_registry_order():
    results = run_all(trials=500, seed=5)
    assert [r.strategy for r in results] == [name for name, _ in report_module.STRATEGIES]


def test_report_prints_two_lines_per_strategy():
    out = io.StringIO()
    results = report(out=out, trials=100_000, seed=99)
    lines = out.getvalue().splitlines()

    assert len(results) == 4
    assert len(lines) == 8
    for (name, _), announce, result_line in zip(
        report_module.STRATEGIES, lines[0::2], lines[1::2]
    ):
        assert announce == format_announcement(name, 100_000)
        assert RESULT_LINE.match(result_line)

    percents = [float(RESULT_LINE.match(l).group(1)) for l in lines[1::2]]
    assert all(0.0 <= p <= 100.0 for p in percents)
    assert percents[0] == pytest.approx(50.0, abs=2.0)
    assert percents[1] == pytest.approx(50.0, abs=2.0)
    assert percents[2] == pytest.approx(66.67, abs=2.0)


def test_report_announcement_format():
    assert (
        format_announcement("Always guess the same outcome", 1_000_000)
        == "Evaluating strategy: Always guess the same outcome (1000000 trials)"
    )


def test_report_stops_before_failing_strategy(monkeypatch):
    monkeypatch.setattr(
        report_module,
        "STRATEGIES",
        (("Always lower", AlwaysLowerStrategy), ("Broken normal", _bad_normal)),
    )
    out = io.StringIO()
    with pytest.raises(InvalidDistributionError):
        report(out=out, trials=10, seed=1)

    lines = out.getvalue().splitlines()
    assert len(lines) == 2
    assert "Broken normal" not in out.getvalue()


def test_main_exits_non_zero_on_invalid_distribution(monkeypatch, capsys):
    monkeypatch.setattr(report_module, "STRATEGIES", (("Broken normal", _bad_normal),))
    assert main([]) == 1
    assert capsys.readouterr().out == ""


def test_main_exits_zero(monkeypatch, capsys):
    monkeypatch.setattr(
        report_module, "STRATEGIES", (("Always lower", AlwaysLowerStrategy),)
    )
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Evaluating strategy: Always lower (1000000 trials)"
    assert RESULT_LINE.match(out[1])
