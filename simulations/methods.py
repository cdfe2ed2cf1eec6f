# simulations/methods.py

from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

from .common import (
    NORMAL_MEAN,
    NORMAL_STDDEV,
    EvaluationResult,
    Outcome,
    Timer,
    TrialSpec,
)

from src.higher_lower.sampler import Sampler
from src.higher_lower.strategies import (
    AlwaysLowerStrategy,
    Decision,
    NormalComparisonStrategy,
    RandomGuessStrategy,
    Strategy,
    UniformComparisonStrategy,
)

logger = logging.getLogger(__name__)


StrategyFactory = Callable[[], Strategy]


def evaluate_guess(first: int, second: int, decision: Decision) -> Outcome:
    """
    Score one decision against the actual pair.

    The checks overlap on equality: a tie satisfies both "lower" (<=) and
    "higher" (>=), so it is scored correct whatever was predicted.
    """
    is_lower = second <= first
    is_higher = second >= first

    if decision is Decision.SECOND_IS_LOWER and is_lower:
        return Outcome.CORRECT
    if decision is Decision.SECOND_IS_HIGHER and is_higher:
        return Outcome.CORRECT
    return Outcome.INCORRECT


def evaluate_strategy(
    strategy: Strategy,
    spec: TrialSpec,
    seed: Optional[int] = None,
    name: Optional[str] = None,
) -> EvaluationResult:
    """
    Run spec.trials independent trials of a strategy.

    Each trial draws two fresh numbers uniformly from [spec.low, spec.high],
    asks the strategy for a decision on the first, and scores it. All draws
    (including the strategy's own) come from one Sampler seeded with `seed`.
    """
    sampler = Sampler(seed)
    label = name or strategy.key or type(strategy).__name__
    correct = 0

    logger.debug("Evaluating %s over %d trials", label, spec.trials)

    with Timer() as t:
        for _ in range(spec.trials):
            first = sampler.uniform_in_range(spec.low, spec.high)
            second = sampler.uniform_in_range(spec.low, spec.high)
            decision = strategy.decide(first, sampler)
            if evaluate_guess(first, second, decision) is Outcome.CORRECT:
                correct += 1

    result = EvaluationResult(
        strategy=label,
        spec=spec,
        correct=correct,
        runtime_s=t.elapsed_s,
        meta={"key": strategy.key, "seed": seed},
    )
    logger.info(
        "%s: %d/%d correct in %.3fs", label, correct, spec.trials, t.elapsed_s
    )
    return result


# --- Registry / dispatch -----------------------------------------------------

def _normal_comparison() -> Strategy:
    return NormalComparisonStrategy(mean=NORMAL_MEAN, stddev=NORMAL_STDDEV)


# STRATEGIES is the ordered (display name, factory) registry used for reporting.
# Factories are called once per evaluation, so a strategy with bad parameters
# fails before any of its trials run.
STRATEGIES: Tuple[Tuple[str, StrategyFactory], ...] = (
    ("Always guess the same outcome", AlwaysLowerStrategy),
    ("Always guess a random outcome", RandomGuessStrategy),
    ("Comparison with a uniform random draw", UniformComparisonStrategy),
    ("Comparison with a normal random draw", _normal_comparison),
)

# Short keys for lookups from code and tests.
KEYS = {
    "always_lower": "Always guess the same outcome",
    "random_guess": "Always guess a random outcome",
    "uniform_comparison": "Comparison with a uniform random draw",
    "normal_comparison": "Comparison with a normal random draw",
}


def get_strategy(name: str) -> Tuple[str, StrategyFactory]:
    """
    Look up a registered strategy by display name or short key.
    Returns (display name, factory).
    """
    wanted = KEYS.get(name.strip().lower(), name.strip())
    for display, factory in STRATEGIES:
        if display == wanted:
            return display, factory
    raise ValueError(
        f"unknown strategy '{name}'. Available: {sorted(KEYS.keys())}"
    )
