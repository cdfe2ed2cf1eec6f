# simulations/run.py

from __future__ import annotations

from typing import List, Optional

from .common import HIGH, LOW, TRIALS, EvaluationResult, TrialSpec
from .methods import STRATEGIES, evaluate_strategy, get_strategy


def run_strategy(
    name: str,
    trials: int = TRIALS,
    seed: Optional[int] = None,
    low: int = LOW,
    high: int = HIGH,
) -> EvaluationResult:
    """
    Evaluate a single registered strategy and return an EvaluationResult.

    Parameters
    ----------
    name:
        Display name or short key (e.g., 'always_lower', 'uniform_comparison').
    trials:
        Number of independent trials.
    seed:
        RNG seed. None means a fresh, unseeded generator.
    low, high:
        Closed range both numbers of a trial are drawn from.

    Returns
    -------
    EvaluationResult
    """
    spec = TrialSpec(trials=trials, low=low, high=high)
    display, factory = get_strategy(name)
    return evaluate_strategy(factory(), spec, seed=seed, name=display)


def run_all(
    trials: int = TRIALS,
    seed: Optional[int] = None,
) -> List[EvaluationResult]:
    """
    Convenience helper: evaluate every registered strategy, in registry order,
    under the same spec and seed.
    """
    spec = TrialSpec(trials=trials)
    results = []
    for display, factory in STRATEGIES:
        results.append(evaluate_strategy(factory(), spec, seed=seed, name=display))
    return results
