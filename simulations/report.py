# simulations/report.py

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .common import TRIALS, EvaluationResult, TrialSpec, format_announcement, format_result_line
from .methods import STRATEGIES, evaluate_strategy

from src.higher_lower.sampler import InvalidDistributionError

logger = logging.getLogger(__name__)


def report(
    out: Optional[TextIO] = None,
    trials: int = TRIALS,
    seed: Optional[int] = None,
) -> List[EvaluationResult]:
    """
    Evaluate every registered strategy in order and print two lines each:
    an announcement and the success percentage.

    Output goes to `out`, or the current sys.stdout when None.

    A strategy is built before it is announced, so one that cannot be
    constructed raises without printing anything for itself.
    """
    spec = TrialSpec(trials=trials)
    results = []
    for name, factory in STRATEGIES:
        strategy = factory()
        print(format_announcement(name, spec.trials), file=out)
        result = evaluate_strategy(strategy, spec, seed=seed, name=name)
        print(format_result_line(result), file=out)
        results.append(result)
    return results


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description=(
            f"Estimate how often each guessing strategy predicts higher/lower "
            f"correctly ({TRIALS} trials per strategy)."
        )
    )
    parser.parse_args(argv)

    # Logs go to stderr; stdout carries only the report.
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        report()
    except InvalidDistributionError as exc:
        logger.error("Invalid distribution parameters: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
