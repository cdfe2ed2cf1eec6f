# simulations/compare.py

from __future__ import annotations

import argparse
import logging
import sys

import matplotlib.pyplot as plt

from .common import DEFAULT_SEED, TRIALS, format_stats_line
from .run import run_all


# Keep the tool intentionally opinionated:
# - trial count and seed are fixed (so the CLI stays empty)
# - reference lines mark the coin-flip and three-draw baselines
COIN_FLIP_PERCENT = 50.0
THREE_DRAW_PERCENT = 200.0 / 3.0


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Compare all guessing strategies via Monte Carlo (bar chart)."
    )
    parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)

    results = run_all(trials=TRIALS, seed=DEFAULT_SEED)

    for r in results:
        print(format_stats_line(r))

    names = [r.strategy for r in results]
    rates = [r.success_percent for r in results]

    plt.figure(figsize=(10, 5))
    bars = plt.bar(range(len(results)), rates)
    for bar, rate in zip(bars, rates):
        plt.text(
            bar.get_x() + bar.get_width() / 2,
            rate + 1,
            f"{rate:.2f}%",
            ha="center",
        )

    plt.axhline(COIN_FLIP_PERCENT, linestyle="--", color="gray", label="coin flip (50%)")
    plt.axhline(THREE_DRAW_PERCENT, linestyle=":", color="gray", label="three draws (66.67%)")

    plt.xticks(range(len(results)), names, rotation=15, ha="right")
    plt.ylabel("Correct guesses (%)")
    plt.ylim(0, 100)
    plt.legend(loc="lower right")
    plt.title(f"Higher or lower? (trials={TRIALS}, seed={DEFAULT_SEED})")
    plt.tight_layout()
    plt.show()

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
