# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional
import time

from src.higher_lower.sampler import I32_MAX, I32_MIN


# Fixed run parameters. There is no CLI or environment override.
TRIALS = 1_000_000
LOW = I32_MIN
HIGH = I32_MAX
NORMAL_MEAN = 0.0
NORMAL_STDDEV = 10.0

# Only the comparison plot is seeded; the report is not.
DEFAULT_SEED = 42


class Outcome(Enum):
    INCORRECT = "incorrect"
    CORRECT = "correct"


@dataclass(frozen=True)
class TrialSpec:
    """
    Parameters shared by every strategy evaluation in a run.
    Both numbers of a trial are drawn from the closed range [low, high].
    """
    trials: int = TRIALS
    low: int = LOW
    high: int = HIGH

    def __post_init__(self) -> None:
        if self.trials <= 0:
            raise ValueError("trials must be > 0")
        if self.low > self.high:
            raise ValueError("low must be <= high")


@dataclass
class EvaluationResult:
    """
    Common return type for a strategy evaluation.
    """
    strategy: str
    spec: TrialSpec
    correct: int

    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.correct < 0 or self.correct > self.spec.trials:
            raise ValueError(
                f"correct count out of range: {self.correct} of {self.spec.trials}"
            )

    @property
    def trials(self) -> int:
        return self.spec.trials

    @property
    def success_ratio(self) -> float:
        return self.correct / self.spec.trials

    @property
    def success_percent(self) -> float:
        return self.success_ratio * 100.0


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.perf_counter() - self._start


def format_announcement(name: str, trials: int) -> str:
    return f"Evaluating strategy: {name} ({trials} trials)"


def format_result_line(r: EvaluationResult) -> str:
    return f"  Probability of correct guess: {r.success_percent:.2f}%"


def format_stats_line(r: EvaluationResult) -> str:
    """
    Human-friendly one-liner for printing in compare tools.
    """
    return (
        f"{r.strategy}: correct={r.correct}/{r.trials}, rate={r.success_percent:.2f}%"
        + (f", runtime={r.runtime_s:.3f}s" if r.runtime_s is not None else "")
    )
