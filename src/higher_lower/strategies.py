from enum import Enum
from typing import Optional

from .sampler import I32_MAX, I32_MIN, NormalDistribution, Sampler


class Decision(Enum):
    """A strategy's prediction about the second number."""

    SECOND_IS_LOWER = "lower"
    SECOND_IS_HIGHER = "higher"


def decide_by_comparison(comparison: int, first: int) -> Decision:
    """
    Shared rule for the comparison strategies: predict higher when the
    auxiliary draw is at least the first number, lower otherwise.
    """
    if comparison >= first:
        return Decision.SECOND_IS_HIGHER
    return Decision.SECOND_IS_LOWER


class Strategy:
    """
    Strategy

    A decision rule mapping the first drawn number to a Decision. Strategies
    hold no state between calls; any auxiliary randomness is drawn from the
    sampler passed in.
    """

    key: str = ""

    def decide(self, first: int, sampler: Sampler) -> Decision:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class AlwaysLowerStrategy(Strategy):
    """
    Ignores the input and always predicts the second number is lower.
    """

    key = "always_lower"

    def decide(self, first: int, sampler: Sampler) -> Decision:
        return Decision.SECOND_IS_LOWER


class RandomGuessStrategy(Strategy):
    """
    Ignores the input and flips a fair coin.

    Both numbers come from the same uniform distribution, so this does no
    better than always guessing the same way: each decision is right about
    half of the time.
    """

    key = "random_guess"

    def decide(self, first: int, sampler: Sampler) -> Decision:
        if sampler.coin(0.5):
            return Decision.SECOND_IS_HIGHER
        return Decision.SECOND_IS_LOWER


class UniformComparisonStrategy(Strategy):
    """
    Draws its own number uniformly and compares it to the input.

    With three independent draws (first, second, comparison) from the same
    distribution there are 6 equally likely orderings:

        first  second  draw   decision   correct
        75     25      100    higher     no
        75     25      50     lower      yes
        75     25      0      lower      yes
        25     75      100    higher     yes
        25     75      50     higher     yes
        25     75      0      lower      no

    so 4 of 6 (about 66.67%) guesses are correct. The draw lands between the
    two numbers a third of the time, and then the guess is always right.
    """

    key = "uniform_comparison"

    def __init__(self, low: int = I32_MIN, high: int = I32_MAX):
        if low > high:
            raise ValueError("low must be <= high")
        self.low = low
        self.high = high

    def decide(self, first: int, sampler: Sampler) -> Decision:
        comparison = sampler.uniform_in_range(self.low, self.high)
        return decide_by_comparison(comparison, first)

    def __repr__(self) -> str:
        return f"UniformComparisonStrategy(low={self.low}, high={self.high})"


class NormalComparisonStrategy(Strategy):
    """
    Like UniformComparisonStrategy, but the comparison value comes from a
    normal distribution (truncated toward zero).

    With a narrow distribution around 0 the draw almost never falls between
    two numbers spread over the whole 32-bit range, so this behaves like a
    fixed threshold at the median: "predict higher when first is negative".
    A median threshold is right about 75% of the time, which beats drawing
    the comparison from the same distribution as the numbers.
    """

    key = "normal_comparison"

    def __init__(
        self,
        mean: float = 0.0,
        stddev: float = 10.0,
        distribution: Optional[NormalDistribution] = None,
    ):
        # Fails here, before any trial runs, on bad parameters.
        self.distribution = distribution or NormalDistribution(mean, stddev)

    def decide(self, first: int, sampler: Sampler) -> Decision:
        comparison = self.distribution.sample_int(sampler)
        return decide_by_comparison(comparison, first)

    def __repr__(self) -> str:
        return f"NormalComparisonStrategy({self.distribution!r})"
