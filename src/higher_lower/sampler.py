import random
import math
from typing import Optional


# Bounds of a signed 32-bit integer. Trials draw from the full range.
I32_MIN = -(2 ** 31)
I32_MAX = 2 ** 31 - 1


class InvalidDistributionError(ValueError):
    """Raised when a distribution is constructed with unusable parameters."""


class Sampler:
    """
    Sampler

    The single source of randomness for a simulation run. Every draw made by
    the evaluator and by the strategies goes through one instance, so seeding
    the sampler makes a whole evaluation reproducible.

    When no seed is given the underlying generator is seeded from the OS and
    there is no reproducibility guarantee across runs.

    This code is:
      - single-threaded
      - not thread-safe
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def uniform_in_range(self, low: int, high: int) -> int:
        """
        Draw an integer uniformly from the closed interval [low, high].

        Python integers do not overflow, so the full signed 32-bit range
        (I32_MIN..I32_MAX) is handled without boundary bias.
        """
        if low > high:
            raise ValueError("low must be <= high")
        if low == high:
            return low
        return self._rng.randint(low, high)

    def coin(self, p: float = 0.5) -> bool:
        """
        Return True with probability p.
        """
        if p <= 0.0:
            return False
        if p >= 1.0:
            return True
        return self._rng.random() < p

    def normal(self, mean: float, stddev: float) -> float:
        return self._rng.gauss(mean, stddev)

    def normal_in_range(self, mean: float, stddev: float) -> int:
        """
        Draw from N(mean, stddev) and truncate toward zero.

        Raises InvalidDistributionError for a non-positive or non-finite
        stddev (or a non-finite mean); no value is drawn in that case.
        """
        return NormalDistribution(mean, stddev).sample_int(self)


class NormalDistribution:
    """
    A validated normal distribution producing integer samples.

    Construction is the only place the parameters are checked. Once built,
    sampling cannot fail.
    """

    def __init__(self, mean: float, stddev: float):
        if not math.isfinite(mean):
            raise InvalidDistributionError(f"mean must be finite, got {mean!r}")
        if not math.isfinite(stddev):
            raise InvalidDistributionError(f"stddev must be finite, got {stddev!r}")
        if stddev <= 0:
            raise InvalidDistributionError(f"stddev must be > 0, got {stddev!r}")

        self.mean = float(mean)
        self.stddev = float(stddev)

    def sample(self, sampler: Sampler) -> float:
        return sampler.normal(self.mean, self.stddev)

    def sample_int(self, sampler: Sampler) -> int:
        return truncate_to_i32(self.sample(sampler))

    def __repr__(self) -> str:
        return f"NormalDistribution(mean={self.mean}, stddev={self.stddev})"


def truncate_to_i32(value: float) -> int:
    """
    Convert a float to a 32-bit integer the way a numeric cast does:
    truncate toward zero, saturate at the bounds, NaN becomes 0.
    """
    if math.isnan(value):
        return 0
    if value >= I32_MAX:
        return I32_MAX
    if value <= I32_MIN:
        return I32_MIN
    return int(value)
