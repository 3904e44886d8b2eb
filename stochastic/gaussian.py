import math
import random

DEFAULT_BOUND = 4.5


class BoundedGaussian:
    """Standard normal samples clamped to [-bound, bound].

    Uses the Marsaglia polar method: each accepted (v1, v2) pair yields two
    independent samples, the second of which is cached for the next call.
    The cache belongs to this instance only. Deterministic given rng.
    """

    def __init__(self, rng: random.Random | None = None, bound: float = DEFAULT_BOUND):
        if bound <= 0:
            raise ValueError("bound must be positive")
        self.rng = rng or random.Random()
        self.bound = float(bound)
        self._cached: float | None = None

    def next(self) -> float:
        if self._cached is not None:
            cached, self._cached = self._cached, None
            return cached

        while True:
            v1 = 2.0 * self.rng.random() - 1.0
            v2 = 2.0 * self.rng.random() - 1.0
            s = v1 * v1 + v2 * v2
            if 0.0 < s < 1.0:
                break

        multiplier = math.sqrt(-2.0 * math.log(s) / s)
        self._cached = self._clamp(v2 * multiplier)
        return self._clamp(v1 * multiplier)

    def _clamp(self, value: float) -> float:
        return min(self.bound, max(-self.bound, value))

    def reset(self) -> None:
        """Drop the cached second sample."""
        self._cached = None
