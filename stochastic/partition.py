"""
Random sets of bounded integers with a fixed sum.

find_random_set(total, count, floor, ceiling) returns `count` integers, each
in [floor, ceiling], adding up to `total`, or None when no such set exists.

The set is built by halving: the count is split in two, a sum for the first
half is drawn from the range both halves can still honour, and each half is
solved recursively. The draw is weighted towards the middle of that range
(a clamped Gaussian mapped onto it), so balanced splits are far more likely
than extreme ones. Recursion depth is O(log count).
"""

from __future__ import annotations

import logging
import math
import random
from typing import List, Optional

from .gaussian import DEFAULT_BOUND, BoundedGaussian

logger = logging.getLogger(__name__)


def is_feasible(total: int, count: int, floor: int, ceiling: int) -> bool:
    """True if some set of `count` ints in [floor, ceiling] sums to total."""
    if count < 1 or floor > ceiling:
        return False
    return count * floor <= total <= count * ceiling


class RandomPartitioner:
    """
    Owns the Gaussian generator used for the weighted draws.

    One instance per caller; sharing an instance across threads needs
    external locking because the generator caches samples.
    """

    def __init__(self, rng: random.Random | None = None, bound: float = DEFAULT_BOUND):
        self.gaussian = BoundedGaussian(rng, bound)

    def find_random_set(
        self, total: int, count: int, floor: int, ceiling: int
    ) -> Optional[List[int]]:
        if not is_feasible(total, count, floor, ceiling):
            logger.debug(
                "No set of %d ints in [%d, %d] sums to %d", count, floor, ceiling, total
            )
            return None

        values = self._split(total, count, floor, ceiling, depth=0)
        logger.debug("Random set %s (sum %d)", values, sum(values))
        return values

    def _split(self, total: int, count: int, floor: int, ceiling: int, depth: int) -> List[int]:
        indent = "  " * depth
        if count == 1:
            logger.debug("%sbase case: %d", indent, total)
            return [total]

        second_count = count // 2
        first_count = count - second_count  # first half takes the odd one

        second_floor = floor * second_count
        second_ceiling = ceiling * second_count
        first_floor = max(floor * first_count, total - second_ceiling)
        first_ceiling = min(ceiling * first_count, total - second_floor)

        first_total = self.weighted_random(first_floor, first_ceiling)
        second_total = total - first_total
        logger.debug(
            "%ssum=%d n=%d -> [%d..%d] picked %d + %d",
            indent, total, count, first_floor, first_ceiling, first_total, second_total,
        )

        first = self._split(first_total, first_count, floor, ceiling, depth + 1)
        second = self._split(second_total, second_count, floor, ceiling, depth + 1)
        return first + second

    def weighted_random(self, low: int, high: int) -> int:
        """
        Integer in [low, high], weighted towards the centre of the range.
        """
        bound = self.gaussian.bound
        r = self.gaussian.next() / (bound * 2.0) + 0.5  # [0, 1]
        if r >= 1.0:
            r = math.nextafter(1.0, 0.0)

        span = high - low + 1
        return min(high, low + int(r * span))


def find_random_set(
    total: int,
    count: int,
    floor: int,
    ceiling: int,
    rng: random.Random | None = None,
) -> Optional[List[int]]:
    """
    One-shot helper around RandomPartitioner. Deterministic given rng.
    """
    return RandomPartitioner(rng).find_random_set(total, count, floor, ceiling)
