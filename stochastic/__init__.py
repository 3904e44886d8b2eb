"""Random draws used to fill puzzle nodes with dollar amounts."""

from .gaussian import DEFAULT_BOUND, BoundedGaussian
from .partition import RandomPartitioner, find_random_set, is_feasible

__all__ = [
    "DEFAULT_BOUND",
    "BoundedGaussian",
    "RandomPartitioner",
    "find_random_set",
    "is_feasible",
]
