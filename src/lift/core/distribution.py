"""
Shaping functions for warm-up ramps.

Each function maps a position ``x`` in ``[0, delta_normalized]`` back onto
the same range. Linear keeps the spacing even; sin front-loads the jumps so
the last sets before the work set are close together:

    linear(x) = ceil(x)
    sin(x)    = D * sin(pi * x / D / 2)        D = delta_normalized
"""

from __future__ import annotations

import math
from typing import Callable

from .models import Distribution

DistributionFn = Callable[[float, float], float]


def distribution_linear(x: float, delta_normalized: float) -> float:
    """Even spacing, rounded up to a whole tick."""
    return float(math.ceil(x))


def distribution_sin(x: float, delta_normalized: float) -> float:
    """Quarter sine wave over the ramp: big steps first, small steps last."""
    if delta_normalized == 0:
        return 0.0
    return delta_normalized * math.sin(math.pi * x / delta_normalized / 2)


def get_distribution_fn(distribution: Distribution) -> DistributionFn:
    """
    Return the shaping function for a distribution variant.

    Args:
        distribution: Distribution.LINEAR or Distribution.SIN (or its name)

    Returns:
        Function of (x, delta_normalized)

    Raises:
        ValueError: If the distribution is unknown
    """
    distribution = Distribution.from_name(distribution)
    if distribution is Distribution.LINEAR:
        return distribution_linear
    elif distribution is Distribution.SIN:
        return distribution_sin
    raise ValueError(f"Unsupported distribution: {distribution!r}")
