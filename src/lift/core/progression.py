"""
Warm-up progression generator.

Weights
-------
The distance from bar to work set is measured in ticks of TICK units and
spread evenly over the sets, then bent by the distribution function:

    D         = (work_set - bar) / TICK
    x_i       = i * D / (n - 1)                 i = 0 .. n-1
    weight_i  = bar + TICK * trunc(f(x_i, D))

The first set is always the empty bar and the last is always the work set.

Reps and repeats
----------------
Reps drop by one per set from MAX_REPS (floored at MIN_REPS); the work set
goes back to MAX_REPS. The bar set is done twice, the work set three times,
everything in between once:

    45x5x2, 60x4x1, 70x3x1, 80x2x1, 85x5x3
"""

from __future__ import annotations

from .config import (
    DEFAULT_SETS,
    FIRST_SET_REPEATS,
    MAX_REPS,
    MIN_REPS,
    RAMP_SET_REPEATS,
    TICK,
    WORK_SET_REPEATS,
)
from .distribution import get_distribution_fn
from .errors import InvalidSetCount
from .models import Distribution, Set
from .plates import plates_for

# Positions and shaped tick counts are rounded to this many decimals
# before ceil/truncation.
SNAP_DIGITS = 9


def _check_range(bar: int, work_set: int, num_sets: int) -> None:
    if num_sets < 1:
        raise InvalidSetCount(num_sets)
    if bar < 0:
        raise ValueError(f"bar must be non-negative, got {bar}")
    if work_set < bar:
        raise ValueError(
            f"Work set ({work_set}) must be greater than or equal to the bar weight ({bar})"
        )


def weights(
    bar: int,
    work_set: int,
    num_sets: int,
    distribution: Distribution = Distribution.SIN,
) -> list[int]:
    """
    Return the total weight of each set, lightest first.

    Args:
        bar: Empty bar weight
        work_set: Weight of the final set (>= bar)
        num_sets: Number of sets (>= 1); a single set is the work set alone
        distribution: Shaping of the ramp

    Returns:
        num_sets weights, starting at bar and ending at work_set

    Raises:
        InvalidSetCount: If num_sets < 1
        ValueError: If work_set < bar
    """
    _check_range(bar, work_set, num_sets)
    if num_sets == 1:
        return [work_set]

    shape = get_distribution_fn(distribution)
    delta_normalized = (work_set - bar) / TICK
    increment = delta_normalized / (num_sets - 1)

    result = []
    for i in range(num_sets - 1):
        # Float noise must not cross a whole tick: sin(pi/6) is 0.49999999999999994
        x = round(i * increment, SNAP_DIGITS)
        ticks = int(round(shape(x, delta_normalized), SNAP_DIGITS))
        result.append(bar + ticks * TICK)

    # i * increment can land a hair off D for the last index
    result.append(work_set)
    return result


def reps(index: int, total: int) -> int:
    """
    Reps for the set at ``index`` out of ``total``.

    The work set (last) always gets MAX_REPS.
    """
    if index == total - 1:
        return MAX_REPS
    return max(MAX_REPS - index, MIN_REPS)


def repeats(index: int, total: int) -> int:
    """
    How many times the set at ``index`` out of ``total`` is performed.

    Last set wins over first, so a single-set progression repeats 3 times.
    """
    if index == total - 1:
        return WORK_SET_REPEATS
    elif index == 0:
        return FIRST_SET_REPEATS
    return RAMP_SET_REPEATS


def build_progression(
    bar: int,
    work_set: int,
    num_sets: int = DEFAULT_SETS,
    distribution: Distribution = Distribution.SIN,
) -> list[Set]:
    """
    Build the warm-up progression from the bar up to the work set.

    Every set must be loadable: its weight above the bar is checked against
    the plate inventory and an unloadable set raises rather than being
    dropped.

    Args:
        bar: Empty bar weight
        work_set: Weight of the final set (>= bar)
        num_sets: Number of sets including the bar set and the work set
        distribution: Shaping of the ramp (default: sin)

    Returns:
        Sets ordered lightest to heaviest

    Raises:
        InvalidSetCount: If num_sets < 1
        ValueError: If work_set < bar
        ExceedsTarget, NoExactSolution: If a set cannot be loaded
    """
    sets = [
        Set(weight=w, reps=reps(i, num_sets), repeats=repeats(i, num_sets))
        for i, w in enumerate(weights(bar, work_set, num_sets, distribution))
    ]
    for s in sets:
        plates_for(s.weight - bar)
    return sets


def load_progression(
    bar: int,
    work_set: int,
    num_sets: int = DEFAULT_SETS,
    distribution: Distribution = Distribution.SIN,
) -> list[tuple[Set, list[float]]]:
    """
    Build the progression and pair each set with its per-side plates.

    Same arguments and errors as build_progression().
    """
    return [
        (s, plates_for(s.weight - bar))
        for s in build_progression(bar, work_set, num_sets, distribution)
    ]
