"""
Plate decomposition.

Plates are loaded symmetrically, so a weight delta (set weight minus bar)
is halved to a per-side target. The solver walks the inventory from the
heaviest plate down, taking each plate at most once, and accepts a plate
whenever it still fits under the target:

    target = 120 / 2 = 60
    45 -> 45   35 (80) no   25 (70) no   10 -> 55   5 -> 60   done

If every remaining plate overshoots, the solve fails with ExceedsTarget.
If the inventory runs out short of the target, it fails with NoExactSolution.
"""

from __future__ import annotations

from .config import MAX_PLATE_ITERATIONS, PLATE_INVENTORY
from .errors import ExceedsTarget, NoExactSolution


def solve(
    weight_delta: float,
    inventory: tuple[float, ...] = PLATE_INVENTORY,
) -> list[float]:
    """
    Return the plates for one side of the bar that add up to weight_delta / 2.

    Args:
        weight_delta: Total weight to add to the bar (both sides)
        inventory: Per-side plates, largest first; each used at most once

    Returns:
        Plates in the order they were taken (largest first). Empty for 0.

    Raises:
        ValueError: If weight_delta is negative
        ExceedsTarget: If no remaining plate fits under the target
        NoExactSolution: If the plates run out before reaching the target
    """
    if weight_delta < 0:
        raise ValueError(f"weight_delta must be non-negative, got {weight_delta}")
    if weight_delta == 0:
        return []

    target = weight_delta / 2
    required: list[float] = []
    remaining = iter(inventory)
    next_sum = 0.0

    for _ in range(MAX_PLATE_ITERATIONS):
        current = next_sum

        # Skip plates until one fits; the skipped ones are gone for good
        for plate in remaining:
            next_sum = current + plate
            if next_sum <= target:
                required.append(plate)
                break

        if next_sum == target:
            return required
        elif next_sum > target:
            raise ExceedsTarget(weight_delta, target)

    raise NoExactSolution(weight_delta, target)


def plates_for(weight_delta: float) -> list[float]:
    """Per-side plates for weight_delta using the standard inventory."""
    return solve(weight_delta, PLATE_INVENTORY)


def total_loaded(plates: list[float]) -> float:
    """Weight the given per-side plates add to the bar (both sides)."""
    return 2 * sum(plates)
