"""
Configuration constants for the warm-up progression model.

Everything the generator and the plate solver treat as fixed lives here.
User-tunable defaults (bar weight, set count, distribution) are read from
YAML by ``core.engine.config_loader`` and fall back to the values below.
"""

from typing import Final

# =============================================================================
# REPETITIONS
# =============================================================================

MAX_REPS: Final[int] = 5  # Reps for the first set and for the work set
MIN_REPS: Final[int] = 1  # Floor for ramp-up sets

WORK_SET_REPEATS: Final[int] = 3  # Times the final (heaviest) set is performed
FIRST_SET_REPEATS: Final[int] = 2  # Times the bar-only set is performed
RAMP_SET_REPEATS: Final[int] = 1

# =============================================================================
# WEIGHT NORMALIZATION
# =============================================================================

# Weights are shaped in ticks of this many units, then denormalized.
TICK: Final[int] = 5

# =============================================================================
# PLATES
# =============================================================================

# Per-side inventory, largest first. Each entry can be used once per solve,
# so the two 5s are two separate plates.
PLATE_INVENTORY: Final[tuple[float, ...]] = (45.0, 35.0, 25.0, 10.0, 5.0, 5.0, 2.5)

# Upper bound on accepted-plate rounds in a single solve.
MAX_PLATE_ITERATIONS: Final[int] = 10

# =============================================================================
# DEFAULTS (overridable via ~/.lift/config.yaml)
# =============================================================================

DEFAULT_BAR: Final[int] = 45
DEFAULT_SETS: Final[int] = 4
DEFAULT_DISTRIBUTION: Final[str] = "sin"

MIN_SETS: Final[int] = 1
MAX_SETS: Final[int] = 6


def max_loadable_delta(inventory: tuple[float, ...] = PLATE_INVENTORY) -> float:
    """
    Largest weight above the bar the inventory can load.

    Both sides carry the full inventory, so this is twice its sum.

    Args:
        inventory: Per-side plate inventory

    Returns:
        Maximum weight delta (255 for the standard inventory)
    """
    return 2 * sum(inventory)
