"""
lift: barbell warm-up planning.

Builds a ramp of sets from the empty bar to a work set and works out the
plates to load on each side for every set.
"""

from .core.errors import ExceedsTarget, InvalidSetCount, LiftError, NoExactSolution, PlateError
from .core.models import Distribution, Set
from .core.plates import plates_for
from .core.progression import build_progression, load_progression

__version__ = "0.1.0"

__all__ = [
    "Distribution",
    "Set",
    "build_progression",
    "load_progression",
    "plates_for",
    "LiftError",
    "InvalidSetCount",
    "PlateError",
    "ExceedsTarget",
    "NoExactSolution",
]
