"""
Errors raised by the progression generator and the plate solver.

All of them are terminal for the computation in progress; callers decide
whether to abort or skip.
"""


class LiftError(Exception):
    """Base class for lift domain errors."""

    pass


class InvalidSetCount(LiftError, ValueError):
    """Raised when a progression is requested with fewer than one set."""

    def __init__(self, num_sets: int) -> None:
        self.num_sets = num_sets
        super().__init__(f"Number of sets must be at least 1, got {num_sets}")


class PlateError(LiftError):
    """A weight delta could not be expressed with the plate inventory."""

    reason = "plate solve failed"

    def __init__(self, weight_delta: float, target: float) -> None:
        self.weight_delta = weight_delta
        self.target = target
        super().__init__(
            f"{self.reason}: cannot load {weight_delta:g} "
            f"({target:g} per side) with the available plates"
        )


class ExceedsTarget(PlateError):
    """The running plate sum overshot the per-side target."""

    reason = "sum exceeds weight"


class NoExactSolution(PlateError):
    """The inventory ran out before the per-side target was reached."""

    reason = "no solution found"
