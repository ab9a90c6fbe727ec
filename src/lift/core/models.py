"""
Data models for lift.

``Distribution`` selects the shaping curve of a warm-up ramp and ``Set``
is one block of reps at a single weight.
"""

from dataclasses import dataclass
from enum import Enum


class Distribution(str, Enum):
    """Shaping function used to space weights across the ramp."""

    LINEAR = "linear"
    SIN = "sin"

    @classmethod
    def from_name(cls, name: str) -> "Distribution":
        """
        Look up a distribution by its name, case-insensitively.

        Raises:
            ValueError: If the name is not a known distribution
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown distribution '{name}'. Valid names: {valid}") from None


@dataclass(frozen=True)
class Set:
    """
    A block of reps at one weight, performed ``repeats`` times.

    ``weight`` is the total on the bar (bar + plates on both sides).
    """

    weight: int
    reps: int
    repeats: int

    def __post_init__(self) -> None:
        """Validate set data."""
        if self.weight < 0:
            raise ValueError("weight must be non-negative")
        if self.reps < 1:
            raise ValueError("reps must be at least 1")
        if self.repeats < 1:
            raise ValueError("repeats must be at least 1")

    def __str__(self) -> str:
        return f"{self.weight}x{self.reps}x{self.repeats}"
