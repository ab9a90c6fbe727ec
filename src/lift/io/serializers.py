"""
Text and JSON serialization for progressions.

Handles conversion between Set / plate lists and the compact text and
JSON-compatible forms the CLI prints.
"""

import json
import re
from typing import Any

from ..core.models import Distribution, Set


class ValidationError(Exception):
    """Raised when text input cannot be parsed."""

    pass


_SET_RE = re.compile(r"^\s*(\d+)\s*x\s*(\d+)\s*x\s*(\d+)\s*$", re.IGNORECASE)


def parse_set(text: str) -> Set:
    """
    Parse a set written as ``WEIGHTxREPSxREPEATS`` (e.g. ``135x5x3``).

    Args:
        text: Set string

    Returns:
        Parsed Set

    Raises:
        ValidationError: If the string is malformed or the values are invalid
    """
    match = _SET_RE.match(text)
    if match is None:
        raise ValidationError(f"Invalid set: {text!r}. Expected WEIGHTxREPSxREPEATS")
    weight, reps, repeats = (int(g) for g in match.groups())
    try:
        return Set(weight=weight, reps=reps, repeats=repeats)
    except ValueError as e:
        raise ValidationError(f"Invalid set {text!r}: {e}") from e


def format_plate(plate: float) -> str:
    """Format a plate as ``45`` or ``2.5``."""
    return f"{plate:g}"


def format_plates(plates: list[float]) -> str:
    """Format a plate list in the bracketed float form, e.g. ``[45.0, 10.0]``."""
    return "[" + ", ".join(repr(float(p)) for p in plates) + "]"


def format_line(s: Set, plates: list[float]) -> str:
    """One progression line: the set right-aligned to 7 columns, then plates."""
    return f"{str(s):>7} {format_plates(plates)}"


def format_progression(loaded: list[tuple[Set, list[float]]]) -> str:
    """
    Format a loaded progression as newline-separated lines.

    Example:
        " 45x5x2 []\\n 60x4x1 [5.0, 2.5]\\n..."
    """
    return "\n".join(format_line(s, plates) for s, plates in loaded)


def set_to_dict(s: Set, plates: list[float] | None = None) -> dict[str, Any]:
    """Convert a Set (and optionally its plates) to a JSON-compatible dict."""
    data: dict[str, Any] = {
        "weight": s.weight,
        "reps": s.reps,
        "repeats": s.repeats,
    }
    if plates is not None:
        data["plates"] = list(plates)
    return data


def progression_to_dict(
    bar: int,
    work_set: int,
    distribution: Distribution,
    loaded: list[tuple[Set, list[float]]],
) -> dict[str, Any]:
    """Convert a loaded progression to a JSON-compatible dict."""
    return {
        "bar": bar,
        "work_set": work_set,
        "distribution": Distribution.from_name(distribution).value,
        "sets": [set_to_dict(s, plates) for s, plates in loaded],
    }


def to_json(data: dict[str, Any]) -> str:
    """Serialize a dict for CLI output."""
    return json.dumps(data, indent=2)
