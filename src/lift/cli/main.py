"""
CLI entry point using Typer.

Provides commands for barbell warm-up planning:
- plan: Warm-up sets from the bar to the work set, with plates
- plates: Plates per side for a single weight
- config: Show the effective defaults
"""

from .app import app
from .commands import planning, settings  # noqa: F401  (registers commands)

__all__ = ["app"]


if __name__ == "__main__":
    app()
