"""Shared Typer app object, shared option types, and config utility."""

import warnings
from typing import Annotated, Optional

import typer

from ..core.config import MAX_SETS, MIN_SETS
from ..core.engine.config_loader import LiftConfig, load_lift_config
from . import views

# Shared --bar option type; None means "use the configured default"
BarOption = Annotated[
    Optional[int],
    typer.Option("--bar", "-b", min=0, help="Bar weight (default from config: 45)"),
]

SetsOption = Annotated[
    Optional[int],
    typer.Option(
        "--sets",
        "-s",
        min=MIN_SETS,
        max=MAX_SETS,
        help=f"Number of sets, {MIN_SETS}-{MAX_SETS} (default from config: 4)",
    ),
]

JsonOption = Annotated[
    bool,
    typer.Option("--json", "-j", help="Output as JSON for machine processing"),
]

app = typer.Typer(
    name="lift",
    help="Lift helps with barbell lift planning: warm-up sets and the plates to load.",
    no_args_is_help=True,
)


def get_config() -> LiftConfig:
    """Load the effective config, echoing override warnings to the console."""
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        cfg = load_lift_config()
    for w in caught:
        views.print_warning(str(w.message))
    return cfg
