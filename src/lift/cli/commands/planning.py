"""Planning commands: plan and plates."""

from typing import Annotated, Optional

import typer

from ...core.config import TICK, max_loadable_delta
from ...core.errors import LiftError
from ...core.models import Distribution
from ...core.plates import plates_for
from ...core.progression import load_progression
from ...io.serializers import progression_to_dict, to_json
from .. import views
from ..app import BarOption, JsonOption, SetsOption, app, get_config


def _parse_distribution(name: str | None, default: Distribution) -> Distribution:
    """Resolve --distribution, exiting with an error on unknown names."""
    if name is None:
        return default
    try:
        return Distribution.from_name(name)
    except ValueError as e:
        views.print_error(str(e))
        raise typer.Exit(1)


def _check_above_bar(weight: int, bar: int, label: str) -> None:
    if weight < bar:
        views.print_error(
            f"{label} ({weight}) must be greater than or equal to the bar weight ({bar})."
        )
        raise typer.Exit(1)


@app.command()
def plan(
    work_set: Annotated[
        int,
        typer.Argument(min=0, help="Weight of the work set. Must be >= the bar weight."),
    ],
    bar: BarOption = None,
    sets: SetsOption = None,
    distribution: Annotated[
        Optional[str],
        typer.Option("--distribution", "-d", help="Ramp shape: sin (default) or linear"),
    ] = None,
    json_out: JsonOption = False,
    plain: Annotated[
        bool,
        typer.Option("--plain", help="Compact output, one 'WEIGHTxREPSxREPEATS [plates]' line per set"),
    ] = False,
) -> None:
    """
    Show the warm-up sets from the empty bar up to the work set.

    Each set is WEIGHTxREPSxREPEATS with the plates to load on each side.
    """
    cfg = get_config()
    bar = cfg.bar if bar is None else bar
    sets = cfg.sets if sets is None else sets
    dist = _parse_distribution(distribution, cfg.distribution)

    _check_above_bar(work_set, bar, "Work set")

    try:
        loaded = load_progression(bar, work_set, sets, dist)
    except LiftError as e:
        views.print_error(str(e))
        views.print_info(
            f"Weights above the bar must be a multiple of {TICK}, up to {max_loadable_delta():g}."
        )
        raise typer.Exit(1)

    if json_out:
        print(to_json(progression_to_dict(bar, work_set, dist, loaded)))
        return

    if plain:
        views.print_progression_plain(loaded)
        return

    views.print_progression(bar, work_set, dist, loaded)


@app.command()
def plates(
    weight: Annotated[
        int,
        typer.Argument(min=0, help="Total weight on the bar, bar included."),
    ],
    bar: BarOption = None,
    json_out: JsonOption = False,
) -> None:
    """Show which plates to load on each side of the bar for a total weight."""
    cfg = get_config()
    bar = cfg.bar if bar is None else bar

    _check_above_bar(weight, bar, "Total weight")

    try:
        per_side = plates_for(weight - bar)
    except LiftError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if json_out:
        print(to_json({"weight": weight, "bar": bar, "plates": per_side}))
        return

    views.print_plates(weight, bar, per_side)
