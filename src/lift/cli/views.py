"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of progressions and plate breakdowns.
"""

from rich.console import Console
from rich.table import Table

from ..core.engine.config_loader import LiftConfig
from ..core.models import Distribution, Set
from ..core.plates import total_loaded
from ..io.serializers import format_plate, format_progression

console = Console()


def _fmt_plates(plates: list[float]) -> str:
    if not plates:
        return "[dim]bar only[/dim]"
    return " + ".join(format_plate(p) for p in plates)


def format_progression_table(
    bar: int,
    work_set: int,
    distribution: Distribution,
    loaded: list[tuple[Set, list[float]]],
) -> Table:
    """
    Build a Rich table for a loaded progression.

    Args:
        bar: Bar weight
        work_set: Work-set weight
        distribution: Distribution used to build the ramp
        loaded: (Set, per-side plates) pairs, lightest first

    Returns:
        Rich Table ready for printing
    """
    table = Table(
        title=f"Warm-up to {work_set} (bar {bar}, {distribution.value})",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Set", justify="right")
    table.add_column("Weight", justify="right")
    table.add_column("Reps", justify="right")
    table.add_column("Repeats", justify="right")
    table.add_column("Per side", justify="left")

    last = len(loaded) - 1
    for i, (s, plates) in enumerate(loaded):
        style = "bold green" if i == last else None
        table.add_row(
            str(i + 1),
            str(s),
            str(s.weight),
            str(s.reps),
            str(s.repeats),
            _fmt_plates(plates),
            style=style,
        )

    return table


def print_progression(
    bar: int,
    work_set: int,
    distribution: Distribution,
    loaded: list[tuple[Set, list[float]]],
) -> None:
    """Print a loaded progression as a table."""
    console.print(format_progression_table(bar, work_set, distribution, loaded))


def print_progression_plain(loaded: list[tuple[Set, list[float]]]) -> None:
    """Print a loaded progression in the compact one-line-per-set format."""
    console.print(format_progression(loaded), markup=False, highlight=False)


def print_plates(weight: int, bar: int, plates: list[float]) -> None:
    """Print the per-side plates for one total weight."""
    console.print(
        f"[bold]{weight}[/bold] on a {bar} bar (+{total_loaded(plates):g}), "
        f"per side: {_fmt_plates(plates)}"
    )


def print_config(cfg: LiftConfig) -> None:
    """Print the effective configuration."""
    table = Table(title="Configuration", show_header=True, header_style="bold cyan")
    table.add_column("Setting")
    table.add_column("Value", justify="right")
    table.add_row("bar", str(cfg.bar))
    table.add_row("sets", str(cfg.sets))
    table.add_row("distribution", cfg.distribution.value)
    console.print(table)
    console.print(f"[dim]Source: {cfg.source}[/dim]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {message}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {message}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{message}[/blue]")
