from __future__ import annotations

from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from duration_string.config import ENV_DEFAULT_DURATION, env_duration
from duration_string.durations import DurationString
from duration_string.units import UNITS


app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()


def _parse_or_bad_parameter(text: str) -> DurationString:
    try:
        return DurationString.from_string(text)
    except ValueError as e:
        raise typer.BadParameter(f"{text!r}: {e}") from e


@app.command()
def parse(
    texts: Optional[List[str]] = typer.Argument(
        None,
        help="Duration strings (e.g. 100ms, 1h10m, '5m 30s'). If omitted, uses $DURATION_STRING_DEFAULT.",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Print only the canonical form, one per line."),
) -> None:
    """
    Parse duration strings and show their canonical form.
    """
    if texts:
        parsed = [(t, _parse_or_bad_parameter(t)) for t in texts]
    else:
        try:
            from_env = env_duration(ENV_DEFAULT_DURATION)
        except ValueError as e:
            raise typer.BadParameter(str(e)) from e
        if from_env is None:
            raise typer.BadParameter(f"provide TEXT or set ${ENV_DEFAULT_DURATION}")
        parsed = [(f"${ENV_DEFAULT_DURATION}", from_env)]

    if quiet:
        for _, d in parsed:
            console.print(str(d), markup=False, highlight=False)
        return

    table = Table(title="duration-string")
    table.add_column("input")
    table.add_column("canonical")
    table.add_column("nanoseconds", justify="right")
    table.add_column("seconds", justify="right")
    for raw, d in parsed:
        table.add_row(raw, str(d), str(d.nanoseconds), f"{d.total_seconds():g}")
    console.print(table)


@app.command("format")
def format_(
    nanos: Optional[int] = typer.Argument(None, min=0, help="Duration in nanoseconds."),
    seconds: Optional[int] = typer.Option(None, "--seconds", "-s", min=0, help="Duration in whole seconds."),
) -> None:
    """
    Print the canonical duration string for a number of nanoseconds or seconds.
    """
    if (nanos is None) == (seconds is None):
        raise typer.BadParameter("Use either NANOS or --seconds (exactly one).")
    total = nanos if nanos is not None else seconds * 1_000_000_000
    try:
        d = DurationString(total)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    console.print(str(d), markup=False, highlight=False)


@app.command()
def units() -> None:
    """
    Show the supported unit suffixes.
    """
    table = Table(title="duration-string units")
    table.add_column("suffix")
    table.add_column("nanoseconds", justify="right")
    for unit in UNITS:
        table.add_row(unit.suffix, str(unit.nanos))
    console.print(table)


if __name__ == "__main__":
    app()
