"""Range and boundary commands: day/month bounds, range checks, extremes."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

import typer

from ...utils.time import (
    end_of_day,
    first_day_of_month,
    is_between,
    last_day_of_month,
    max_of,
    min_of,
    start_of_day,
)
from ..base import BaseCLI, parse_local_arg

app = typer.Typer(
    name="bounds",
    help="Day and month boundaries, range checks and min/max selection",
)

# CLI spelling of an absent value in max/min lists
ABSENT_TOKENS = {"none", "null", "-"}


def _parse_optional_locals(values: list[str]) -> list[datetime | None]:
    return [
        None if raw.lower() in ABSENT_TOKENS else parse_local_arg(raw, f"values[{i}]")
        for i, raw in enumerate(values)
    ]


@app.command("day")
def day_command(
    value: Annotated[str, typer.Argument(help="Local datetime YYYY-MM-DDTHH:MM:SS")],
) -> None:
    """Print the start and end of the day containing VALUE."""
    cli = BaseCLI("bounds")

    def _day() -> dict[str, str]:
        local = parse_local_arg(value)
        return {
            "start": start_of_day(local).isoformat(),
            "end": end_of_day(local).isoformat(),
        }

    cli.handle_cli_operation(operation="day", op_callable=_day)


@app.command("month")
def month_command(
    value: Annotated[str, typer.Argument(help="Local datetime YYYY-MM-DDTHH:MM:SS")],
) -> None:
    """Print the first and last day of the month containing VALUE."""
    cli = BaseCLI("bounds")

    def _month() -> dict[str, str]:
        local = parse_local_arg(value)
        return {
            "first": first_day_of_month(local).isoformat(),
            "last": last_day_of_month(local).isoformat(),
        }

    cli.handle_cli_operation(operation="month", op_callable=_month)


@app.command("between")
def between_command(
    value: Annotated[str, typer.Argument(help="Local datetime to test")],
    lower: Annotated[
        str | None,
        typer.Option("--lower", help="Inclusive lower bound (omit for none)"),
    ] = None,
    upper: Annotated[
        str | None,
        typer.Option("--upper", help="Inclusive upper bound (omit for none)"),
    ] = None,
) -> None:
    """Check whether VALUE lies within [--lower, --upper].

    Exits with code 1 when VALUE is outside the range.
    """
    cli = BaseCLI("bounds")

    def _between() -> bool:
        return is_between(
            parse_local_arg(value),
            parse_local_arg(lower, "lower") if lower is not None else None,
            parse_local_arg(upper, "upper") if upper is not None else None,
        )

    inside = cli.handle_cli_operation(operation="between", op_callable=_between)
    if not inside:
        raise typer.Exit(1)


@app.command("max")
def max_command(
    values: Annotated[
        list[str] | None,
        typer.Argument(help="Local datetimes; 'none' marks an absent entry"),
    ] = None,
) -> None:
    """Print the latest of VALUES (the minimum sentinel if none are given)."""
    cli = BaseCLI("bounds")

    def _max() -> str:
        return max_of(*_parse_optional_locals(values or [])).isoformat()

    cli.handle_cli_operation(operation="max", op_callable=_max)


@app.command("min")
def min_command(
    values: Annotated[
        list[str] | None,
        typer.Argument(help="Local datetimes; 'none' marks an absent entry"),
    ] = None,
) -> None:
    """Print the earliest of VALUES (the maximum sentinel if none are given)."""
    cli = BaseCLI("bounds")

    def _min() -> str:
        return min_of(*_parse_optional_locals(values or [])).isoformat()

    cli.handle_cli_operation(operation="min", op_callable=_min)
