"""Conversion commands: current time, epoch millis, legacy normalization."""

from __future__ import annotations

from datetime import UTC
from typing import Annotated

import typer

from ...errors import InvalidArgument
from ...utils.legacy import normalize_legacy
from ...utils.time import (
    format_iso_utc,
    parse_iso_utc,
    to_utc,
    to_utc_millis,
    utc_now,
    utc_now_millis,
)
from ..base import BaseCLI, parse_zone_arg

app = typer.Typer(
    name="convert",
    help="Convert between ISO UTC strings, epoch milliseconds and zones",
)


class ZonelessInstant:
    """Calendar value holding an instant but no timezone."""

    tzinfo = None

    def __init__(self, millis: int) -> None:
        self.millis = millis

    def timestamp(self) -> float:
        return self.millis / 1000

    def __repr__(self) -> str:
        return f"ZonelessInstant({self.millis})"


@app.command("now")
def now_command(
    millis: Annotated[
        bool,
        typer.Option("--millis", help="Print epoch milliseconds instead of ISO"),
    ] = False,
) -> None:
    """Print the current UTC time."""
    cli = BaseCLI("convert")

    def _now() -> str | int:
        if millis:
            return utc_now_millis()
        return format_iso_utc(utc_now())

    cli.handle_cli_operation(operation="now", op_callable=_now)


@app.command("from-millis")
def from_millis_command(
    millis: Annotated[
        int,
        typer.Argument(help="Epoch milliseconds (0 means no timestamp)"),
    ],
) -> None:
    """Convert epoch milliseconds to an ISO UTC string."""
    cli = BaseCLI("convert")

    def _from_millis() -> str | None:
        local = to_utc(millis)
        return None if local is None else format_iso_utc(local)

    cli.handle_cli_operation(operation="from-millis", op_callable=_from_millis)


@app.command("to-millis")
def to_millis_command(
    timestamp: Annotated[
        str,
        typer.Argument(help="ISO timestamp with Z or +HH:MM offset"),
    ],
) -> None:
    """Convert an ISO timestamp with an offset to epoch milliseconds."""
    cli = BaseCLI("convert")

    def _to_millis() -> int:
        return to_utc_millis(parse_iso_utc(timestamp).replace(tzinfo=UTC))

    cli.handle_cli_operation(operation="to-millis", op_callable=_to_millis)


@app.command("normalize")
def normalize_command(
    millis: Annotated[
        int,
        typer.Argument(help="Epoch milliseconds of the calendar instant"),
    ],
    zone: Annotated[
        str | None,
        typer.Option("--zone", help="IANA zone embedded in the calendar value"),
    ] = None,
    default_zone: Annotated[
        str | None,
        typer.Option(
            "--default-zone",
            help="IANA zone to assume when --zone is omitted (defaults to system zone)",
        ),
    ] = None,
) -> None:
    """Show the local wall-clock time of an instant, as a legacy calendar would."""
    cli = BaseCLI("convert")

    def _normalize() -> str:
        instant = to_utc(millis)
        if instant is None:
            raise InvalidArgument("Epoch milliseconds 0 does not name an instant")
        if zone is not None:
            calendar_value = instant.replace(tzinfo=UTC).astimezone(parse_zone_arg(zone))
        else:
            calendar_value = ZonelessInstant(millis)
        fallback = parse_zone_arg(default_zone) if default_zone is not None else None
        local = normalize_legacy(calendar_value, default_zone=fallback)
        return local.isoformat()

    cli.handle_cli_operation(operation="normalize", op_callable=_normalize)
