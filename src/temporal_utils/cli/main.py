from __future__ import annotations

import typer

from .base import configure_logging
from .commands.bounds import app as bounds_app
from .commands.convert import app as convert_app

configure_logging()
app = typer.Typer(
    help="Date/time inspection CLI",
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(convert_app, name="convert")
app.add_typer(bounds_app, name="bounds")


def main() -> None:
    """Main entry point for package CLI.

    Invokes the Typer application, which handles command parsing and
    execution.

    Side Effects:
        - Processes CLI arguments and executes commands.
        - May exit with non-zero code on errors.
    """
    app()


if __name__ == "__main__":
    main()
