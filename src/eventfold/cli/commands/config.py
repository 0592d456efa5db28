"""Config command group for Eventfold.

Create and inspect configuration files.
"""

from pathlib import Path
from typing import Annotated

import typer

from eventfold.cli.formatters.panels import print_success
from eventfold.cli.formatters.tables import create_key_value_table, print_table
from eventfold.cli.state import get_state, handle_errors
from eventfold.config import create_default_config

app = typer.Typer(
    name="config",
    help="Manage Eventfold configuration.",
    no_args_is_help=True,
)


@app.command()
def init(
    path: Annotated[
        Path | None,
        typer.Option("--path", help="Where to write the file (defaults to ./eventfold.yaml)."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing file."),
    ] = False,
) -> None:
    """Write a default configuration file."""
    with handle_errors():
        written = create_default_config(path, overwrite=force)
    print_success(f"Configuration written to {written}")


@app.command()
def show(ctx: typer.Context) -> None:
    """Display the effective configuration."""
    state = get_state(ctx)

    with handle_errors():
        config = state.config

    data = {
        f"{section}.{key}": value
        for section, values in config.model_dump(mode="json").items()
        for key, value in values.items()
    }
    data["events_path"] = str(config.events_path())
    print_table(create_key_value_table(data, "Current Configuration"))


__all__ = ["app"]
