"""Eventfold CLI main entry point.

This module defines the main Typer application and registers
all command groups for the Eventfold CLI.
"""

from pathlib import Path
from typing import Annotated

import typer

from eventfold import __version__
from eventfold.cli.commands import aggregates, config, events, seed
from eventfold.cli.formatters import console
from eventfold.cli.state import CliState

app = typer.Typer(
    name="eventfold",
    help="Eventfold - file-backed event store with replayable projections",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(events.app, name="events")
app.add_typer(aggregates.app, name="aggregates")
app.add_typer(seed.app, name="seed")
app.add_typer(config.app, name="config")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold cyan]Eventfold[/] version [green]{__version__}[/]")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to a YAML config file (defaults to ./eventfold.yaml).",
        ),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Eventfold - file-backed event store with replayable projections.

    Events are appended one file per event under the configured events
    directory and folded through reducers to rebuild aggregate state.

    Use [bold cyan]eventfold COMMAND --help[/] for command-specific help.
    """
    ctx.obj = CliState(config_path=config_path)


__all__ = ["app", "main"]
