"""Aggregates command group for Eventfold.

List known aggregates, show their projected state and delete them.
"""

import asyncio
from typing import Annotated

import typer

from eventfold.cli.formatters.panels import print_info, print_success, print_warning
from eventfold.cli.formatters.tables import (
    create_aggregates_table,
    create_key_value_table,
    print_table,
)
from eventfold.cli.state import get_state, handle_errors
from eventfold.projection import get_reducer, load_state

app = typer.Typer(
    name="aggregates",
    help="List, project and delete aggregates.",
    no_args_is_help=True,
)


@app.command("list")
def list_aggregates(
    ctx: typer.Context,
    aggregate_type: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Only show aggregates of this type."),
    ] = None,
) -> None:
    """List every aggregate in the event store."""
    state = get_state(ctx)

    with handle_errors():
        keys = asyncio.run(state.store().list())

    if aggregate_type is not None:
        keys = [key for key in keys if key.aggregate_type == aggregate_type]

    if not keys:
        print_info("No aggregates found")
        return

    print_table(create_aggregates_table(keys, "Aggregates"))
    print_info(f"{len(keys)} aggregate(s)")


@app.command()
def show(
    ctx: typer.Context,
    aggregate_type: Annotated[str, typer.Argument(help="Aggregate type (e.g. 'page').")],
    aggregate_id: Annotated[str, typer.Argument(help="Aggregate UUID.")],
) -> None:
    """Replay an aggregate's events and show its current state."""
    state = get_state(ctx)

    with handle_errors():
        reducer = get_reducer(aggregate_type)
        current = asyncio.run(
            load_state(state.store(), aggregate_type, aggregate_id, reducer)
        )

    if current is None:
        print_warning(f"No events for {aggregate_type}-{aggregate_id}")
        raise typer.Exit(1)

    print_table(create_key_value_table(current, f"{aggregate_type}-{aggregate_id}"))


@app.command()
def delete(
    ctx: typer.Context,
    aggregate_type: Annotated[str, typer.Argument(help="Aggregate type (e.g. 'page').")],
    aggregate_id: Annotated[str, typer.Argument(help="Aggregate UUID.")],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Delete without asking for confirmation."),
    ] = False,
) -> None:
    """Delete an aggregate and all of its events."""
    if not yes:
        typer.confirm(
            f"Delete {aggregate_type}-{aggregate_id} and all of its events?",
            abort=True,
        )

    state = get_state(ctx)
    with handle_errors():
        asyncio.run(state.store().delete(aggregate_type, aggregate_id))

    print_success(f"Deleted {aggregate_type}-{aggregate_id}")


__all__ = ["app"]
