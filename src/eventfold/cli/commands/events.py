"""Events command group for Eventfold.

Write single events and inspect an aggregate's raw history.
"""

import asyncio
import json
from typing import Annotated, Any

import typer

from eventfold.cli.formatters.panels import print_error, print_info, print_success
from eventfold.cli.formatters.tables import (
    create_events_table,
    create_key_value_table,
    print_table,
)
from eventfold.cli.state import get_state, handle_errors

app = typer.Typer(
    name="events",
    help="Write and read raw events.",
    no_args_is_help=True,
)


def _parse_payload(raw: str) -> dict[str, Any]:
    """Parse the --payload option as a JSON object."""
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        print_error(f"Payload is not valid JSON: {e}")
        raise typer.Exit(1) from e
    if not isinstance(payload, dict):
        print_error("Payload must be a JSON object")
        raise typer.Exit(1)
    return payload


@app.command()
def write(
    ctx: typer.Context,
    aggregate_type: Annotated[str, typer.Argument(help="Aggregate type (e.g. 'page').")],
    aggregate_id: Annotated[str, typer.Argument(help="Aggregate UUID.")],
    event_type: Annotated[str, typer.Argument(help="Event type (e.g. 'PAGE_CREATED').")],
    version: Annotated[
        int,
        typer.Option("--version", "-v", help="Version number of this event."),
    ],
    payload: Annotated[
        str,
        typer.Option("--payload", "-p", help="Event payload as a JSON object."),
    ] = "{}",
    expected_version: Annotated[
        int | None,
        typer.Option(
            "--expected-version",
            "-e",
            help="Fail unless this is the aggregate's latest stored version.",
        ),
    ] = None,
) -> None:
    """Append one event to an aggregate.

    The store assigns the event id and timestamp.
    """
    data = _parse_payload(payload)
    state = get_state(ctx)

    with handle_errors():
        store = state.store()
        event = asyncio.run(
            store.write(
                {
                    "aggregateId": aggregate_id,
                    "aggregateType": aggregate_type,
                    "eventType": event_type,
                    "payload": data,
                    "version": version,
                },
                expected_version=expected_version,
            )
        )

    print_table(create_key_value_table(event.to_record(), "Event Written"))
    print_success(f"Stored {event.event_type} v{event.version}")


@app.command()
def read(
    ctx: typer.Context,
    aggregate_type: Annotated[str, typer.Argument(help="Aggregate type (e.g. 'page').")],
    aggregate_id: Annotated[str, typer.Argument(help="Aggregate UUID.")],
) -> None:
    """Show every event of an aggregate in timestamp order."""
    state = get_state(ctx)

    with handle_errors():
        events = asyncio.run(state.store().read(aggregate_type, aggregate_id))

    if not events:
        print_info(f"No events for {aggregate_type}-{aggregate_id}")
        return

    print_table(create_events_table(events, f"{aggregate_type}-{aggregate_id}"))
    print_info(f"{len(events)} event(s)")


__all__ = ["app"]
