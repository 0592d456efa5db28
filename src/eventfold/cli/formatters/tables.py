"""Rich tables for events, aggregates and projected state."""

from collections.abc import Iterable, Mapping
import json
from typing import Any

from rich.markup import escape
from rich.table import Table

from eventfold.cli.formatters import console
from eventfold.events.base import AggregateKey, Event


def create_table(
    title: str | None = None,
    *,
    show_header: bool = True,
    show_lines: bool = False,
    border_style: str = "blue",
    header_style: str = "bold cyan",
) -> Table:
    """Create a Rich Table with consistent Eventfold styling.

    Example:
        table = create_table("Results")
        table.add_column("Name", style="cyan")
        table.add_row("page", "...")
        print_table(table)
    """
    return Table(
        title=title,
        show_header=show_header,
        show_lines=show_lines,
        border_style=border_style,
        header_style=header_style,
        row_styles=["", "dim"],
    )


def create_key_value_table(
    data: Mapping[str, Any],
    title: str | None = None,
    *,
    key_style: str = "cyan",
) -> Table:
    """Create a two-column table for key-value data such as projected state."""
    table = create_table(title, show_header=False)
    table.add_column("Key", style=key_style, no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(str(key), _format_value(value))

    return table


def create_events_table(events: Iterable[Event], title: str | None = None) -> Table:
    """Create a table listing events in the given order."""
    table = create_table(title, show_lines=True)
    table.add_column("Version", justify="right", style="highlight")
    table.add_column("Event Type", style="cyan", no_wrap=True)
    table.add_column("Timestamp", style="muted")
    table.add_column("Payload")

    for event in events:
        table.add_row(
            str(event.version),
            event.event_type,
            event.timestamp,
            escape(json.dumps(event.payload, ensure_ascii=False)),
        )

    return table


def create_aggregates_table(keys: Iterable[AggregateKey], title: str | None = None) -> Table:
    """Create a table listing aggregate keys."""
    table = create_table(title)
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Aggregate ID", no_wrap=True)

    for key in keys:
        table.add_row(key.aggregate_type, key.aggregate_id)

    return table


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return escape(json.dumps(value, ensure_ascii=False))
    if value is None:
        return "[muted]-[/]"
    return escape(str(value))


def print_table(table: Table) -> None:
    """Print a Rich Table to the shared console."""
    console.print(table)


__all__ = [
    "create_table",
    "create_key_value_table",
    "create_events_table",
    "create_aggregates_table",
    "print_table",
]
