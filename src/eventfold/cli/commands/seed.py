"""Seed command group for Eventfold.

Bootstrap an empty event store with initial aggregates.
"""

import asyncio
from typing import Annotated

import typer

from eventfold.cli.formatters import console
from eventfold.cli.formatters.panels import print_info, print_success
from eventfold.cli.state import get_state, handle_errors
from eventfold.seeding import seed_admin, seed_page

app = typer.Typer(
    name="seed",
    help="Bootstrap initial data.",
    no_args_is_help=True,
)


@app.command()
def admin(
    ctx: typer.Context,
    email: Annotated[
        str | None,
        typer.Option("--email", help="Admin email (defaults to config / ADMIN_EMAIL)."),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option("--name", help="Admin display name."),
    ] = None,
) -> None:
    """Create the initial admin user unless a user already exists."""
    state = get_state(ctx)

    with handle_errors():
        seed_config = state.config.seed
        event = asyncio.run(
            seed_admin(
                state.store(),
                email=email or seed_config.admin_email,
                name=name or seed_config.admin_name,
                role=seed_config.admin_role,
            )
        )

    if event is None:
        print_info("User(s) already exist. Skipping seed.")
        return
    print_success(f"Admin user seeded: {event.payload['email']}")


@app.command("demo-page")
def demo_page(
    ctx: typer.Context,
    title: Annotated[str, typer.Option("--title", help="Initial page title.")] = "Hello",
    content: Annotated[str, typer.Option("--content", help="Page content.")] = "World",
    updated_title: Annotated[
        str | None,
        typer.Option("--updated-title", help="Also write a PAGE_UPDATED with this title."),
    ] = None,
) -> None:
    """Write a demo page so a fresh store has something to project."""
    state = get_state(ctx)

    with handle_errors():
        aggregate_id = asyncio.run(
            seed_page(
                state.store(),
                title=title,
                content=content,
                updated_title=updated_title,
            )
        )

    console.print(aggregate_id, highlight=False, soft_wrap=True)
    print_success("Demo page seeded")


__all__ = ["app"]
