"""Eventfold - file-backed event sourcing with replayable projections.

An append-only, per-aggregate event log stored as one JSON file per event,
paired with a projection engine that folds an aggregate's history through a
reducer to rebuild its current state.

Example:
    # Using CLI
    eventfold events write page <id> PAGE_CREATED --payload '{"title": "Hi"}' --version 1
    eventfold aggregates show page <id>

    # Using Python
    from eventfold.persistence import EventStore
    from eventfold.projection import page_reducer, project
"""

__version__ = "0.1.0"

__all__ = ["__version__", "main"]


def main() -> None:
    """Main entry point for the Eventfold CLI.

    This function invokes the Typer app from eventfold.cli.main.
    """
    from eventfold.cli.main import app

    app()
