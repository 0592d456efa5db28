"""Eventfold CLI module.

Command-line interface for the event store, built with Typer for the
CLI framework and Rich for output.
"""

from eventfold.cli.main import app

__all__ = ["app"]
