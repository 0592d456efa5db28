"""Shared CLI state: lazily loaded configuration and error reporting."""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

import typer

from eventfold.cli.formatters.panels import print_error
from eventfold.config import EventfoldConfig, load_config
from eventfold.core.errors import EventfoldError
from eventfold.observability.logging import configure_logging
from eventfold.persistence import EventStore


@dataclass
class CliState:
    """Per-invocation state attached to the Typer context object."""

    config_path: Path | None = None
    _config: EventfoldConfig | None = field(default=None, repr=False)

    @property
    def config(self) -> EventfoldConfig:
        """Load configuration on first access and configure logging from it."""
        if self._config is None:
            self._config = load_config(self.config_path)
            configure_logging(self._config.logging)
        return self._config

    def store(self) -> EventStore:
        """Build an EventStore rooted at the configured events directory."""
        return EventStore(self.config.events_path())


def get_state(ctx: typer.Context) -> CliState:
    """Return the CliState for this invocation, creating it if needed."""
    return ctx.ensure_object(CliState)


@contextmanager
def handle_errors() -> Iterator[None]:
    """Print Eventfold errors as an error panel and exit with status 1."""
    try:
        yield
    except EventfoldError as e:
        print_error(str(e))
        raise typer.Exit(1) from e


__all__ = ["CliState", "get_state", "handle_errors"]
