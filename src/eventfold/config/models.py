"""Configuration models for Eventfold.

All sections are frozen Pydantic models so a loaded configuration cannot be
changed behind the store's back.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_CONFIG_FILENAME = "eventfold.yaml"


class PersistenceConfig(BaseModel, frozen=True):
    """Persistence configuration.

    Attributes:
        events_dir: Storage root for aggregate directories. Relative paths
            are resolved against the current working directory.
    """

    events_dir: str = "local-events"

    @field_validator("events_dir")
    @classmethod
    def validate_events_dir(cls, v: str) -> str:
        """Reject an empty storage root."""
        if not v.strip():
            msg = "events_dir must not be empty"
            raise ValueError(msg)
        return v


class LoggingConfig(BaseModel, frozen=True):
    """Logging configuration.

    Attributes:
        level: Log level (debug, info, warning, error)
        mode: Console output format (dev for human-readable, prod for JSON)
        enable_file_logging: Whether to also write rotating log files
        log_dir: Directory for log files; None means ~/.eventfold/logs
        max_log_days: Number of rotated log files to keep (1-365)
    """

    level: Literal["debug", "info", "warning", "error"] = "info"
    mode: Literal["dev", "prod"] = "dev"
    enable_file_logging: bool = False
    log_dir: str | None = None
    max_log_days: int = Field(default=7, ge=1, le=365)


class SeedConfig(BaseModel, frozen=True):
    """Bootstrap data written by `eventfold seed`.

    Attributes:
        admin_email: Email of the initial admin user
        admin_name: Display name of the initial admin user
        admin_role: Role given to the initial admin user
    """

    admin_email: str = "admin@email.com"
    admin_name: str = "Initial Admin"
    admin_role: str = "admin"


class EventfoldConfig(BaseModel, frozen=True):
    """Top-level Eventfold configuration.

    Attributes:
        persistence: Storage configuration
        logging: Logging configuration
        seed: Seeding defaults
    """

    persistence: PersistenceConfig = Field(default_factory=PersistenceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    seed: SeedConfig = Field(default_factory=SeedConfig)

    def events_path(self) -> Path:
        """Resolve the storage root to an absolute path."""
        return Path(self.persistence.events_dir).expanduser().resolve()


def get_default_config() -> EventfoldConfig:
    """Get the default Eventfold configuration."""
    return EventfoldConfig()
