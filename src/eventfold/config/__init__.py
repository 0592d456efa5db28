"""Configuration module for Eventfold.

Configuration is read from ./eventfold.yaml (or an explicit path) and
overlaid with environment variables.

Usage:
    from eventfold.config import load_config

    config = load_config()
    store = EventStore(config.events_path())
"""

from eventfold.config.loader import ENV_OVERRIDES, create_default_config, load_config
from eventfold.config.models import (
    DEFAULT_CONFIG_FILENAME,
    EventfoldConfig,
    LoggingConfig,
    PersistenceConfig,
    SeedConfig,
    get_default_config,
)

__all__ = [
    # Models
    "EventfoldConfig",
    "PersistenceConfig",
    "LoggingConfig",
    "SeedConfig",
    "DEFAULT_CONFIG_FILENAME",
    "get_default_config",
    # Loader functions
    "ENV_OVERRIDES",
    "load_config",
    "create_default_config",
]
