"""Eventfold core module - shared errors and identifiers."""

from eventfold.core.errors import (
    ConfigError,
    DuplicateEventError,
    EventfoldError,
    MissingFieldError,
    PersistenceError,
    UnknownAggregateTypeError,
    ValidationError,
    VersionConflictError,
)
from eventfold.core.identity import UUID_V4_PATTERN, is_uuid_v4, new_id

__all__ = [
    # Errors
    "EventfoldError",
    "ConfigError",
    "ValidationError",
    "MissingFieldError",
    "UnknownAggregateTypeError",
    "PersistenceError",
    "DuplicateEventError",
    "VersionConflictError",
    # Identity
    "UUID_V4_PATTERN",
    "is_uuid_v4",
    "new_id",
]
