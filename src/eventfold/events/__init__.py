"""Event records and their validation."""

from eventfold.events.base import (
    EVENT_FIELDS,
    WRITER_FIELDS,
    AggregateKey,
    Event,
    parse_timestamp,
    utc_now_iso,
)
from eventfold.events.validator import validate_event

__all__ = [
    "EVENT_FIELDS",
    "WRITER_FIELDS",
    "AggregateKey",
    "Event",
    "parse_timestamp",
    "utc_now_iso",
    "validate_event",
]
