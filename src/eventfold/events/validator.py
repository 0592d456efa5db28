"""Structural validation of event records.

validate_event() is used on records read back from storage, on freshly
completed records before they are written, and on every event fed to the
projection engine. Checks run in a fixed order and the first violation is
raised; nothing is collected or repaired.
"""

from collections.abc import Mapping
from typing import Any

from eventfold.core.errors import MissingFieldError, ValidationError
from eventfold.core.identity import is_uuid_v4
from eventfold.events.base import EVENT_FIELDS, Event, parse_timestamp


def validate_event(event: Any) -> bool:
    """Verify the structural invariants of a single event record.

    Checks, in order:
        1. The record is a mapping (or an Event model).
        2. All seven fields are present and non-null.
        3. eventId and aggregateId are UUID v4 strings.
        4. aggregateType and eventType are strings.
        5. version is a number >= 1.
        6. timestamp parses as an ISO-8601 date/time.
        7. payload is a mapping.

    Args:
        event: Event model or raw record keyed by wire names.

    Returns:
        True if every check passes.

    Raises:
        MissingFieldError: If a required field is absent or None.
        ValidationError: If any other check fails.
    """
    if isinstance(event, Event):
        event = event.to_record()

    if not isinstance(event, Mapping):
        raise ValidationError(
            "Event must be an object",
            rule="not_an_object",
            details={"type": type(event).__name__},
        )

    for field in EVENT_FIELDS:
        if event.get(field) is None:
            raise MissingFieldError(field)

    for field in ("eventId", "aggregateId"):
        value = event[field]
        if not is_uuid_v4(value):
            raise ValidationError(
                f"Invalid {field} format (expected UUIDv4): {value}",
                field=field,
                rule="invalid_uuid",
                value=value,
            )

    for field in ("aggregateType", "eventType"):
        value = event[field]
        if not isinstance(value, str):
            raise ValidationError(
                f"Invalid {field} (expected a string): {value!r}",
                field=field,
                rule="invalid_type",
                value=value,
            )

    version = event["version"]
    if not _is_valid_version(version):
        raise ValidationError(
            f"Invalid version: {version}",
            field="version",
            rule="invalid_version",
            value=version,
        )

    timestamp = event["timestamp"]
    if not _is_valid_timestamp(timestamp):
        raise ValidationError(
            f"Invalid timestamp: {timestamp}",
            field="timestamp",
            rule="invalid_timestamp",
            value=timestamp,
        )

    payload = event["payload"]
    if not isinstance(payload, Mapping):
        raise ValidationError(
            "Invalid payload (expected an object)",
            field="payload",
            rule="invalid_payload",
            value=payload,
        )

    return True


def _is_valid_version(value: Any) -> bool:
    # bool is an int subclass but never a version
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, float) and not value.is_integer():
        return False
    return value >= 1


def _is_valid_timestamp(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        parse_timestamp(value)
    except ValueError:
        return False
    return True
