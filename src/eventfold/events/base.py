"""Event record definition for event sourcing.

Every fact stored by Eventfold is an Event. Events are immutable (frozen
Pydantic models) and are persisted using camelCase wire names so that each
record on disk holds exactly seven keys:

    eventId, aggregateId, aggregateType, eventType, payload, version, timestamp
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from eventfold.core.errors import ValidationError

# Wire names in validation order.
EVENT_FIELDS: tuple[str, ...] = (
    "eventId",
    "aggregateId",
    "aggregateType",
    "eventType",
    "payload",
    "version",
    "timestamp",
)

# Fields a writer must supply; eventId and timestamp are assigned by the store.
WRITER_FIELDS: tuple[str, ...] = (
    "aggregateId",
    "aggregateType",
    "eventType",
    "payload",
    "version",
)


class AggregateKey(NamedTuple):
    """Two-part key identifying one aggregate's event bucket."""

    aggregate_type: str
    aggregate_id: str

    def __str__(self) -> str:
        return f"{self.aggregate_type}-{self.aggregate_id}"


class Event(BaseModel):
    """An immutable fact about something that happened to one aggregate.

    Attributes:
        event_id: UUID v4 assigned by the store at write time.
        aggregate_id: UUID v4 of the owning aggregate.
        aggregate_type: Tag partitioning the namespace (e.g. "page", "user").
        event_type: Kind of state transition (e.g. "PAGE_CREATED").
        payload: Reducer-owned mapping of field names to values.
        version: Positive integer assigned by the writer.
        timestamp: ISO-8601 string assigned by the store; the read ordering key.

    Example:
        event = Event.from_record({
            "eventId": "0b0f5b8e-2c1a-4a47-9a57-1f1f6c1c9a10",
            "aggregateId": "da64da60-bd3f-4c29-816e-290f2e650ada",
            "aggregateType": "page",
            "eventType": "PAGE_CREATED",
            "payload": {"title": "Hello"},
            "version": 1,
            "timestamp": "2026-01-01T00:00:00+00:00",
        })
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    event_id: str
    aggregate_id: str
    aggregate_type: str
    event_type: str
    payload: dict[str, Any]
    version: int
    timestamp: str

    @property
    def key(self) -> AggregateKey:
        """The (aggregate_type, aggregate_id) pair this event belongs to."""
        return AggregateKey(self.aggregate_type, self.aggregate_id)

    @property
    def occurred_at(self) -> datetime:
        """Parsed timestamp; naive values are taken to be UTC."""
        return parse_timestamp(self.timestamp)

    def to_record(self) -> dict[str, Any]:
        """Convert the event to its on-disk dictionary using wire names."""
        return self.model_dump(by_alias=True)

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Event:
        """Create an event from an on-disk dictionary.

        The record is expected to have passed validate_event already.

        Raises:
            ValidationError: If the record still cannot be built into an Event.
        """
        try:
            return cls.model_validate(record)
        except PydanticValidationError as e:
            first = e.errors()[0]
            raise ValidationError(
                f"Invalid event record: {first['msg']}",
                field=".".join(str(part) for part in first["loc"]) or None,
                rule="invalid_record",
                details={"errors": e.error_count()},
            ) from e


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(UTC).isoformat()


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, treating naive values as UTC.

    Raises:
        ValueError: If the string is not a valid ISO-8601 date/time.
    """
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
