"""EventStore implementation for event sourcing.

Events are stored one JSON file per event, grouped in one directory per
aggregate:

    <events_dir>/<aggregateType>-<aggregateId>/event-uuid-<eventId>.json

Files are created in exclusive mode and never rewritten, so a partial write
can only ever damage a single event. All file system access goes through
anyio so that every operation suspends instead of blocking the event loop.
"""

from __future__ import annotations

import builtins
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
import json
import os
import shutil
from typing import Any

import anyio
import anyio.to_thread

from eventfold.core.errors import (
    DuplicateEventError,
    MissingFieldError,
    PersistenceError,
    ValidationError,
    VersionConflictError,
)
from eventfold.core.identity import new_id
from eventfold.events.base import WRITER_FIELDS, AggregateKey, Event, utc_now_iso
from eventfold.events.validator import validate_event
from eventfold.observability.logging import get_logger

log = get_logger(__name__)

KEY_SEPARATOR = "-"
RECORD_PREFIX = "event-uuid-"
RECORD_SUFFIX = ".json"

_PATH_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep, "/") if sep)


class _AggregateLock:
    """A lock plus the number of tasks holding or waiting for it."""

    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = anyio.Lock()
        self.users = 0


async def _scandir(path: anyio.Path) -> list[anyio.Path]:
    """List a directory in name order; a missing directory lists as empty."""
    try:
        entries = [entry async for entry in path.iterdir()]
    except FileNotFoundError:
        return []
    return sorted(entries, key=lambda entry: entry.name)


class EventStore:
    """Append-only, file-backed event store partitioned by aggregate.

    The storage root is passed in explicitly; nothing is read from global
    state. The root and aggregate directories are created on first write.

    Usage:
        store = EventStore("local-events")

        event = await store.write({
            "aggregateId": page_id,
            "aggregateType": "page",
            "eventType": "PAGE_CREATED",
            "payload": {"title": "Hello", "content": "World"},
            "version": 1,
        })

        events = await store.read("page", page_id)
        keys = await store.list()
        await store.delete("page", page_id)
    """

    def __init__(self, events_dir: str | os.PathLike[str]) -> None:
        """Initialize EventStore with its storage root.

        Args:
            events_dir: Directory holding one sub-directory per aggregate.
        """
        self._root = anyio.Path(events_dir)
        self._locks: dict[AggregateKey, _AggregateLock] = {}

    @property
    def root(self) -> anyio.Path:
        """The storage root directory."""
        return self._root

    def aggregate_path(self, aggregate_type: str, aggregate_id: str) -> anyio.Path:
        """Return the directory holding an aggregate's events.

        Raises:
            ValidationError: If either key part cannot be used as a single
                directory name component.
        """
        for field, value in (("aggregateType", aggregate_type), ("aggregateId", aggregate_id)):
            if (
                not isinstance(value, str)
                or value in ("", ".", "..")
                or any(sep in value for sep in _PATH_SEPARATORS)
                or (field == "aggregateType" and KEY_SEPARATOR in value)
            ):
                raise ValidationError(
                    f"Invalid {field}: {value!r}",
                    field=field,
                    rule="invalid_key",
                    value=value,
                )
        return self._root / f"{aggregate_type}{KEY_SEPARATOR}{aggregate_id}"

    async def write(
        self,
        event: Mapping[str, Any],
        *,
        expected_version: int | None = None,
    ) -> Event:
        """Persist a new event and return it with its generated fields.

        The store assigns eventId and timestamp. The completed record is
        validated before any file system access.

        Args:
            event: Mapping with aggregateId, aggregateType, eventType,
                   payload and version (wire names).
            expected_version: If given, the highest version already stored
                   for the aggregate must equal this value (0 for a new
                   aggregate), otherwise VersionConflictError is raised.

        Returns:
            The stored Event.

        Raises:
            MissingFieldError: If a writer-supplied field is absent or empty.
            ValidationError: If the completed record is malformed.
            DuplicateEventError: If a record with the same eventId exists.
            VersionConflictError: If expected_version does not match.
            PersistenceError: If the file system operation fails.
        """
        if not isinstance(event, Mapping):
            raise ValidationError(
                "Event must be an object",
                rule="not_an_object",
                details={"type": type(event).__name__},
            )

        for field in WRITER_FIELDS:
            value = event.get(field)
            if value is None or value == "":
                raise MissingFieldError(field)

        record = {
            "eventId": new_id(),
            "aggregateId": event["aggregateId"],
            "aggregateType": event["aggregateType"],
            "eventType": event["eventType"],
            "payload": event["payload"],
            "version": event["version"],
            "timestamp": utc_now_iso(),
        }
        validate_event(record)
        directory = self.aggregate_path(record["aggregateType"], record["aggregateId"])
        stored = Event.from_record(record)

        if expected_version is None:
            await self._persist(directory, stored)
            return stored

        async with self._locked(stored.key):
            actual = await self.current_version(stored.aggregate_type, stored.aggregate_id)
            if actual != expected_version:
                log.warning(
                    "event_store.write.conflict",
                    aggregate_type=stored.aggregate_type,
                    aggregate_id=stored.aggregate_id,
                    expected=expected_version,
                    actual=actual,
                )
                raise VersionConflictError(
                    stored.aggregate_type,
                    stored.aggregate_id,
                    expected=expected_version,
                    actual=actual,
                )
            await self._persist(directory, stored)
        return stored

    @asynccontextmanager
    async def _locked(self, key: AggregateKey) -> AsyncIterator[None]:
        """Serialize conditional writes and deletes of one aggregate.

        Entries are dropped as soon as no task holds or waits for them.
        """
        entry = self._locks.get(key)
        if entry is None:
            entry = self._locks[key] = _AggregateLock()
        entry.users += 1
        try:
            async with entry.lock:
                yield
        finally:
            entry.users -= 1
            if entry.users == 0:
                del self._locks[key]

    async def _persist(self, directory: anyio.Path, event: Event) -> None:
        """Create the event file, refusing to replace an existing one."""
        path = directory / f"{RECORD_PREFIX}{event.event_id}{RECORD_SUFFIX}"
        content = json.dumps(event.to_record(), indent=2)
        try:
            await directory.mkdir(parents=True, exist_ok=True)
            async with await path.open("x", encoding="utf-8") as f:
                await f.write(content)
        except FileExistsError as e:
            raise DuplicateEventError(
                f"Event record already exists: {path.name}",
                operation="write",
                path=str(path),
                details={"event_id": event.event_id},
            ) from e
        except OSError as e:
            raise PersistenceError(
                f"Failed to write event: {e}",
                operation="write",
                path=str(path),
                details={"event_id": event.event_id, "event_type": event.event_type},
            ) from e

        log.info(
            "event_store.event.written",
            aggregate_type=event.aggregate_type,
            aggregate_id=event.aggregate_id,
            event_id=event.event_id,
            event_type=event.event_type,
            version=event.version,
        )

    async def read(self, aggregate_type: str, aggregate_id: str) -> builtins.list[Event]:
        """Read all events for an aggregate, ordered by timestamp.

        Records are enumerated in file name order and then stably sorted by
        timestamp, so equal timestamps keep a deterministic order.

        Args:
            aggregate_type: The type of aggregate (e.g., "page").
            aggregate_id: The unique identifier of the aggregate.

        Returns:
            Validated events in ascending timestamp order; an empty list if
            the aggregate has never been written.

        Raises:
            ValidationError: If a stored record is malformed.
            PersistenceError: If the file system operation fails.
        """
        directory = self.aggregate_path(aggregate_type, aggregate_id)

        try:
            entries = await _scandir(directory)
            contents = [
                (entry, await entry.read_text(encoding="utf-8"))
                for entry in entries
                if entry.name.startswith(RECORD_PREFIX) and entry.name.endswith(RECORD_SUFFIX)
            ]
        except OSError as e:
            raise PersistenceError(
                f"Failed to read events: {e}",
                operation="read",
                path=str(directory),
                details={"aggregate_type": aggregate_type, "aggregate_id": aggregate_id},
            ) from e

        events: list[Event] = []
        for entry, text in contents:
            try:
                record = json.loads(text)
            except json.JSONDecodeError as e:
                raise ValidationError(
                    f"Malformed event record: {entry.name}",
                    rule="malformed_record",
                    details={"path": str(entry)},
                ) from e
            validate_event(record)
            events.append(Event.from_record(record))

        events.sort(key=lambda event: event.occurred_at)

        log.debug(
            "event_store.aggregate.read",
            aggregate_type=aggregate_type,
            aggregate_id=aggregate_id,
            count=len(events),
        )
        return events

    async def current_version(self, aggregate_type: str, aggregate_id: str) -> int:
        """Return the highest stored version for an aggregate, or 0 if empty."""
        events = await self.read(aggregate_type, aggregate_id)
        return max((event.version for event in events), default=0)

    async def list(self) -> builtins.list[AggregateKey]:
        """List every aggregate that has a storage directory.

        Directory names are split on their first separator into type and id;
        names without a separator are skipped.

        Raises:
            PersistenceError: If the storage root cannot be listed.
        """
        keys: list[AggregateKey] = []
        try:
            for entry in await _scandir(self._root):
                if not await entry.is_dir():
                    continue
                aggregate_type, separator, aggregate_id = entry.name.partition(KEY_SEPARATOR)
                if not separator:
                    continue
                keys.append(AggregateKey(aggregate_type, aggregate_id))
        except OSError as e:
            raise PersistenceError(
                f"Failed to list aggregates: {e}",
                operation="list",
                path=str(self._root),
            ) from e
        return keys

    async def delete(self, aggregate_type: str, aggregate_id: str) -> None:
        """Remove an aggregate and all of its events.

        Deleting an aggregate that does not exist is a no-op.

        Raises:
            PersistenceError: If the directory exists but cannot be removed.
        """
        directory = self.aggregate_path(aggregate_type, aggregate_id)
        try:
            async with self._locked(AggregateKey(aggregate_type, aggregate_id)):
                await anyio.to_thread.run_sync(shutil.rmtree, os.fspath(directory))
        except FileNotFoundError:
            return
        except OSError as e:
            raise PersistenceError(
                f"Failed to delete aggregate: {e}",
                operation="delete",
                path=str(directory),
                details={"aggregate_type": aggregate_type, "aggregate_id": aggregate_id},
            ) from e

        log.info(
            "event_store.aggregate.deleted",
            aggregate_type=aggregate_type,
            aggregate_id=aggregate_id,
        )
