"""Shared fixtures for Eventfold tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from eventfold.core.identity import new_id
from eventfold.persistence.event_store import EventStore


@pytest.fixture
def events_dir(tmp_path: Path) -> Path:
    """Storage root inside the test's temporary directory."""
    return tmp_path / "local-events"


@pytest.fixture
def event_store(events_dir: Path) -> EventStore:
    """EventStore rooted at a fresh temporary directory."""
    return EventStore(events_dir)


@pytest.fixture
def page_id() -> str:
    """A fresh page aggregate id."""
    return new_id()


@pytest.fixture
def valid_record() -> dict[str, Any]:
    """A complete, valid event record keyed by wire names."""
    return {
        "eventId": "0b0f5b8e-2c1a-4a47-9a57-1f1f6c1c9a10",
        "aggregateId": "da64da60-bd3f-4c29-816e-290f2e650ada",
        "aggregateType": "page",
        "eventType": "PAGE_CREATED",
        "payload": {"title": "Hello", "content": "World"},
        "version": 1,
        "timestamp": "2026-01-01T00:00:00+00:00",
    }
