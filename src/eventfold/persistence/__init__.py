"""Persistence module for Eventfold - file-backed event storage."""

from eventfold.persistence.event_store import KEY_SEPARATOR, RECORD_PREFIX, EventStore

__all__ = ["EventStore", "KEY_SEPARATOR", "RECORD_PREFIX"]
