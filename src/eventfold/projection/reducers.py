"""Reducers for the aggregate types known to Eventfold.

Each reducer returns a new dict and leaves its input untouched. Event types a
reducer does not recognise return the state unchanged, so histories that
contain newer event kinds still replay.
"""

from typing import Any

from eventfold.core.errors import UnknownAggregateTypeError
from eventfold.events.base import Event
from eventfold.projection.engine import Reducer, State

PAGE_CREATED = "PAGE_CREATED"
PAGE_UPDATED = "PAGE_UPDATED"
USER_CREATED = "USER_CREATED"
USER_UPDATED = "USER_UPDATED"

_PAGE_FIELDS = ("title", "content")
_USER_FIELDS = ("email", "name", "role", "status")

DEFAULT_USER_ROLE = "user"
DEFAULT_USER_STATUS = "active"


def _coalesce(payload: dict[str, Any], state: State, fields: tuple[str, ...]) -> State:
    """Take each field from the payload unless it is absent or None."""
    return {
        field: payload[field] if payload.get(field) is not None else state.get(field)
        for field in fields
    }


def _default(value: Any, fallback: Any) -> Any:
    return fallback if value is None else value


def page_reducer(state: State, event: Event) -> State:
    """Apply a page event to page state."""
    payload = event.payload

    if event.event_type == PAGE_CREATED:
        return {
            **state,
            "id": event.aggregate_id,
            "title": payload.get("title"),
            "content": payload.get("content"),
            "createdAt": event.timestamp,
            "updatedAt": event.timestamp,
            "version": event.version,
        }

    if event.event_type == PAGE_UPDATED:
        return {
            **state,
            **_coalesce(payload, state, _PAGE_FIELDS),
            "updatedAt": event.timestamp,
            "version": event.version,
        }

    return state


def user_reducer(state: State, event: Event) -> State:
    """Apply a user event to user state.

    USER_CREATED defaults role to "user" and status to "active" when the
    payload leaves them out or sets them to null.
    """
    payload = event.payload

    if event.event_type == USER_CREATED:
        return {
            **state,
            "id": event.aggregate_id,
            "email": payload.get("email"),
            "name": payload.get("name"),
            "role": _default(payload.get("role"), DEFAULT_USER_ROLE),
            "status": _default(payload.get("status"), DEFAULT_USER_STATUS),
            "createdAt": event.timestamp,
            "updatedAt": event.timestamp,
            "version": event.version,
        }

    if event.event_type == USER_UPDATED:
        return {
            **state,
            **_coalesce(payload, state, _USER_FIELDS),
            "updatedAt": event.timestamp,
            "version": event.version,
        }

    return state


REDUCERS: dict[str, Reducer] = {
    "page": page_reducer,
    "user": user_reducer,
}


def get_reducer(aggregate_type: str) -> Reducer:
    """Return the reducer registered for an aggregate type.

    Raises:
        UnknownAggregateTypeError: If no reducer is registered.
    """
    try:
        return REDUCERS[aggregate_type]
    except KeyError:
        raise UnknownAggregateTypeError(aggregate_type) from None
