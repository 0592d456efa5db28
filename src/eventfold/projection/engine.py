"""Projection engine - folds an event sequence into current state.

The engine is deliberately generic: it knows nothing about pages or users.
State transitions belong to reducers, functions of shape
``(state, event) -> new_state`` supplied by the caller. Replaying the same
events through the same reducer always yields the same state, because the
engine validates every event up front and reducers are required to be pure.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from eventfold.events.base import Event
from eventfold.events.validator import validate_event
from eventfold.observability.logging import get_logger

log = get_logger(__name__)

State = dict[str, Any]
Reducer = Callable[[State, Event], State]


def project(
    events: Iterable[Event | Mapping[str, Any]],
    reducer: Reducer,
    initial_state: Mapping[str, Any] | None = None,
) -> State:
    """Fold events into state.

    Args:
        events: Events in replay order (EventStore.read() already sorts them).
                Raw records keyed by wire names are accepted as well.
        reducer: Pure function applying one event to a state.
        initial_state: Seed state; copied, never mutated. Defaults to {}.

    Returns:
        The state after the last event.

    Raises:
        ValidationError: If any event is malformed. No partial state is
            returned in that case.
    """
    state: State = dict(initial_state or {})
    count = 0

    for event in events:
        validate_event(event)
        if not isinstance(event, Event):
            event = Event.from_record(dict(event))
        state = reducer(state, event)
        count += 1

    log.debug("projection.completed", events=count)
    return state
