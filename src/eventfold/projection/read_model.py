"""Read-side helpers composing EventStore.read() with project().

These are the queries the HTTP layer and the CLI ask: "what is the current
state of aggregate X" and "what is the current state of every X".
"""

from __future__ import annotations

from eventfold.persistence.event_store import EventStore
from eventfold.projection.engine import Reducer, State, project
from eventfold.projection.reducers import get_reducer


async def load_state(
    store: EventStore,
    aggregate_type: str,
    aggregate_id: str,
    reducer: Reducer | None = None,
) -> State | None:
    """Rebuild the current state of one aggregate.

    Args:
        store: Event store to read from.
        aggregate_type: Aggregate type tag.
        aggregate_id: Aggregate identifier.
        reducer: Reducer to fold with. Defaults to the one registered
                 for aggregate_type.

    Returns:
        The projected state, or None if the aggregate has no events.
    """
    if reducer is None:
        reducer = get_reducer(aggregate_type)

    events = await store.read(aggregate_type, aggregate_id)
    if not events:
        return None
    return project(events, reducer)


async def load_all_states(
    store: EventStore,
    aggregate_type: str,
    reducer: Reducer | None = None,
) -> dict[str, State]:
    """Rebuild the current state of every aggregate of one type.

    Returns:
        Mapping of aggregate id to projected state, in listing order.
        Aggregates whose directory holds no events are left out.
    """
    if reducer is None:
        reducer = get_reducer(aggregate_type)

    states: dict[str, State] = {}
    for key in await store.list():
        if key.aggregate_type != aggregate_type:
            continue
        state = await load_state(store, key.aggregate_type, key.aggregate_id, reducer)
        if state is not None:
            states[key.aggregate_id] = state
    return states
