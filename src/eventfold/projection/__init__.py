"""Projection engine and reducers for rebuilding aggregate state."""

from eventfold.projection.engine import Reducer, State, project
from eventfold.projection.read_model import load_all_states, load_state
from eventfold.projection.reducers import (
    PAGE_CREATED,
    PAGE_UPDATED,
    REDUCERS,
    USER_CREATED,
    USER_UPDATED,
    get_reducer,
    page_reducer,
    user_reducer,
)

__all__ = [
    "Reducer",
    "State",
    "project",
    "load_state",
    "load_all_states",
    "REDUCERS",
    "get_reducer",
    "page_reducer",
    "user_reducer",
    "PAGE_CREATED",
    "PAGE_UPDATED",
    "USER_CREATED",
    "USER_UPDATED",
]
