"""Unit tests for eventfold.projection.engine module."""

from typing import Any

import pytest

from eventfold.core.errors import MissingFieldError, ValidationError
from eventfold.events.base import Event
from eventfold.projection.engine import State, project


def counting_reducer(state: State, event: Event) -> State:
    """Count events and remember the last version seen."""
    return {**state, "count": state.get("count", 0) + 1, "last": event.version}


@pytest.fixture
def records(valid_record: dict[str, Any]) -> list[dict[str, Any]]:
    """Three consecutive records for one aggregate."""
    return [
        {**valid_record, "version": v, "timestamp": f"2026-01-0{v}T00:00:00+00:00"}
        for v in (1, 2, 3)
    ]


class TestProject:
    """Test project()."""

    def test_empty_events_returns_initial_state(self) -> None:
        """No events means the initial state, or {}."""
        assert project([], counting_reducer) == {}
        assert project([], counting_reducer, {"seed": True}) == {"seed": True}

    def test_folds_in_order(self, records: list[dict[str, Any]]) -> None:
        """The reducer sees every event once, in sequence."""
        events = [Event.from_record(r) for r in records]
        assert project(events, counting_reducer) == {"count": 3, "last": 3}

    def test_accepts_raw_records(self, records: list[dict[str, Any]]) -> None:
        """Wire-format mappings are converted to events."""
        seen: list[Any] = []

        def recorder(state: State, event: Event) -> State:
            seen.append(event)
            return state

        project(records, recorder)
        assert all(isinstance(e, Event) for e in seen)

    def test_is_deterministic(self, records: list[dict[str, Any]]) -> None:
        """Replaying the same events yields equal states."""
        events = [Event.from_record(r) for r in records]
        assert project(events, counting_reducer) == project(events, counting_reducer)

    def test_initial_state_is_not_mutated(self, records: list[dict[str, Any]]) -> None:
        """The seed mapping is copied."""
        initial = {"count": 10}

        def mutating(state: State, event: Event) -> State:
            state["count"] += 1
            return state

        assert project(records, mutating, initial) == {"count": 13}
        assert initial == {"count": 10}

    def test_invalid_event_aborts(self, records: list[dict[str, Any]]) -> None:
        """A malformed event raises; no partial state is returned."""
        records[1] = {**records[1], "version": 0}
        calls: list[int] = []

        def tracking(state: State, event: Event) -> State:
            calls.append(event.version)
            return state

        with pytest.raises(ValidationError) as exc_info:
            project(records, tracking)
        assert exc_info.value.rule == "invalid_version"
        assert calls == [1]

    def test_non_string_event_type_aborts(self, records: list[dict[str, Any]]) -> None:
        """A numeric eventType is a typed validation failure."""
        records[0] = {**records[0], "eventType": 7}

        with pytest.raises(ValidationError) as exc_info:
            project(records, counting_reducer)
        assert exc_info.value.rule == "invalid_type"

    def test_missing_field_aborts(self) -> None:
        """{broken: 'event'} fails as a missing eventId."""
        with pytest.raises(MissingFieldError) as exc_info:
            project([{"broken": "event"}], counting_reducer)
        assert exc_info.value.field == "eventId"

    def test_reducer_errors_propagate(self, records: list[dict[str, Any]]) -> None:
        """Exceptions from the reducer are not swallowed."""

        def failing(state: State, event: Event) -> State:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            project(records, failing)
