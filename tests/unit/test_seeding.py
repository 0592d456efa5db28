"""Unit tests for eventfold.seeding module."""

from eventfold.core.identity import new_id
from eventfold.persistence.event_store import EventStore
from eventfold.projection.read_model import load_state
from eventfold.seeding import seed_admin, seed_page


class TestSeedAdmin:
    """Test seed_admin()."""

    async def test_creates_admin_in_empty_store(self, event_store: EventStore) -> None:
        """The first run writes USER_CREATED v1."""
        event = await seed_admin(event_store, email="admin@email.com", name="Initial Admin")

        assert event is not None
        assert event.event_type == "USER_CREATED"
        assert event.version == 1
        state = await load_state(event_store, "user", event.aggregate_id)
        assert state is not None
        assert state["email"] == "admin@email.com"
        assert state["name"] == "Initial Admin"
        assert state["role"] == "admin"
        assert state["status"] == "active"

    async def test_custom_role(self, event_store: EventStore) -> None:
        """The role can be chosen."""
        event = await seed_admin(event_store, email="a@b.c", name="A", role="owner")
        assert event is not None
        assert event.payload["role"] == "owner"

    async def test_skips_when_user_exists(self, event_store: EventStore) -> None:
        """Any existing user prevents seeding."""
        await event_store.write(
            {
                "aggregateId": new_id(),
                "aggregateType": "user",
                "eventType": "USER_CREATED",
                "payload": {"email": "someone@example.com"},
                "version": 1,
            }
        )

        assert await seed_admin(event_store, email="admin@email.com", name="Admin") is None
        users = [key for key in await event_store.list() if key.aggregate_type == "user"]
        assert len(users) == 1

    async def test_pages_do_not_count_as_users(self, event_store: EventStore) -> None:
        """Only user aggregates block seeding."""
        await seed_page(event_store, title="Hello", content="World")
        assert await seed_admin(event_store, email="admin@email.com", name="Admin") is not None


class TestSeedPage:
    """Test seed_page()."""

    async def test_created_only(self, event_store: EventStore) -> None:
        """Without an updated title only PAGE_CREATED is written."""
        page_id = await seed_page(event_store, title="Hello", content="World")

        events = await event_store.read("page", page_id)
        assert [e.event_type for e in events] == ["PAGE_CREATED"]
        assert events[0].payload == {"title": "Hello", "content": "World"}

    async def test_created_and_updated(self, event_store: EventStore) -> None:
        """An updated title adds PAGE_UPDATED v2."""
        page_id = await seed_page(
            event_store, title="Hello", content="World", updated_title="Hello v2"
        )

        state = await load_state(event_store, "page", page_id)
        assert state is not None
        assert state["title"] == "Hello v2"
        assert state["content"] == "World"
        assert state["version"] == 2
