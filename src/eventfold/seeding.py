"""Bootstrap data for a fresh event store.

seed_admin() creates the first user only while no user aggregate exists, so
it is safe to run on every start. seed_page() writes a created/updated page
pair, handy for checking a deployment end to end.
"""

from __future__ import annotations

from eventfold.core.identity import new_id
from eventfold.events.base import Event
from eventfold.observability.logging import get_logger
from eventfold.persistence.event_store import EventStore
from eventfold.projection.reducers import PAGE_CREATED, PAGE_UPDATED, USER_CREATED

log = get_logger(__name__)


async def seed_admin(
    store: EventStore,
    *,
    email: str,
    name: str,
    role: str = "admin",
) -> Event | None:
    """Create the initial admin user unless any user already exists.

    Returns:
        The USER_CREATED event, or None if seeding was skipped.
    """
    aggregates = await store.list()
    if any(key.aggregate_type == "user" for key in aggregates):
        log.info("seed.admin.skipped", reason="users_exist")
        return None

    event = await store.write(
        {
            "aggregateId": new_id(),
            "aggregateType": "user",
            "eventType": USER_CREATED,
            "version": 1,
            "payload": {
                "email": email,
                "name": name,
                "role": role,
                "status": "active",
            },
        },
        expected_version=0,
    )
    log.info("seed.admin.created", aggregate_id=event.aggregate_id, email=email)
    return event


async def seed_page(
    store: EventStore,
    *,
    title: str,
    content: str,
    updated_title: str | None = None,
) -> str:
    """Write PAGE_CREATED (and optionally PAGE_UPDATED) for a new page.

    Returns:
        The new page's aggregate id.
    """
    aggregate_id = new_id()
    await store.write(
        {
            "aggregateId": aggregate_id,
            "aggregateType": "page",
            "eventType": PAGE_CREATED,
            "version": 1,
            "payload": {"title": title, "content": content},
        },
        expected_version=0,
    )
    if updated_title is not None:
        await store.write(
            {
                "aggregateId": aggregate_id,
                "aggregateType": "page",
                "eventType": PAGE_UPDATED,
                "version": 2,
                "payload": {"title": updated_title},
            },
            expected_version=1,
        )
    return aggregate_id
