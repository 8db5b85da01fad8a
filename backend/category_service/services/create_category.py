"""Create Category — store write, then CategoryCreated publication on success.

Invariants:
    - Exactly one store write per call; at most one publish
    - Store write completes before the publish is scheduled
    - Store failure → no publish, error payload returned to the caller
    - Publish outcome never changes the result (publisher logs its own failures)

Design Decisions:
    - schedule hook: routes pass BackgroundTasks.add_task so the publish runs after
      the response is produced; without it the publish is awaited inline
    - No rollback: a failed publish after a successful write leaves store and queue diverged
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from category_service.core.categories import (
    build_category_created_event, build_category_record,
)
from category_service.core.repository_protocols import CategoryStore, EventPublisher

logger = logging.getLogger(__name__)

Scheduler = Callable[..., None]


@dataclass
class CreateCategoryResult:
    record: dict
    error: dict | None = None
    event: dict | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def create_category(
    name: Any,
    store: CategoryStore,
    publisher: EventPublisher,
    schedule: Scheduler | None = None,
) -> CreateCategoryResult:
    """Persist a category and announce it."""
    record = build_category_record(name)
    outcome = await store.put(record)
    if not outcome.ok:
        logger.warning(
            "Category not stored, CategoryCreated not published",
            extra={"category_name": name},
        )
        return CreateCategoryResult(record=record, error=outcome.error or {})

    event = build_category_created_event(record)
    await _dispatch(publisher.publish, event, schedule)
    return CreateCategoryResult(record=record, event=event)


async def _dispatch(
    publish: Callable[[str, Any], Awaitable[None]],
    event: dict,
    schedule: Scheduler | None,
) -> None:
    if schedule is not None:
        schedule(publish, event["eventType"], event["data"])
        return
    await publish(event["eventType"], event["data"])
