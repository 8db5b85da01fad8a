"""Route Dependencies — hand the lifespan-owned store and publisher to handlers.

Invariants:
    - Handles live on app.state, set once by the lifespan; dependencies only read them
    - Missing store → CategoryStoreError (500 via global handler)
    - Missing publisher → a throwaway never-connected publisher, so publishes no-op and log
"""

from fastapi import Request

from category_service.config import get_settings
from category_service.core.errors import CategoryStoreError
from category_service.core.repository_protocols import CategoryStore, EventPublisher
from category_service.infrastructure.event_publisher import RabbitMQPublisher


def get_category_store(request: Request) -> CategoryStore:
    store = getattr(request.app.state, "category_store", None)
    if store is None:
        raise CategoryStoreError("store not initialized", get_settings().categories_table)
    return store


def get_event_publisher(request: Request) -> EventPublisher:
    publisher = getattr(request.app.state, "event_publisher", None)
    if publisher is None:
        settings = get_settings()
        return RabbitMQPublisher(settings.rabbitmq_url, settings.category_events_queue)
    return publisher
