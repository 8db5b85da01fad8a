"""RabbitMQ Event Publisher — one shared AMQP channel, fire-and-forget publish.

Invariants:
    - connect() never raises: a failed connection leaves the publisher disconnected
    - publish() never raises: not-connected, serialization and enqueue errors are logged
    - Messages go to the default exchange, routed to one durable queue, delivery_mode=PERSISTENT
    - Publisher confirms disabled: publish never waits on a broker ack

Design Decisions:
    - Explicitly owned handle built in the lifespan and injected into routes
      (no module-level channel)
    - No lock around the channel: aio-pika serializes frames per channel, ordering
      between concurrent requests is not guaranteed
"""

import logging
from typing import Any

import aio_pika
from aio_pika.abc import AbstractChannel, AbstractConnection

from category_service.core.categories import build_event, encode_event
from category_service.core.errors import EventPublishError

logger = logging.getLogger(__name__)


class RabbitMQPublisher:
    """Publishes domain events to a durable RabbitMQ queue."""

    def __init__(self, url: str, queue_name: str):
        self.url = url
        self.queue_name = queue_name
        self._connection: AbstractConnection | None = None
        self._channel: AbstractChannel | None = None

    @property
    def is_connected(self) -> bool:
        return self._channel is not None

    async def connect(self) -> bool:
        """Open connection + channel and declare the durable queue."""
        try:
            connection = await aio_pika.connect_robust(self.url)
            channel = await connection.channel(publisher_confirms=False)
            await channel.declare_queue(self.queue_name, durable=True)
        except Exception as e:
            logger.error(
                f"Error connecting to RabbitMQ: {e}",
                extra={"queue": self.queue_name},
            )
            return False
        self._connection = connection
        self._channel = channel
        logger.info("Connected to RabbitMQ", extra={"queue": self.queue_name})
        return True

    async def publish(self, event_type: str, data: Any) -> None:
        """Enqueue {eventType, data} as a persistent message. Never raises."""
        if self._channel is None:
            logger.error(
                "Channel is not initialized",
                extra={"queue": self.queue_name, "event_type": event_type},
            )
            return

        event = build_event(event_type, data)
        try:
            await self._send(event)
        except EventPublishError as e:
            logger.error(
                f"Error publishing event to RabbitMQ: {e.message}",
                extra={"event_type": event_type, "error_code": e.code},
            )
            return
        except Exception as e:
            logger.error(
                f"Error publishing event to RabbitMQ: {e}",
                extra={"event_type": event_type, "queue": self.queue_name},
                exc_info=True,
            )
            return
        logger.info(
            f"Event published to RabbitMQ: {event}",
            extra={"event_type": event_type, "queue": self.queue_name},
        )

    async def _send(self, event: dict) -> None:
        try:
            body = encode_event(event)
        except (TypeError, ValueError) as e:
            raise EventPublishError(f"unserializable event: {e}", self.queue_name) from e
        message = aio_pika.Message(
            body=body,
            content_type="application/json",
            delivery_mode=aio_pika.DeliveryMode.PERSISTENT,
        )
        await self._channel.default_exchange.publish(
            message, routing_key=self.queue_name,
        )

    async def close(self) -> None:
        """Close the connection; safe when never connected."""
        connection, self._connection, self._channel = self._connection, None, None
        if connection is None:
            return
        try:
            await connection.close()
        except Exception as e:
            logger.warning(f"Error closing RabbitMQ connection: {e}")
