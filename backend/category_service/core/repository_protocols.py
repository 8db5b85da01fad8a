"""Boundary Protocols — contracts between the request handler and the shell.

Invariants:
    - Services depend on these Protocols, never on the DynamoDB or AMQP classes
    - CategoryStore.put never raises for store failures; it returns a PutOutcome
    - EventPublisher.publish never raises

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class PutOutcome:
    """Result of a store write — ok, or the store's error payload."""
    ok: bool
    error: dict | None = None

    @classmethod
    def success(cls) -> "PutOutcome":
        return cls(ok=True)

    @classmethod
    def failure(cls, error: dict) -> "PutOutcome":
        return cls(ok=False, error=error)


class CategoryStore(Protocol):
    """Contract for category persistence — upsert only."""
    async def put(self, record: dict) -> PutOutcome: ...


class EventPublisher(Protocol):
    """Contract for domain event publication — fire-and-forget."""
    @property
    def is_connected(self) -> bool: ...

    async def publish(self, event_type: str, data: Any) -> None: ...
