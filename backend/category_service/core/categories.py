"""Category Records & Events — pure builders for the stored record and the domain event.

Invariants:
    - nameCategory == name at creation time (both fields always written)
    - The event is built from the stored record, never from the raw request body
    - No validation of name: None and non-string values pass through unchanged

Design Decisions:
    - Plain dicts over models: the record goes straight to DynamoDB put_item and
      the event straight to json.dumps, both want dicts
    - encode_event lives here (not in the publisher) so message format is testable without AMQP
"""

import json
from typing import Any

CATEGORY_CREATED = "CategoryCreated"


def build_category_record(name: Any) -> dict:
    """Persistence record for a new category."""
    return {"name": name, "nameCategory": name}


def build_category_created_event(record: dict) -> dict:
    """CategoryCreated event embedding the stored record's fields."""
    return build_event(
        CATEGORY_CREATED,
        {"name": record["name"], "nameCategory": record["nameCategory"]},
    )


def build_event(event_type: str, data: Any) -> dict:
    return {"eventType": event_type, "data": data}


def encode_event(event: dict) -> bytes:
    """Serialize an event to the queue wire format (UTF-8 JSON).

    Raises TypeError/ValueError when data is not JSON-serializable.
    """
    return json.dumps(event, ensure_ascii=False).encode("utf-8")
