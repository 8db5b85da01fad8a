"""Error Hierarchy — typed exceptions for category service failure modes.

Invariants:
    - Every error has a code (str) and category (ErrorCategory)
    - Startup errors are fatal; publish errors never reach the HTTP caller
    - to_error() is the "error" member of the {message, error} failure body

Design Decisions:
    - Single hierarchy with CategoryServiceError base: FastAPI global handler catches all
    - Store put failures are returned as values (PutOutcome), not raised — the route
      needs the raw AWS error payload in its 500 body
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for logging and the error payload."""
    DATABASE = "database"
    MESSAGING = "messaging"
    EXTERNAL_API = "external_api"


class CategoryServiceError(Exception):
    """Base exception for all category service errors."""

    def __init__(self, message: str, code: str, category: ErrorCategory):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category

    def to_error(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
        }


class SecretsRetrievalError(CategoryServiceError):
    """Secrets function invocation failed or returned an unusable payload."""
    def __init__(self, message: str, function_name: str):
        super().__init__(
            f"Secrets retrieval from '{function_name}' failed: {message}",
            "SECRETS_UNAVAILABLE", ErrorCategory.EXTERNAL_API,
        )
        self.function_name = function_name


class CategoryStoreError(CategoryServiceError):
    """Category store could not be used (not initialized)."""
    def __init__(self, message: str, table: str):
        super().__init__(
            f"Category store '{table}': {message}",
            "CATEGORY_STORE_ERROR", ErrorCategory.DATABASE,
        )
        self.table = table


class EventPublishError(CategoryServiceError):
    """Event could not be serialized or enqueued."""
    def __init__(self, message: str, queue: str):
        super().__init__(
            f"Publishing to '{queue}' failed: {message}",
            "EVENT_PUBLISH_FAILED", ErrorCategory.MESSAGING,
        )
        self.queue = queue
