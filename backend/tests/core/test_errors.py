"""Tests for the error hierarchy — codes, categories, error payload."""

from category_service.core.errors import (
    CategoryServiceError,
    CategoryStoreError,
    ErrorCategory,
    EventPublishError,
    SecretsRetrievalError,
)


def test_secrets_error_names_function():
    err = SecretsRetrievalError("boom", "fetchSecretsFunction_gr8")
    assert isinstance(err, CategoryServiceError)
    assert err.code == "SECRETS_UNAVAILABLE"
    assert err.category == ErrorCategory.EXTERNAL_API
    assert "fetchSecretsFunction_gr8" in err.message
    assert err.function_name == "fetchSecretsFunction_gr8"


def test_store_error_payload():
    err = CategoryStoreError("store not initialized", "Categories_gr8")
    assert err.to_error() == {
        "code": "CATEGORY_STORE_ERROR",
        "message": "Category store 'Categories_gr8': store not initialized",
        "category": "database",
    }


def test_publish_error_keeps_queue():
    err = EventPublishError("nope", "category-events")
    assert err.category == ErrorCategory.MESSAGING
    assert err.queue == "category-events"
    assert str(err) == "Publishing to 'category-events' failed: nope"
