"""Global error handlers — every failure body is {message, error}.

Tests cover:
    - CategoryServiceError on /categories → 500 "Error creating category"
    - Unhandled exception → 500, details kept out of the body
    - Other paths get the generic message
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from category_service.api.error_handlers import register_error_handlers
from category_service.core.errors import CategoryStoreError


def _make_app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.post("/categories")
    async def store_missing():
        raise CategoryStoreError("store not initialized", "Categories_gr8")

    @app.get("/categories/")
    async def crash_with_slash():
        raise RuntimeError("secret internals")

    @app.get("/other")
    async def crash():
        raise RuntimeError("secret internals")

    return app


@pytest.fixture
async def handler_client():
    transport = ASGITransport(app=_make_app(), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def test_service_error_on_categories(handler_client):
    res = await handler_client.post("/categories")

    assert res.status_code == 500
    assert res.json() == {
        "message": "Error creating category",
        "error": {
            "code": "CATEGORY_STORE_ERROR",
            "message": "Category store 'Categories_gr8': store not initialized",
            "category": "database",
        },
    }


async def test_unhandled_error_hides_details(handler_client):
    res = await handler_client.get("/categories/")

    assert res.status_code == 500
    assert res.json() == {
        "message": "Error creating category",
        "error": "An unexpected error occurred",
    }
    assert "secret internals" not in res.text


async def test_unhandled_error_elsewhere_uses_generic_message(handler_client):
    res = await handler_client.get("/other")

    assert res.status_code == 500
    assert res.json()["message"] == "Internal server error"
