"""Category Service API — FastAPI application entry point.

Invariants:
    - Secrets fetched before anything else; failure aborts startup (no partial start, no retry)
    - Broker connection attempted before traffic; failure leaves publishes as logged no-ops
    - Store and publisher owned by app.state, created in the lifespan
    - Routes registered explicitly (no auto-discovery)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Swagger UI served at settings.docs_url (/api-docs), OpenAPI metadata set on the app
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from category_service.api.error_handlers import register_error_handlers
from category_service.api.routes import categories, health
from category_service.config import get_settings
from category_service.core.errors import SecretsRetrievalError
from category_service.infrastructure.category_store import DynamoCategoryStore
from category_service.infrastructure.event_publisher import RabbitMQPublisher
from category_service.infrastructure.observability import setup_logging
from category_service.infrastructure.secrets import fetch_store_secrets

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    try:
        credentials = await fetch_store_secrets(
            settings.secrets_function_name, settings.aws_region,
        )
    except SecretsRetrievalError as e:
        logger.critical(f"Error starting service: {e.message}", extra={"error_code": e.code})
        raise

    app.state.category_store = DynamoCategoryStore(
        settings.categories_table, settings.aws_region, credentials,
    )
    publisher = RabbitMQPublisher(settings.rabbitmq_url, settings.category_events_queue)
    await publisher.connect()
    app.state.event_publisher = publisher

    logger.info(f"Category service listening at http://localhost:{settings.port}")
    yield
    await publisher.close()
    logger.info("Category service shutting down")


settings = get_settings()
app = FastAPI(
    title="Category Service API",
    version="1.0.0",
    description="API for managing categories",
    docs_url=settings.docs_url,
    redoc_url=None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(categories.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "category_service.main:app", host=settings.host, port=settings.port,
    )


if __name__ == "__main__":
    run()
