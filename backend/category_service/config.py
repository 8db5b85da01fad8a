"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Store credentials never live here; they come from the secrets function at startup
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults match the deployed environment so the service runs with no .env at all
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # HTTP
    host: str = "0.0.0.0"
    port: int = 8086
    docs_url: str = "/api-docs"
    cors_origins: list[str] = ["*"]

    # AWS
    aws_region: str = "us-east-2"
    secrets_function_name: str = "fetchSecretsFunction_gr8"
    categories_table: str = "Categories_gr8"

    # RabbitMQ
    rabbitmq_url: str = "amqp://3.136.72.14:5672/"
    category_events_queue: str = "category-events"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
