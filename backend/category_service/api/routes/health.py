"""Health & Readiness — root liveness text and broker readiness probe.

Invariants:
    - GET / always returns 200 "Category Service Running", independent of store or broker
    - GET /health/ready returns 503 while the broker channel is missing (informational only)
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse

from category_service.api.dependencies import get_event_publisher
from category_service.core.repository_protocols import EventPublisher

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])

SERVICE_RUNNING = "Category Service Running"


@router.get("/", response_class=PlainTextResponse)
async def root():
    """Liveness probe. Returns 200 if the process is up."""
    return SERVICE_RUNNING


@router.get("/health/ready")
async def readiness_check(publisher: EventPublisher = Depends(get_event_publisher)):
    """Readiness probe — reports broker channel state."""
    if not publisher.is_connected:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "degraded", "reason": "broker_unavailable"},
        )
    return {"status": "ready", "checks": {"broker": "connected"}}
