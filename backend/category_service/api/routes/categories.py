"""Categories — POST /categories creates a category and announces it.

Invariants:
    - 201 with {name, nameCategory} once the store write succeeds, whatever happens to the publish
    - 500 {message, error} on store failure; nothing published
    - 500 {message, error} from the outer guard on any unexpected exception
    - The publish runs as a background task after the response is produced
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, status

from category_service.api.dependencies import get_category_store, get_event_publisher
from category_service.api.error_handlers import failure_response
from category_service.core.repository_protocols import CategoryStore, EventPublisher
from category_service.schemas.category import (
    CategoryCreate, CategoryErrorResponse, CategoryResponse,
)
from category_service.services.create_category import create_category

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/categories", tags=["categories"])


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new category",
    description="Create a new category by name",
    responses={
        status.HTTP_201_CREATED: {"description": "Category created"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {
            "model": CategoryErrorResponse,
            "description": "Error creating category",
        },
    },
)
async def post_category(
    background_tasks: BackgroundTasks,
    body: CategoryCreate | None = None,
    store: CategoryStore = Depends(get_category_store),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    """Create a category, then publish CategoryCreated."""
    payload = body.model_dump() if body else None
    name = body.name if body else None
    logger.info(
        f"Received request to create category: {payload}",
        extra={"category_name": name},
    )
    try:
        result = await create_category(
            name, store, publisher, schedule=background_tasks.add_task,
        )
    except Exception as e:
        logger.error(f"Error creating category: {e}", exc_info=True)
        return failure_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Error creating category", str(e),
        )

    if not result.ok:
        return failure_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Error saving category to DynamoDB",
            result.error,
        )
    return result.record
