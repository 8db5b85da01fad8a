"""Category Schemas — request/response models for POST /categories.

Invariants:
    - CategoryCreate performs no validation: any JSON value (or none) for name is accepted
    - Extra keys are kept so the full body can be logged

Design Decisions:
    - name typed Any: type, length and uniqueness checks are out of scope for this service
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CategoryCreate(BaseModel):
    """Category creation body."""
    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={"example": {"name": "Electronics"}},
    )

    name: Any = Field(None, description="Category name")


class CategoryResponse(BaseModel):
    """Created category as stored."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {"name": "Electronics", "nameCategory": "Electronics"},
        },
    )

    name: Any = None
    name_category: Any = Field(None, alias="nameCategory")


class CategoryErrorResponse(BaseModel):
    """Store or handler failure."""
    message: str
    error: Any = None
