"""Pydantic Schemas — request/response models for API endpoints.

Design Decisions:
    - Separate from core/: schemas are API contracts, core types are domain records
"""
