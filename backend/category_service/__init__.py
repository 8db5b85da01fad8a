"""Category Service Package — category creation with DynamoDB persistence and RabbitMQ events.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
