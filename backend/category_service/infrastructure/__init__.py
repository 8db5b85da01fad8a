"""Infrastructure Layer — AWS and RabbitMQ clients plus cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Boto and AMQP exceptions never escape as raw library errors
"""
