"""
Domain layer - ORM models, request/response schemas, enums and the mappers
between them.
"""

from domain import enums, models, schemas, mappers

__all__ = ["enums", "models", "schemas", "mappers"]
