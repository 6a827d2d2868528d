"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
    check_database,
    retry_transient,
)
from domain.models.user import AppUser, UserSession
from domain.models.finance import Category, DocumentType, Document, Asset
from domain.models.food import FoodItem, FoodTransaction

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    "check_database",
    "retry_transient",
    # User models
    "AppUser",
    "UserSession",
    # Finance models
    "Category",
    "DocumentType",
    "Document",
    "Asset",
    # Food models
    "FoodItem",
    "FoodTransaction",
]
