"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.user_repository import UserRepository, SessionRepository
from repositories.category_repository import (
    CategoryRepository,
    DocumentTypeRepository,
)
from repositories.document_repository import DocumentRepository
from repositories.asset_repository import AssetRepository
from repositories.dashboard_repository import DashboardRepository
from repositories.food_repository import FoodItemRepository, FoodTransactionRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "SessionRepository",
    "CategoryRepository",
    "DocumentTypeRepository",
    "DocumentRepository",
    "AssetRepository",
    "DashboardRepository",
    "FoodItemRepository",
    "FoodTransactionRepository",
]
