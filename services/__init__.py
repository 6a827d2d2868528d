"""Services package - Business logic layer"""

from services.session_service import SessionService
from services.category_service import CategoryService
from services.document_service import DocumentService
from services.asset_service import AssetService
from services.dashboard_service import DashboardService
from services.food_service import FoodService

__all__ = [
    "SessionService",
    "CategoryService",
    "DocumentService",
    "AssetService",
    "DashboardService",
    "FoodService",
]
