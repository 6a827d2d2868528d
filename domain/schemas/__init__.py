"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.auth_schemas import LoginRequest, LoginResponse
from domain.schemas.category_schemas import CategoryResponse, DocumentTypeResponse
from domain.schemas.document_schemas import (
    CategoryRef,
    DocumentTypeRef,
    DocumentCreate,
    DocumentResponse,
    DocumentFilter,
)
from domain.schemas.asset_schemas import AssetCreate, AssetResponse
from domain.schemas.dashboard_schemas import (
    DateRange,
    MonthlyGraphResponse,
    CategoryTotal,
    MonthSpending,
    TypeTotal,
    YearlySumResponse,
    CategorySeries,
    CategoryTimeseriesResponse,
    DashboardOverview,
)
from domain.schemas.food_schemas import (
    FoodItemCreate,
    FoodItemResponse,
    FoodItemQuantity,
    FoodTransactionCreate,
    FoodTransactionUpdate,
    FoodTransactionResponse,
)

__all__ = [
    # Auth schemas
    "LoginRequest",
    "LoginResponse",
    # Category schemas
    "CategoryResponse",
    "DocumentTypeResponse",
    # Document schemas
    "CategoryRef",
    "DocumentTypeRef",
    "DocumentCreate",
    "DocumentResponse",
    "DocumentFilter",
    # Asset schemas
    "AssetCreate",
    "AssetResponse",
    # Dashboard schemas
    "DateRange",
    "MonthlyGraphResponse",
    "CategoryTotal",
    "MonthSpending",
    "TypeTotal",
    "YearlySumResponse",
    "CategorySeries",
    "CategoryTimeseriesResponse",
    "DashboardOverview",
    # Food schemas
    "FoodItemCreate",
    "FoodItemResponse",
    "FoodItemQuantity",
    "FoodTransactionCreate",
    "FoodTransactionUpdate",
    "FoodTransactionResponse",
]
