"""
Domain mappers package.
Handles transformation between ORM models and DTOs (Data Transfer Objects).
"""

from domain.mappers.finance_mapper import DocumentMapper, AssetMapper
from domain.mappers.food_mapper import FoodMapper

__all__ = ["DocumentMapper", "AssetMapper", "FoodMapper"]
