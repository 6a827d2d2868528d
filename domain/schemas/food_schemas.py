"""Schemas for food items and the inventory ledger"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from domain.enums import TransactionType


class FoodItemCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    unit: str = Field(..., min_length=1, max_length=50)


class FoodItemResponse(BaseModel):
    food_item_id: int
    name: str
    unit: str

    model_config = {"from_attributes": True}


class FoodItemQuantity(BaseModel):
    """Item with its ledger-derived stock level"""

    id: int
    name: str
    unit: str
    quantity: float
    last_transaction_at: Optional[datetime] = None


class FoodTransactionCreate(BaseModel):
    """
    Ledger entry request.

    restock/consumption take a positive quantity; adjustment takes a signed one
    (positive opens a lot, negative draws stock down).
    """

    food_item_id: int = Field(..., ge=1)
    quantity: Decimal = Field(..., max_digits=14, decimal_places=3)
    transaction_type: TransactionType
    note: Optional[str] = None
    code: Optional[str] = None
    best_before: Optional[date] = None


class FoodTransactionUpdate(BaseModel):
    """Only fields present in the request body are applied"""

    quantity: Optional[Decimal] = Field(None, gt=0, max_digits=14, decimal_places=3)
    note: Optional[str] = None
    code: Optional[str] = None
    best_before: Optional[date] = None


class FoodTransactionResponse(BaseModel):
    transaction_id: int
    food_item_id: int
    item_name: Optional[str] = None
    item_unit: Optional[str] = None
    change_qty: float
    transaction_type: TransactionType
    occurred_at: datetime
    note: Optional[str] = None
    code: Optional[str] = None
    best_before: Optional[date] = None
    lot_id: Optional[int] = None
    remaining_quantity: Optional[float] = None
