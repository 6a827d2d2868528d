"""Food inventory routes: items, stock levels and the transaction ledger"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import require_session
from api.responses import AUTH_ERROR_RESPONSES, success_response
from domain.mappers import FoodMapper
from domain.models import get_db_session
from domain.schemas.food_schemas import (
    FoodItemCreate,
    FoodItemQuantity,
    FoodItemResponse,
    FoodTransactionCreate,
    FoodTransactionResponse,
    FoodTransactionUpdate,
)
from services.food_service import FoodService

router = APIRouter(
    prefix="/food",
    tags=["Food"],
    dependencies=[Depends(require_session)],
    responses=AUTH_ERROR_RESPONSES,
)
logger = logging.getLogger("scpp.api.food")


# ----------------------------------------------------------------------------
# Items
# ----------------------------------------------------------------------------


@router.get("/items", response_model=List[FoodItemResponse])
def list_items(id: List[int] = Query(default=[]), db: Session = Depends(get_db_session)):
    return [FoodItemResponse.model_validate(i) for i in FoodService.list_items(db, id)]


@router.post("/items", status_code=status.HTTP_201_CREATED)
def create_item(payload: FoodItemCreate, db: Session = Depends(get_db_session)):
    item = FoodService.create_item(db, payload)
    return success_response(
        data=FoodItemResponse.model_validate(item), message="Food item created"
    )


@router.put("/items/{food_item_id}")
def update_item(
    food_item_id: int, payload: FoodItemCreate, db: Session = Depends(get_db_session)
):
    item = FoodService.update_item(db, food_item_id, payload)
    return success_response(
        data=FoodItemResponse.model_validate(item), message="Food item updated"
    )


@router.delete("/items/{food_item_id}")
def delete_item(food_item_id: int, db: Session = Depends(get_db_session)):
    """Delete an item and every ledger row for it"""
    FoodService.delete_item(db, food_item_id)
    return success_response(data={"id": food_item_id}, message="Food item deleted")


@router.get("/item-quantity", response_model=List[FoodItemQuantity])
def item_quantities(db: Session = Depends(get_db_session)):
    """Stock per item, summed from the ledger"""
    return FoodService.item_quantities(db)


# ----------------------------------------------------------------------------
# Ledger
# ----------------------------------------------------------------------------


@router.get("/transactions", response_model=List[FoodTransactionResponse])
def list_transactions(
    food_item_id: Optional[int] = Query(None), db: Session = Depends(get_db_session)
):
    rows = FoodService.list_transactions(db, food_item_id)
    return [FoodMapper.transaction_to_response(tx, name, unit) for tx, name, unit in rows]


@router.post("/transactions", status_code=status.HTTP_201_CREATED)
def create_transaction(
    payload: FoodTransactionCreate, db: Session = Depends(get_db_session)
):
    """
    Record a restock, consumption or adjustment.

    Restocks (and positive adjustments) open a lot. Consumption (and negative
    adjustments) draw from the lots that expire first and return one row per
    lot touched.
    """
    rows = FoodService.record_transaction(db, payload)
    return success_response(
        data=[FoodMapper.transaction_to_response(tx) for tx in rows],
        message="Transaction recorded",
    )


@router.put("/transactions/{transaction_id}")
def update_transaction(
    transaction_id: int,
    payload: FoodTransactionUpdate,
    db: Session = Depends(get_db_session),
):
    tx, changed = FoodService.update_transaction(db, transaction_id, payload)
    return success_response(
        data=FoodMapper.transaction_to_response(tx),
        message="Transaction updated" if changed else "No changes",
    )


@router.delete("/transactions/{transaction_id}")
def delete_transaction(transaction_id: int, db: Session = Depends(get_db_session)):
    FoodService.delete_transaction(db, transaction_id)
    return success_response(data={"id": transaction_id}, message="Transaction deleted")
