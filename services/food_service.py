"""
Food inventory: items and the transaction ledger.

Stock is never stored directly. The quantity of an item is the sum of its
ledger rows, and every positive row is a lot whose remaining_quantity tracks
what is left of it. Consumption draws from lots first-expiry-first-out and
writes one negative row per lot it touches.
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError, ServiceValidationError, UnprocessableError
from domain.enums import TransactionType
from domain.models import FoodItem, FoodTransaction, retry_transient
from domain.schemas.food_schemas import (
    FoodItemCreate,
    FoodTransactionCreate,
    FoodTransactionUpdate,
)
from repositories import FoodItemRepository, FoodTransactionRepository

logger = logging.getLogger("scpp.food")


def signed_change(transaction_type: TransactionType, quantity: Decimal) -> Decimal:
    """
    Turn a request quantity into the ledger delta.

    Raises:
        ServiceValidationError: For a zero quantity, or a negative quantity on
            a restock or consumption
    """
    if quantity == 0:
        raise ServiceValidationError("Quantity must not be zero")
    if transaction_type == TransactionType.ADJUSTMENT:
        return quantity
    if quantity < 0:
        raise ServiceValidationError(
            f"Quantity must be positive for {transaction_type.value}"
        )
    if transaction_type == TransactionType.CONSUMPTION:
        return -quantity
    return quantity


class FoodService:
    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    @staticmethod
    @retry_transient
    def list_items(db: Session, ids: Optional[List[int]] = None) -> List[FoodItem]:
        return FoodItemRepository(db).list_items(ids)

    @staticmethod
    @retry_transient
    def create_item(db: Session, payload: FoodItemCreate) -> FoodItem:
        try:
            item = FoodItemRepository(db).add(
                FoodItem(name=payload.name.strip(), unit=payload.unit.strip())
            )
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Error creating food item")
            raise
        logger.info(f"Created food item {item.food_item_id} ({item.name})")
        return item

    @staticmethod
    @retry_transient
    def update_item(db: Session, food_item_id: int, payload: FoodItemCreate) -> FoodItem:
        item = FoodItemRepository(db).get_by_id(food_item_id)
        if item is None:
            raise NotFoundError(f"Food item not found: {food_item_id}")
        try:
            item.name = payload.name.strip()
            item.unit = payload.unit.strip()
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Error updating food item %s", food_item_id)
            raise
        return item

    @staticmethod
    @retry_transient
    def delete_item(db: Session, food_item_id: int) -> None:
        """Delete an item together with its ledger"""
        repo = FoodItemRepository(db)
        item = repo.get_for_update(food_item_id)
        if item is None:
            raise NotFoundError(f"Food item not found: {food_item_id}")
        try:
            repo.delete_with_transactions(item)
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Error deleting food item %s", food_item_id)
            raise
        logger.info(f"Deleted food item {food_item_id} and its ledger")

    @staticmethod
    @retry_transient
    def item_quantities(db: Session) -> List[Dict[str, Any]]:
        """Current stock per item, derived from the ledger"""
        return [
            {
                "id": item.food_item_id,
                "name": item.name,
                "unit": item.unit,
                "quantity": float(quantity or 0),
                "last_transaction_at": last_at,
            }
            for item, quantity, last_at in FoodItemRepository(db).quantities()
        ]

    # ------------------------------------------------------------------
    # Ledger
    # ------------------------------------------------------------------

    @staticmethod
    @retry_transient
    def list_transactions(
        db: Session, food_item_id: Optional[int] = None
    ) -> List[Tuple[FoodTransaction, str, str]]:
        return FoodTransactionRepository(db).list_with_items(food_item_id)

    @staticmethod
    @retry_transient
    def record_transaction(
        db: Session, payload: FoodTransactionCreate
    ) -> List[FoodTransaction]:
        """
        Append a change to the ledger in a single database transaction.

        A positive change opens a new lot. A negative change is spread over
        the open lots ordered by best_before (undated last), then age, with
        one draw row per lot touched.

        Args:
            db: Database session
            payload: Item, quantity, type and optional note/code/best_before

        Returns:
            The rows written: the new lot, or the draw rows

        Raises:
            ServiceValidationError: Zero quantity or wrong sign for the type
            NotFoundError: If the item does not exist
            UnprocessableError: If the draw exceeds the stock on hand
        """
        change = signed_change(payload.transaction_type, payload.quantity)

        item_repo = FoodItemRepository(db)
        tx_repo = FoodTransactionRepository(db)

        item = item_repo.get_for_update(payload.food_item_id)
        if item is None:
            db.rollback()
            raise NotFoundError(f"Food item not found: {payload.food_item_id}")

        now = datetime.now(timezone.utc)
        if change > 0:
            try:
                lot = tx_repo.add(
                    FoodTransaction(
                        food_item_id=item.food_item_id,
                        change_qty=change,
                        transaction_type=payload.transaction_type.value,
                        occurred_at=now,
                        note=payload.note,
                        code=payload.code,
                        best_before=payload.best_before,
                        remaining_quantity=change,
                    )
                )
                db.commit()
            except Exception:
                db.rollback()
                logger.exception("Error opening lot for item %s", item.food_item_id)
                raise
            logger.info(
                f"Opened lot {lot.transaction_id} for item {item.food_item_id}: "
                f"+{change} {item.unit}"
            )
            return [lot]

        needed = -change
        lots = tx_repo.open_lots(item.food_item_id)
        available = sum((Decimal(lot.remaining_quantity) for lot in lots), Decimal("0"))
        if available < needed:
            error = UnprocessableError(
                f"Insufficient stock for {item.name}: requested {needed}, available {available}",
                details={"requested": float(needed), "available": float(available)},
                code="INSUFFICIENT_STOCK",
            )
            db.rollback()
            raise error

        draws = []
        try:
            for lot in lots:
                if needed <= 0:
                    break
                take = min(Decimal(lot.remaining_quantity), needed)
                lot.remaining_quantity = Decimal(lot.remaining_quantity) - take
                needed -= take
                draws.append(
                    tx_repo.add(
                        FoodTransaction(
                            food_item_id=item.food_item_id,
                            change_qty=-take,
                            transaction_type=payload.transaction_type.value,
                            occurred_at=now,
                            note=payload.note,
                            code=payload.code,
                            best_before=lot.best_before,
                            lot_id=lot.transaction_id,
                        )
                    )
                )
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Error drawing stock for item %s", item.food_item_id)
            raise

        logger.info(
            f"Drew {-change} {item.unit} of item {item.food_item_id} from {len(draws)} lot(s)"
        )
        return draws

    @staticmethod
    @retry_transient
    def update_transaction(
        db: Session, transaction_id: int, payload: FoodTransactionUpdate
    ) -> Tuple[FoodTransaction, bool]:
        """
        Update note, code, best_before and, on an untouched lot, quantity.

        Returns:
            (transaction, changed) where changed is False when the request
            matched what was already stored

        Raises:
            NotFoundError: If the transaction does not exist
            UnprocessableError: If quantity is changed on a draw row or on a
                lot that has already been drawn from
        """
        tx_repo = FoodTransactionRepository(db)
        tx = tx_repo.get_for_update(transaction_id)
        if tx is None:
            db.rollback()
            raise NotFoundError(f"Transaction not found: {transaction_id}")

        fields = payload.model_dump(exclude_unset=True)
        quantity = fields.pop("quantity", None)

        changes = {k: v for k, v in fields.items() if getattr(tx, k) != v}
        if quantity is not None and Decimal(tx.change_qty) != quantity:
            if not tx.is_lot or tx_repo.count_draws(tx.transaction_id) > 0:
                db.rollback()
                raise UnprocessableError(
                    "Quantity can only change on a lot that has not been drawn from",
                    details={"transaction_id": transaction_id},
                )
            changes["change_qty"] = quantity
            changes["remaining_quantity"] = quantity

        if not changes:
            return tx, False

        try:
            for field, value in changes.items():
                setattr(tx, field, value)
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Error updating transaction %s", transaction_id)
            raise
        logger.info(f"Updated transaction {transaction_id}: {sorted(changes)}")
        return tx, True

    @staticmethod
    @retry_transient
    def delete_transaction(db: Session, transaction_id: int) -> None:
        """
        Remove a ledger row.

        Deleting a draw gives its quantity back to the lot it came from.

        Raises:
            NotFoundError: If the transaction does not exist
            UnprocessableError: If the row is a lot that has draws against it
        """
        tx_repo = FoodTransactionRepository(db)
        tx = tx_repo.get_for_update(transaction_id)
        if tx is None:
            db.rollback()
            raise NotFoundError(f"Transaction not found: {transaction_id}")

        if tx.is_lot and tx_repo.count_draws(tx.transaction_id) > 0:
            db.rollback()
            raise UnprocessableError(
                "Cannot delete a lot that has been drawn from; delete its draws first",
                details={"transaction_id": transaction_id},
            )

        try:
            if tx.lot_id is not None:
                lot = tx_repo.get_for_update(tx.lot_id)
                if lot is not None:
                    lot.remaining_quantity = Decimal(lot.remaining_quantity) - Decimal(
                        tx.change_qty
                    )
            tx_repo.remove(tx)
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Error deleting transaction %s", transaction_id)
            raise
        logger.info(f"Deleted transaction {transaction_id}")
