"""
Food Repository - items and the inventory ledger
"""

from typing import List, Optional

from sqlalchemy import and_, delete, func, select
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import FoodItem, FoodTransaction


class FoodItemRepository(BaseRepository[FoodItem]):
    """Repository for food items"""

    def __init__(self, db: Session):
        super().__init__(db, FoodItem)

    def get_for_update(self, food_item_id: int) -> Optional[FoodItem]:
        """Get item and lock its row for the rest of the transaction"""
        stmt = (
            select(FoodItem)
            .where(FoodItem.food_item_id == food_item_id)
            .with_for_update()
        )
        return self.db.scalars(stmt).first()

    def list_items(self, ids: Optional[List[int]] = None) -> List[FoodItem]:
        stmt = select(FoodItem)
        if ids:
            stmt = stmt.where(FoodItem.food_item_id.in_(ids))
        return list(self.db.scalars(stmt.order_by(FoodItem.name, FoodItem.food_item_id)))

    def delete_with_transactions(self, item: FoodItem) -> None:
        """Remove an item and its whole ledger"""
        # Draw rows reference lots, so remove them before the lots themselves.
        self.db.execute(
            delete(FoodTransaction).where(
                FoodTransaction.food_item_id == item.food_item_id,
                FoodTransaction.lot_id.isnot(None),
            )
        )
        self.db.execute(
            delete(FoodTransaction).where(
                FoodTransaction.food_item_id == item.food_item_id
            )
        )
        self.db.delete(item)
        self.db.flush()

    def quantities(self) -> List[tuple]:
        """(item, quantity, last_transaction_at) for every item, ordered by name"""
        stmt = (
            select(
                FoodItem,
                func.coalesce(func.sum(FoodTransaction.change_qty), 0),
                func.max(FoodTransaction.occurred_at),
            )
            .outerjoin(
                FoodTransaction, FoodTransaction.food_item_id == FoodItem.food_item_id
            )
            .group_by(FoodItem.food_item_id, FoodItem.name, FoodItem.unit)
            .order_by(FoodItem.name, FoodItem.food_item_id)
        )
        return [tuple(row) for row in self.db.execute(stmt)]


class FoodTransactionRepository(BaseRepository[FoodTransaction]):
    """Repository for ledger rows"""

    def __init__(self, db: Session):
        super().__init__(db, FoodTransaction)

    def get_for_update(self, transaction_id: int) -> Optional[FoodTransaction]:
        stmt = (
            select(FoodTransaction)
            .where(FoodTransaction.transaction_id == transaction_id)
            .with_for_update()
        )
        return self.db.scalars(stmt).first()

    def list_with_items(self, food_item_id: Optional[int] = None) -> List[tuple]:
        """(transaction, item name, item unit), newest first"""
        stmt = select(FoodTransaction, FoodItem.name, FoodItem.unit).join(
            FoodItem, FoodItem.food_item_id == FoodTransaction.food_item_id
        )
        if food_item_id is not None:
            stmt = stmt.where(FoodTransaction.food_item_id == food_item_id)
        stmt = stmt.order_by(
            FoodTransaction.occurred_at.desc(), FoodTransaction.transaction_id.desc()
        )
        return [tuple(row) for row in self.db.execute(stmt)]

    def open_lots(self, food_item_id: int) -> List[FoodTransaction]:
        """
        Lots with stock left, locked, in first-expiry-first-out order:
        best_before ascending with undated lots last, then oldest first.
        """
        stmt = (
            select(FoodTransaction)
            .where(
                and_(
                    FoodTransaction.food_item_id == food_item_id,
                    FoodTransaction.remaining_quantity.isnot(None),
                    FoodTransaction.remaining_quantity > 0,
                )
            )
            .order_by(
                FoodTransaction.best_before.is_(None),
                FoodTransaction.best_before.asc(),
                FoodTransaction.occurred_at.asc(),
                FoodTransaction.transaction_id.asc(),
            )
            .with_for_update()
        )
        return list(self.db.scalars(stmt))

    def count_draws(self, lot_id: int) -> int:
        stmt = select(func.count()).select_from(FoodTransaction).where(
            FoodTransaction.lot_id == lot_id
        )
        return self.db.scalar(stmt) or 0
