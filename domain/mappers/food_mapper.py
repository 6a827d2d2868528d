"""
Food domain mappers.
"""

from typing import Optional

from domain.models import FoodTransaction
from domain.schemas.food_schemas import FoodTransactionResponse


class FoodMapper:
    """Mapper for ledger rows."""

    @staticmethod
    def transaction_to_response(
        tx: FoodTransaction,
        item_name: Optional[str] = None,
        item_unit: Optional[str] = None,
    ) -> FoodTransactionResponse:
        return FoodTransactionResponse(
            transaction_id=tx.transaction_id,
            food_item_id=tx.food_item_id,
            item_name=item_name,
            item_unit=item_unit,
            change_qty=float(tx.change_qty),
            transaction_type=tx.transaction_type,
            occurred_at=tx.occurred_at,
            note=tx.note,
            code=tx.code,
            best_before=tx.best_before,
            lot_id=tx.lot_id,
            remaining_quantity=(
                float(tx.remaining_quantity)
                if tx.remaining_quantity is not None
                else None
            ),
        )
