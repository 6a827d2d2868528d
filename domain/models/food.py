"""
Food inventory models: items and the append-only transaction ledger.
"""

from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    Integer,
    Text,
    Date,
    TIMESTAMP,
    Numeric,
    ForeignKey,
    CheckConstraint,
)
from sqlalchemy.orm import relationship

from domain.models.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FoodItem(Base):
    """Something kept in stock, measured in a single unit"""

    __tablename__ = "food_item"

    food_item_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    unit = Column(Text, nullable=False)

    transactions = relationship(
        "FoodTransaction",
        back_populates="item",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class FoodTransaction(Base):
    """
    One ledger row. Positive rows open a lot (remaining_quantity tracks what
    is left of it); negative rows draw from exactly one lot via lot_id.
    """

    __tablename__ = "food_transaction"

    transaction_id = Column(Integer, primary_key=True, autoincrement=True)
    food_item_id = Column(
        Integer,
        ForeignKey("food_item.food_item_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    change_qty = Column(Numeric(14, 3), nullable=False)
    transaction_type = Column(Text, nullable=False)
    occurred_at = Column(TIMESTAMP(timezone=True), nullable=False, default=_utcnow)
    note = Column(Text)
    code = Column(Text)
    best_before = Column(Date)
    lot_id = Column(
        Integer,
        ForeignKey("food_transaction.transaction_id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    remaining_quantity = Column(Numeric(14, 3), nullable=True)

    item = relationship("FoodItem", back_populates="transactions")

    __table_args__ = (
        CheckConstraint("change_qty <> 0", name="ck_food_tx_nonzero"),
        CheckConstraint(
            "remaining_quantity IS NULL OR remaining_quantity >= 0",
            name="ck_food_tx_remaining_nonneg",
        ),
    )

    @property
    def is_lot(self) -> bool:
        return self.remaining_quantity is not None
