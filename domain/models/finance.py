"""
Financial records: categories, document types, documents and assets.
"""

from sqlalchemy import (
    Column,
    Integer,
    Text,
    Date,
    TIMESTAMP,
    Numeric,
    LargeBinary,
    ForeignKey,
)
from sqlalchemy.orm import relationship

from domain.models.database import Base


class Category(Base):
    """Spending category shared by documents and assets"""

    __tablename__ = "category"

    category_id = Column(Integer, primary_key=True, autoincrement=True)
    description = Column(Text, nullable=False)
    sort_order = Column(Integer, nullable=False, default=0)


class DocumentType(Base):
    """Expense / savings / income (see domain.enums.DocumentKind)"""

    __tablename__ = "document_type"

    document_type_id = Column(Integer, primary_key=True, autoincrement=False)
    description = Column(Text, nullable=False)


class Document(Base):
    """A single monetary movement"""

    __tablename__ = "document"

    document_id = Column(Integer, primary_key=True, autoincrement=True)
    document_type_id = Column(
        Integer, ForeignKey("document_type.document_type_id"), nullable=False, index=True
    )
    purpose = Column(Text, nullable=False, default="")
    amount = Column(Numeric(14, 2), nullable=False)
    date = Column(Date, nullable=False, index=True)
    category_id = Column(
        Integer, ForeignKey("category.category_id", ondelete="SET NULL"), nullable=True
    )

    category = relationship("Category", lazy="joined")
    document_type = relationship("DocumentType", lazy="joined")


class Asset(Base):
    """Binary attachment (receipt scan, statement) filed under a category"""

    __tablename__ = "asset"

    asset_id = Column(Integer, primary_key=True, autoincrement=True)
    category_id = Column(
        Integer, ForeignKey("category.category_id"), nullable=False
    )
    description = Column(Text, nullable=False, default="")
    data = Column(LargeBinary, nullable=False)
    recorded_at = Column(TIMESTAMP(timezone=False), nullable=False)

    category = relationship("Category", lazy="joined")
