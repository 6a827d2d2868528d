"""
Dashboard Repository - aggregate queries over documents
"""

from datetime import date
from typing import List, Optional, Tuple

from sqlalchemy import extract, func, select
from sqlalchemy.orm import Session

from domain.models import Category, Document, DocumentType


class DashboardRepository:
    """Read-only rollups; returns plain row tuples, totals as Decimal or None"""

    def __init__(self, db: Session):
        self.db = db

    def monthly_totals(
        self, document_type_id: int, start: date, end: date
    ) -> List[Tuple[int, int, object]]:
        """(year, month, total) for one document type between start and end inclusive"""
        year = extract("year", Document.date)
        month = extract("month", Document.date)
        stmt = (
            select(year, month, func.sum(Document.amount))
            .where(
                Document.document_type_id == document_type_id,
                Document.date >= start,
                Document.date <= end,
            )
            .group_by(year, month)
            .order_by(year, month)
        )
        return [tuple(row) for row in self.db.execute(stmt)]

    def total_before(self, document_type_id: int, before: date):
        """Sum of one document type strictly before a date"""
        stmt = select(func.sum(Document.amount)).where(
            Document.document_type_id == document_type_id, Document.date < before
        )
        return self.db.scalar(stmt)

    def total_between(
        self, document_type_id: Optional[int], start: date, end: date
    ):
        stmt = select(func.sum(Document.amount)).where(
            Document.date >= start, Document.date <= end
        )
        if document_type_id is not None:
            stmt = stmt.where(Document.document_type_id == document_type_id)
        return self.db.scalar(stmt)

    def totals_by_category(
        self, document_type_id: int, start: Optional[date], end: Optional[date]
    ) -> List[Tuple[str, object]]:
        """
        (category description, total) ordered by total desc.

        Rows are keyed by description; categories sharing a name are summed
        into one row.
        """
        total = func.sum(Document.amount).label("total")
        stmt = (
            select(Category.description, total)
            .select_from(Document)
            .join(Category, Document.category_id == Category.category_id)
            .where(Document.document_type_id == document_type_id)
        )
        if start:
            stmt = stmt.where(Document.date >= start)
        if end:
            stmt = stmt.where(Document.date <= end)
        stmt = stmt.group_by(Category.description).order_by(
            total.desc(), Category.description
        )
        return [tuple(row) for row in self.db.execute(stmt)]

    def totals_by_type(self, start: date, end: date) -> List[Tuple[int, str, object]]:
        """(document_type_id, description, total) for every type with documents in range"""
        stmt = (
            select(
                DocumentType.document_type_id,
                DocumentType.description,
                func.sum(Document.amount),
            )
            .select_from(Document)
            .join(DocumentType, Document.document_type_id == DocumentType.document_type_id)
            .where(Document.date >= start, Document.date <= end)
            .group_by(DocumentType.document_type_id, DocumentType.description)
            .order_by(DocumentType.document_type_id)
        )
        return [tuple(row) for row in self.db.execute(stmt)]

    def monthly_totals_by_category(
        self, document_type_id: int, start: date, end: date
    ) -> List[Tuple[int, str, int, int, object]]:
        """(category_id, description, year, month, total) rows for a time series"""
        year = extract("year", Document.date)
        month = extract("month", Document.date)
        stmt = (
            select(
                Category.category_id,
                Category.description,
                year,
                month,
                func.sum(Document.amount),
            )
            .select_from(Document)
            .join(Category, Document.category_id == Category.category_id)
            .where(
                Document.document_type_id == document_type_id,
                Document.date >= start,
                Document.date <= end,
            )
            .group_by(Category.category_id, Category.description, year, month)
        )
        return [tuple(row) for row in self.db.execute(stmt)]
