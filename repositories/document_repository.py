"""
Document Repository - Data access layer for financial documents
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Document
from domain.schemas.document_schemas import DocumentFilter


class DocumentRepository(BaseRepository[Document]):
    """Repository for document data access"""

    def __init__(self, db: Session):
        super().__init__(db, Document)

    def search(self, filters: DocumentFilter, limit: int) -> List[Document]:
        """
        Filtered document listing, newest first.

        Args:
            filters: DocumentFilter with optional type/category/id lists,
                date bounds and a search phrase
            limit: maximum number of rows

        Returns:
            Documents ordered by date desc, id desc
        """
        stmt = select(Document)

        if filters.document_type_ids:
            stmt = stmt.where(Document.document_type_id.in_(filters.document_type_ids))
        if filters.ids:
            stmt = stmt.where(Document.document_id.in_(filters.ids))

        phrase = filters.effective_phrase
        if phrase:
            stmt = stmt.where(Document.purpose.icontains(phrase, autoescape=True))

        if not filters.ignore_other_filters:
            if filters.start_date:
                stmt = stmt.where(Document.date >= filters.start_date)
            if filters.end_date:
                stmt = stmt.where(Document.date <= filters.end_date)
            if filters.category_ids:
                stmt = stmt.where(Document.category_id.in_(filters.category_ids))

        stmt = stmt.order_by(Document.date.desc(), Document.document_id.desc()).limit(
            limit
        )
        return list(self.db.scalars(stmt).unique())
