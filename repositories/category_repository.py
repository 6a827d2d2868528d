"""
Category and document type repositories
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Category, DocumentType


class CategoryRepository(BaseRepository[Category]):
    def __init__(self, db: Session):
        super().__init__(db, Category)

    def list_ordered(self) -> List[Category]:
        """All categories in display order"""
        stmt = select(Category).order_by(Category.sort_order, Category.category_id)
        return list(self.db.scalars(stmt))


class DocumentTypeRepository(BaseRepository[DocumentType]):
    def __init__(self, db: Session):
        super().__init__(db, DocumentType)

    def list_all(self) -> List[DocumentType]:
        stmt = select(DocumentType).order_by(DocumentType.document_type_id)
        return list(self.db.scalars(stmt))
