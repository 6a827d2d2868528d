from typing import List

from sqlalchemy.orm import Session

from domain.models import Category, DocumentType, retry_transient
from repositories import CategoryRepository, DocumentTypeRepository


class CategoryService:
    @staticmethod
    @retry_transient
    def list_categories(db: Session) -> List[Category]:
        return CategoryRepository(db).list_ordered()

    @staticmethod
    @retry_transient
    def list_document_types(db: Session) -> List[DocumentType]:
        return DocumentTypeRepository(db).list_all()

    @staticmethod
    @retry_transient
    def create_category(db: Session, description: str, sort_order: int = 0) -> Category:
        """Insert one category; used by the seeding script"""
        category = CategoryRepository(db).add(
            Category(description=description.strip(), sort_order=sort_order)
        )
        db.commit()
        return category
