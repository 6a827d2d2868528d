"""
Financial document business logic.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import NotFoundError, UnprocessableError
from domain.models import Document, retry_transient
from domain.schemas.document_schemas import DocumentCreate, DocumentFilter
from repositories import (
    CategoryRepository,
    DocumentRepository,
    DocumentTypeRepository,
)

logger = logging.getLogger("scpp.documents")


class DocumentService:
    @staticmethod
    def _check_references(db: Session, payload: DocumentCreate) -> None:
        """Reject writes pointing at a missing document type or category"""
        if not DocumentTypeRepository(db).exists(payload.document_type_id):
            raise UnprocessableError(
                f"Unknown document type: {payload.document_type_id}",
                details={"document_type_id": payload.document_type_id},
            )
        if payload.category_id is not None and not CategoryRepository(db).exists(
            payload.category_id
        ):
            raise UnprocessableError(
                f"Unknown category: {payload.category_id}",
                details={"category_id": payload.category_id},
            )

    @staticmethod
    @retry_transient
    def list_documents(db: Session, filters: DocumentFilter) -> List[Document]:
        """
        List documents matching the filters, newest first.

        At most settings.document_list_limit rows are returned.
        """
        return DocumentRepository(db).search(filters, settings.document_list_limit)

    @staticmethod
    @retry_transient
    def create_document(db: Session, payload: DocumentCreate) -> Document:
        """
        Create a document.

        Raises:
            UnprocessableError: If the document type or category does not exist
        """
        DocumentService._check_references(db, payload)
        try:
            document = DocumentRepository(db).add(Document(**payload.model_dump()))
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Error creating document")
            raise
        logger.info(
            f"Created document {document.document_id} "
            f"(type={document.document_type_id}, amount={document.amount})"
        )
        return document

    @staticmethod
    @retry_transient
    def update_document(db: Session, document_id: int, payload: DocumentCreate) -> Document:
        """
        Replace every field of an existing document.

        Raises:
            NotFoundError: If the document does not exist
            UnprocessableError: If the document type or category does not exist
        """
        repo = DocumentRepository(db)
        document = repo.get_by_id(document_id)
        if document is None:
            raise NotFoundError(f"Document not found: {document_id}")
        DocumentService._check_references(db, payload)

        try:
            for field, value in payload.model_dump().items():
                setattr(document, field, value)
            db.flush()
            # Nothing is read back after commit; the mapper lazy-loads these
            db.expire(document, ["category", "document_type"])
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Error updating document %s", document_id)
            raise
        return document

    @staticmethod
    @retry_transient
    def delete_document(db: Session, document_id: int) -> None:
        repo = DocumentRepository(db)
        document = repo.get_by_id(document_id)
        if document is None:
            raise NotFoundError(f"Document not found: {document_id}")
        try:
            repo.remove(document)
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Error deleting document %s", document_id)
            raise
        logger.info(f"Deleted document {document_id}")
