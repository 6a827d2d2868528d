"""Financial document routes"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import require_session
from api.responses import AUTH_ERROR_RESPONSES, success_response
from domain.mappers import DocumentMapper
from domain.models import get_db_session
from domain.schemas.document_schemas import (
    DocumentCreate,
    DocumentFilter,
    DocumentResponse,
)
from services.document_service import DocumentService

router = APIRouter(
    prefix="/documents",
    tags=["Documents"],
    dependencies=[Depends(require_session)],
    responses=AUTH_ERROR_RESPONSES,
)
logger = logging.getLogger("scpp.api.documents")


@router.get("", response_model=List[DocumentResponse])
def list_documents(
    document_type_id: List[int] = Query(default=[]),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    category_id: List[int] = Query(default=[]),
    search_phrase: Optional[str] = Query(None, max_length=200),
    search_ignores_filters: bool = Query(False),
    id: List[int] = Query(default=[]),
    db: Session = Depends(get_db_session),
):
    """
    List documents, newest first.

    Repeat document_type_id, category_id or id to match several values.
    search_phrase is a case-insensitive match on purpose and needs at least
    3 characters; with search_ignores_filters the date and category filters
    are ignored.
    """
    filters = DocumentFilter(
        document_type_ids=document_type_id,
        start_date=start_date,
        end_date=end_date,
        category_ids=category_id,
        search_phrase=search_phrase,
        search_ignores_filters=search_ignores_filters,
        ids=id,
    )
    documents = DocumentService.list_documents(db, filters)
    return [DocumentMapper.to_response(d) for d in documents]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_document(payload: DocumentCreate, db: Session = Depends(get_db_session)):
    document = DocumentService.create_document(db, payload)
    return success_response(
        data=DocumentMapper.to_response(document), message="Document created"
    )


@router.put("/{document_id}")
def update_document(
    document_id: int, payload: DocumentCreate, db: Session = Depends(get_db_session)
):
    """Replace all fields of a document"""
    document = DocumentService.update_document(db, document_id, payload)
    return success_response(
        data=DocumentMapper.to_response(document), message="Document updated"
    )


@router.delete("/{document_id}")
def delete_document(document_id: int, db: Session = Depends(get_db_session)):
    DocumentService.delete_document(db, document_id)
    return success_response(data={"id": document_id}, message="Document deleted")
