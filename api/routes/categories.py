"""Category and document type lookups"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.dependencies import require_session
from api.responses import AUTH_ERROR_RESPONSES
from domain.models import get_db_session
from domain.schemas.category_schemas import CategoryResponse, DocumentTypeResponse
from services.category_service import CategoryService

router = APIRouter(
    tags=["Categories"],
    dependencies=[Depends(require_session)],
    responses=AUTH_ERROR_RESPONSES,
)


@router.get("/categories", response_model=List[CategoryResponse])
def list_categories(db: Session = Depends(get_db_session)):
    """All categories in display order"""
    return [CategoryResponse.model_validate(c) for c in CategoryService.list_categories(db)]


@router.get("/document-types", response_model=List[DocumentTypeResponse])
def list_document_types(db: Session = Depends(get_db_session)):
    return [
        DocumentTypeResponse.model_validate(t)
        for t in CategoryService.list_document_types(db)
    ]
