"""Schemas for financial documents"""

from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class CategoryRef(BaseModel):
    """Category embedded in a document or asset"""

    id: int
    description: str


class DocumentTypeRef(BaseModel):
    """Document type embedded in a document"""

    id: int
    description: str


class DocumentCreate(BaseModel):
    """Schema for creating or replacing a document"""

    document_type_id: int = Field(..., ge=1, description="1=expense, 2=savings, 3=income")
    purpose: str = Field("", max_length=500)
    amount: Decimal = Field(..., max_digits=14, decimal_places=2)
    date: date
    category_id: Optional[int] = Field(None, ge=1)


class DocumentResponse(BaseModel):
    document_id: int
    document_type_id: int
    purpose: str
    amount: float
    date: date
    category_id: Optional[int]
    category: Optional[CategoryRef]
    document_type: DocumentTypeRef


class DocumentFilter(BaseModel):
    """
    Filters for GET /documents.

    search_phrase only applies when it has at least 3 characters. With
    search_ignores_filters set, the date and category filters are dropped
    so a phrase search spans the whole history.
    """

    document_type_ids: List[int] = Field(default_factory=list)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    category_ids: List[int] = Field(default_factory=list)
    search_phrase: Optional[str] = None
    search_ignores_filters: bool = False
    ids: List[int] = Field(default_factory=list)

    @model_validator(mode="after")
    def _strip_phrase(self):
        if self.search_phrase is not None:
            self.search_phrase = self.search_phrase.strip() or None
        return self

    @property
    def effective_phrase(self) -> Optional[str]:
        if self.search_phrase and len(self.search_phrase) >= 3:
            return self.search_phrase
        return None

    @property
    def ignore_other_filters(self) -> bool:
        return self.effective_phrase is not None and self.search_ignores_filters
